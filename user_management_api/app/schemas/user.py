"""
Pydantic models for user data.

``UserRequest`` is the body accepted by the create and update
endpoints; both fields are required and must not be blank.
``UserRead`` is the shape returned by the API.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserRequest(BaseModel):
    """Schema for creating or replacing a user."""

    name: str = Field(..., min_length=1, examples=["John Doe"])
    email: str = Field(..., min_length=1, examples=["john@example.com"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: Optional[int] = Field(None, examples=[1])
    name: str = Field(..., examples=["John Doe"])
    email: str = Field(..., examples=["john@example.com"])

    # Allow construction straight from ``models.user.User`` instances.
    model_config = {
        "from_attributes": True,
    }
