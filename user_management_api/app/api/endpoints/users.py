"""
User endpoints.

CRUD over the ``users`` resource plus the plain-text count.  Handlers
only translate between HTTP and ``UserService``: a missing user becomes
404 and ``DuplicateEmailError`` becomes 400 with the error message as
``detail``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import PlainTextResponse

from user_management_api.app.api.dependencies import get_user_service
from user_management_api.app.schemas.user import UserRead, UserRequest
from user_management_api.app.services.user_service import DuplicateEmailError, UserService


router = APIRouter()

USER_NOT_FOUND = "User not found"


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users."""
    users = await service.get_all_users()
    return [UserRead.model_validate(user) for user in users]


# Declared before ``/{user_id}`` so "count" is not parsed as an id.
@router.get("/count", response_class=PlainTextResponse)
async def get_user_count(service: UserService = Depends(get_user_service)) -> str:
    """Return the number of users as ``Total users: N``."""
    return f"Total users: {await service.get_user_count()}"


@router.get("/email/{email}", response_model=UserRead)
async def get_user_by_email(email: str, service: UserService = Depends(get_user_service)) -> UserRead:
    user = await service.get_user_by_email(email)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return UserRead.model_validate(user)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserRead:
    user = await service.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return UserRead.model_validate(user)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserRequest, service: UserService = Depends(get_user_service)
) -> UserRead:
    """Create a user.  Fails with 400 if the email is already registered."""
    try:
        user = await service.create_user(payload.name, payload.email)
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return UserRead.model_validate(user)


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: int,
    payload: UserRequest,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace a user's name and email."""
    try:
        user = await service.update_user(user_id, payload.name, payload.email)
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return UserRead.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> Response:
    if not await service.delete_user(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
