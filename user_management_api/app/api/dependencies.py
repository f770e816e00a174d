"""
FastAPI dependencies shared by the endpoint modules.

Services are wired once in ``main.create_app`` and stored on
``app.state``; route handlers receive them through these functions.
"""

from fastapi import Request

from user_management_api.app.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` wired into the running application."""
    return request.app.state.user_service
