"""
Welcome and status endpoints.

Both return plain text and are useful as liveness checks for the
front end and for container health probes.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter()

WELCOME_MESSAGE = "Hello from User Management API!"
STATUS_MESSAGE = "Application is running successfully!"


@router.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    return WELCOME_MESSAGE


@router.get("/api/status", response_class=PlainTextResponse)
async def get_status() -> str:
    return STATUS_MESSAGE
