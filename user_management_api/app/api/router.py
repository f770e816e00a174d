"""
Top-level router of the API.

Aggregates the endpoint routers.  When a new resource is added, include
its router here.
"""

from fastapi import APIRouter

from .endpoints import info, users

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(users.router, prefix="/api/users", tags=["users"])
