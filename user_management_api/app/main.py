"""
Main entrypoint for the User Management API.

This module assembles the FastAPI application: it sets up logging,
wires the service layer to its repository and includes the routers.
``create_app`` builds the app, which is then instantiated at module
import time as ``app`` so it can be served directly, e.g.::

    uvicorn user_management_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .repositories.user_repository import SQLiteUserRepository
from .services.user_service import UserService


def create_app(user_service: Optional[UserService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    user_service : Optional[UserService]
        Service handle used by the user endpoints.  When omitted a
        ``UserService`` over ``SQLiteUserRepository`` at
        ``settings.database_url`` is created and the database schema is
        applied on start-up.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings)
    logger = logging.getLogger(__name__)
    init_storage = user_service is None
    if user_service is None:
        user_service = UserService(SQLiteUserRepository())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if init_storage:
            # Creates the database file on first run.
            init_db()
            logger.info("Database ready")
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # The browser front end is served from its own origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.user_service = user_service
    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
