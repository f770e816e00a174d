"""Entry point for the User Management API.

Serves ``user_management_api.app.main:app`` with Uvicorn.  Host and
port come from ``HOST`` and ``PORT`` (defaults ``0.0.0.0`` and
``8080``); all other settings are read by ``core.config``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from user_management_api.app.core.config import settings
from user_management_api.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
