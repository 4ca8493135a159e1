"""Entry point for the SecureApp Customer API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); see ``secureapp_api.app.core.config`` for
the remaining settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from secureapp_api.app.core.config import settings
from secureapp_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    logging.getLogger(__name__).info(
        "%s running on %s:%d", settings.project_name, settings.host, settings.port
    )
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
