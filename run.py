"""Entry point for the Event Registry API server.

Starts the FastAPI application with Uvicorn on the host and port from
the environment (``HOST``, default ``0.0.0.0``; ``PORT``, default
``3000``).  The database named by ``DATABASE_URL`` is opened during
startup; if that fails the server exits without serving requests.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from event_api.app.core.config import settings
from event_api.app.main import app

logger = logging.getLogger(__name__)


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Server running at http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
