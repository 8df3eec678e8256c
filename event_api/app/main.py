"""
Main entrypoint for the Event Registry API.

This module assembles the FastAPI application.  ``create_app`` builds
and configures the app, which is then instantiated at module import
time as ``app``, so it can be served with uvicorn::

    uvicorn event_api.app.main:app --port 3000

The database client is created here and stored on ``app.state.db``.
It is opened when the application starts (a failure aborts startup)
and closed when it shuts down.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as api_router
from .core.config import Settings, settings
from .core.db import Database
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the environment-derived defaults.

    Returns
    -------
    FastAPI
        A configured application.  Its database is not opened until
        the application's lifespan starts.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    db = Database(app_settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db.open()
        try:
            yield
        finally:
            db.close()

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        lifespan=lifespan,
        docs_url="/docs" if app_settings.docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if app_settings.docs_enabled else None,
    )
    app.state.db = db
    app.state.settings = app_settings

    register_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {"status": f"{app_settings.project_name} running"}

    return app


app = create_app()
