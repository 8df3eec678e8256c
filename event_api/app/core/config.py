"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
API starts with a local SQLite file on port 3000 when nothing is set.
Tests construct their own ``Settings`` instance and pass it to
``create_app`` instead of touching the environment.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Event Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Path or connection string for the SQLite database.  A relative
    # path is resolved against the project root by the ``db`` module;
    # ``:memory:`` keeps everything in RAM for the lifetime of the
    # process.
    database_url: str = os.getenv("DATABASE_URL", "event_registry.db")

    # Serve the interactive documentation at /docs and the schema at
    # /openapi.json.
    docs_enabled: bool = _env_flag("DOCS_ENABLED", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before this module is imported.
settings = Settings()
