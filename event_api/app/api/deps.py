"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from event_api.app.core.db import Database


def get_db(request: Request) -> Database:
    """Return the database client created by ``create_app``.

    Tests may replace this dependency through
    ``app.dependency_overrides``.
    """
    return request.app.state.db
