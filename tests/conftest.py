"""Shared fixtures — in-memory database + FastAPI test client.

Every test gets its own application built by ``create_app`` with a
fresh ``:memory:`` database.  ``ASGITransport`` does not run the
application lifespan, so the fixture opens and closes the database
itself.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from event_api.app.core.config import Settings
from event_api.app.main import create_app


@pytest.fixture
def settings():
    return Settings(database_url=":memory:", log_level="DEBUG")


@pytest.fixture
def app(settings):
    application = create_app(settings)
    application.state.db.open()
    yield application
    application.state.db.close()


@pytest.fixture
def db(app):
    return app.state.db


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
