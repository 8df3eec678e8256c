"""
Top-level API router.

Each resource in ``RESOURCES`` gets an identical set of CRUD routes
built by ``build_crud_router``; the statistics endpoint is included
alongside them.
"""

from fastapi import APIRouter

from event_api.app.api.v1.endpoints import statistics
from event_api.app.api.v1.endpoints.crud import build_crud_router
from event_api.app.services.resources import RESOURCES

router = APIRouter()

for resource in RESOURCES.values():
    router.include_router(build_crud_router(resource), tags=[resource.path])

router.include_router(statistics.router, tags=["statistics"])
