"""
Statistics endpoint.

Only ``GET`` is supported.  Every other verb is answered with 405 and
``{"message": "Method not allowed"}``.
"""

from fastapi import APIRouter, Depends

from event_api.app.api.deps import get_db
from event_api.app.core.db import Database
from event_api.app.core.errors import MethodNotAllowedError
from event_api.app.schemas.statistics import EventStats
from event_api.app.services.statistics_service import StatisticsService

router = APIRouter()


@router.get("/event-stats", response_model=EventStats)
async def get_event_stats(db: Database = Depends(get_db)) -> EventStats:
    """Return the total number of events and of attendees."""
    return await StatisticsService(db).event_stats()


@router.api_route(
    "/event-stats",
    methods=["POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def event_stats_method_not_allowed() -> None:
    raise MethodNotAllowedError()
