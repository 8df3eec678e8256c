"""
Service layer for statistics.

Counts are read-only aggregate queries.  Storage errors are not caught
here; they reach the generic 500 handler.
"""

from __future__ import annotations

from event_api.app.core.db import Database
from event_api.app.schemas.statistics import EventStats


class StatisticsService:
    """Aggregated counts across the event and attendee tables."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def event_stats(self) -> EventStats:
        """Return the total number of events and of attendees."""
        with self.db.cursor() as cursor:
            events_count = cursor.execute("SELECT COUNT(*) FROM events").fetchone()[0]
            attendees_count = cursor.execute("SELECT COUNT(*) FROM attendees").fetchone()[0]
        return EventStats(total_events=events_count, total_attendees=attendees_count)
