"""Response model for the aggregated statistics endpoint."""

from pydantic import BaseModel, Field


class EventStats(BaseModel):
    total_events: int = Field(..., alias="totalEvents")
    total_attendees: int = Field(..., alias="totalAttendees")

    model_config = {"populate_by_name": True}
