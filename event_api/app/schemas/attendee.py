"""
Pydantic models for attendee data.

An attendee references an event through ``eventId``.  The reference is
not checked: it may name an event that does not (or no longer) exist.
"""

from typing import Optional

from pydantic import Field

from event_api.app.core.db import SQLITE_INT_MAX, SQLITE_INT_MIN

from .common import ResourceModel


class AttendeeCreate(ResourceModel):
    name: str = Field(..., examples=["Ada Lovelace"])
    event_id: int = Field(
        ..., alias="eventId", ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX, examples=[1]
    )


class AttendeeUpdate(ResourceModel):
    """All fields are optional; only provided fields will be updated."""

    name: Optional[str] = None
    event_id: Optional[int] = Field(
        None, alias="eventId", ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX
    )


class AttendeeRead(ResourceModel):
    id: int
    name: Optional[str] = None
    event_id: Optional[int] = Field(None, alias="eventId")
