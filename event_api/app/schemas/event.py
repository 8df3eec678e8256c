"""
Pydantic models for event data.

Every event field is optional; only the ``id`` is guaranteed and it is
always assigned by the server.  ``EventCreate`` doubles as the body of
a full replacement (``PUT``), where omitted fields are cleared.
"""

from typing import Optional

from pydantic import Field

from .common import ResourceModel


class EventBase(ResourceModel):
    name: Optional[str] = Field(None, examples=["Launch"])
    date: Optional[str] = Field(None, examples=["2024-01-01"])
    venue: Optional[str] = Field(None, examples=["Hall A"])


class EventCreate(EventBase):
    """Schema for creating or replacing an event."""


class EventUpdate(EventBase):
    """Schema for a partial update; only fields present in the body change."""


class EventRead(EventBase):
    """Schema for reading an event from the API."""

    id: int
