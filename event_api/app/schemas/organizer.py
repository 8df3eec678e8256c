"""Pydantic models for organizer data."""

from typing import Optional

from pydantic import Field

from .common import ResourceModel


class OrganizerBase(ResourceModel):
    name: Optional[str] = Field(None, examples=["Grace Hopper"])
    contact: Optional[str] = Field(None, examples=["grace@example.com"])


class OrganizerCreate(OrganizerBase):
    """Schema for creating an organizer."""


class OrganizerUpdate(OrganizerBase):
    """Schema for a partial update; only fields present in the body change."""


class OrganizerRead(OrganizerBase):
    id: int
