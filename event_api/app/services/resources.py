"""
Resource definitions for events, attendees and organizers.

Adding a resource means adding a table migration, its schemas and one
entry here; the router picks it up from ``RESOURCES``.
"""

from typing import Dict

from event_api.app.schemas.attendee import AttendeeCreate, AttendeeRead, AttendeeUpdate
from event_api.app.schemas.event import EventCreate, EventRead, EventUpdate
from event_api.app.schemas.organizer import OrganizerCreate, OrganizerRead, OrganizerUpdate
from event_api.app.services.resource_service import Resource

EVENTS = Resource(
    path="events",
    table="events",
    label="Event",
    columns=("name", "date", "venue"),
    create_model=EventCreate,
    update_model=EventUpdate,
    read_model=EventRead,
    delete_message="Event deleted successfully",
    allow_replace=True,
)

ATTENDEES = Resource(
    path="attendees",
    table="attendees",
    label="Attendee",
    columns=("name", "event_id"),
    create_model=AttendeeCreate,
    update_model=AttendeeUpdate,
    read_model=AttendeeRead,
    delete_message="Attendee removed",
)

ORGANIZERS = Resource(
    path="organizers",
    table="organizers",
    label="Organizer",
    columns=("name", "contact"),
    create_model=OrganizerCreate,
    update_model=OrganizerUpdate,
    read_model=OrganizerRead,
    delete_message="Organizer deleted",
)

RESOURCES: Dict[str, Resource] = {
    resource.path: resource for resource in (EVENTS, ATTENDEES, ORGANIZERS)
}
