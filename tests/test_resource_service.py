"""ResourceService against the database directly, without HTTP."""

import pytest

from event_api.app.core.errors import NotFoundError
from event_api.app.schemas.attendee import AttendeeCreate, AttendeeUpdate
from event_api.app.schemas.event import EventCreate, EventUpdate
from event_api.app.services.resource_service import ResourceService
from event_api.app.services.resources import ATTENDEES, EVENTS, RESOURCES
from event_api.app.services.statistics_service import StatisticsService


@pytest.fixture
def events(db):
    return ResourceService(db, EVENTS)


@pytest.fixture
def attendees(db):
    return ResourceService(db, ATTENDEES)


def test_registry_covers_three_resources():
    assert set(RESOURCES) == {"events", "attendees", "organizers"}
    assert [r.allow_replace for r in RESOURCES.values()] == [True, False, False]


async def test_create_echoes_submitted_values(events):
    created = await events.create(EventCreate(name="Launch", venue="Hall A"))
    assert created.model_dump(exclude_none=True) == {"id": 1, "name": "Launch", "venue": "Hall A"}


async def test_update_merges(events):
    await events.create(EventCreate(name="Launch", venue="Hall A"))
    updated = await events.update(1, EventUpdate(date="2024-01-01"))
    assert (updated.name, updated.date, updated.venue) == ("Launch", "2024-01-01", "Hall A")


async def test_replace_clears_omitted_fields(events):
    await events.create(EventCreate(name="Launch", venue="Hall A"))
    replaced = await events.replace(1, EventCreate(date="2024-02-02"))
    assert (replaced.name, replaced.date, replaced.venue) == (None, "2024-02-02", None)


async def test_missing_record_raises_not_found(events):
    with pytest.raises(NotFoundError) as info:
        await events.get(1)
    assert info.value.message == "Event not found"

    with pytest.raises(NotFoundError):
        await events.update(1, EventUpdate(name="x"))
    with pytest.raises(NotFoundError):
        await events.delete(1)


async def test_attendee_event_id_round_trip(attendees):
    await attendees.create(AttendeeCreate(name="Ada", eventId=2))
    updated = await attendees.update(1, AttendeeUpdate(eventId=5))
    assert updated.model_dump(by_alias=True) == {"id": 1, "name": "Ada", "eventId": 5}


async def test_statistics_counts(db, events, attendees):
    await events.create(EventCreate(name="Launch"))
    await attendees.create(AttendeeCreate(name="Ada", eventId=1))
    await attendees.create(AttendeeCreate(name="Grace", eventId=1))

    stats = await StatisticsService(db).event_stats()
    assert (stats.total_events, stats.total_attendees) == (1, 2)
