"""Event endpoints — sequential ids, CRUD round trips, 404 bodies.

Invariants:
    - First event gets id 1; each later one gets previous max + 1
    - Responses contain only fields that were submitted, plus id
    - Missing ids (and non-numeric ids) answer 404 {"message": "Event not found"}
"""

import pytest

LAUNCH = {"name": "Launch", "date": "2024-01-01", "venue": "Hall A"}
NOT_FOUND = {"message": "Event not found"}


async def test_create_on_empty_collection_assigns_id_1(client):
    res = await client.post("/api/events", json=LAUNCH)
    assert res.status_code == 201
    assert res.json() == {"id": 1, **LAUNCH}


async def test_second_create_assigns_next_id(client):
    await client.post("/api/events", json=LAUNCH)
    res = await client.post("/api/events", json={"name": "Retro", "venue": "Room 2"})
    assert res.status_code == 201
    assert res.json()["id"] == 2


async def test_id_follows_current_maximum(client):
    for name in ("a", "b", "c"):
        await client.post("/api/events", json={"name": name})
    await client.delete("/api/events/2")

    res = await client.post("/api/events", json={"name": "d"})
    assert res.json()["id"] == 4


async def test_deleting_the_maximum_reuses_its_id(client):
    await client.post("/api/events", json={"name": "a"})
    await client.post("/api/events", json={"name": "b"})
    await client.delete("/api/events/2")

    res = await client.post("/api/events", json={"name": "c"})
    assert res.json()["id"] == 2


async def test_get_returns_exactly_the_submitted_fields(client):
    await client.post("/api/events", json={"name": "Only name"})
    res = await client.get("/api/events/1")
    assert res.status_code == 200
    assert res.json() == {"id": 1, "name": "Only name"}


async def test_unknown_body_fields_are_ignored(client):
    res = await client.post("/api/events", json={**LAUNCH, "id": 99, "extra": True})
    assert res.json() == {"id": 1, **LAUNCH}


async def test_numbers_are_coerced_to_strings(client):
    res = await client.post("/api/events", json={"name": 2024})
    assert res.json() == {"id": 1, "name": "2024"}


async def test_list_is_sorted_by_id(client):
    for name in ("first", "second", "third"):
        await client.post("/api/events", json={"name": name})
    res = await client.get("/api/events")
    assert res.status_code == 200
    assert [e["id"] for e in res.json()] == [1, 2, 3]
    assert res.json()[0] == {"id": 1, "name": "first"}


async def test_list_empty_collection(client):
    res = await client.get("/api/events")
    assert res.status_code == 200
    assert res.json() == []


async def test_get_missing_returns_404_message(client):
    res = await client.get("/api/events/42")
    assert res.status_code == 404
    assert res.json() == NOT_FOUND


async def test_get_non_numeric_id_returns_404(client):
    res = await client.get("/api/events/abc")
    assert res.status_code == 404
    assert res.json() == NOT_FOUND


async def test_patch_changes_only_given_fields(client):
    await client.post("/api/events", json=LAUNCH)
    res = await client.patch("/api/events/1", json={"venue": "Hall B"})
    assert res.status_code == 200
    assert res.json() == {"id": 1, "name": "Launch", "date": "2024-01-01", "venue": "Hall B"}

    res = await client.get("/api/events/1")
    assert res.json()["venue"] == "Hall B"


async def test_patch_with_empty_body_leaves_record_unchanged(client):
    await client.post("/api/events", json=LAUNCH)
    res = await client.patch("/api/events/1", json={})
    assert res.status_code == 200
    assert res.json() == {"id": 1, **LAUNCH}


async def test_patch_missing_returns_404(client):
    res = await client.patch("/api/events/7", json={"name": "x"})
    assert res.status_code == 404
    assert res.json() == NOT_FOUND


async def test_put_replaces_all_fields(client):
    await client.post("/api/events", json=LAUNCH)
    res = await client.put("/api/events/1", json={"name": "Relaunch"})
    assert res.status_code == 200
    assert res.json() == {"id": 1, "name": "Relaunch"}


async def test_put_cannot_change_id(client):
    await client.post("/api/events", json=LAUNCH)
    res = await client.put("/api/events/1", json={"id": 5, **LAUNCH})
    assert res.json()["id"] == 1
    assert (await client.get("/api/events/5")).status_code == 404


async def test_put_missing_returns_404(client):
    res = await client.put("/api/events/3", json=LAUNCH)
    assert res.status_code == 404
    assert res.json() == NOT_FOUND


async def test_delete_then_get_returns_404(client):
    await client.post("/api/events", json=LAUNCH)
    res = await client.delete("/api/events/1")
    assert res.status_code == 200
    assert res.json() == {"message": "Event deleted successfully"}

    res = await client.get("/api/events/1")
    assert res.status_code == 404


async def test_delete_missing_returns_404(client):
    res = await client.delete("/api/events/1")
    assert res.status_code == 404
    assert res.json() == NOT_FOUND


async def test_delete_event_keeps_its_attendees(client):
    await client.post("/api/events", json=LAUNCH)
    await client.post("/api/attendees", json={"name": "Ada", "eventId": 1})
    await client.delete("/api/events/1")

    res = await client.get("/api/attendees/1")
    assert res.status_code == 200
    assert res.json()["eventId"] == 1


@pytest.mark.parametrize("method", ["GET", "PATCH", "PUT", "DELETE"])
async def test_id_beyond_integer_range_returns_404(client, method):
    await client.post("/api/events", json=LAUNCH)
    res = await client.request(method, "/api/events/99999999999999999999", json={})
    assert res.status_code == 404
    assert res.json() == NOT_FOUND


@pytest.mark.parametrize("raw", ["0_3", "1_000", "٣", "3.0", "0x3"])
async def test_non_decimal_id_spellings_return_404(client, raw):
    for name in ("a", "b", "c"):
        await client.post("/api/events", json={"name": name})
    res = await client.get(f"/api/events/{raw}")
    assert res.status_code == 404
    assert res.json() == NOT_FOUND


async def test_create_without_body_stores_bare_record(client):
    res = await client.post("/api/events")
    assert res.status_code == 201
    assert res.json() == {"id": 1}
    assert (await client.get("/api/events/1")).json() == {"id": 1}


async def test_put_without_body_clears_fields(client):
    await client.post("/api/events", json=LAUNCH)
    res = await client.put("/api/events/1")
    assert res.status_code == 200
    assert res.json() == {"id": 1}


async def test_patch_without_body_leaves_record_unchanged(client):
    await client.post("/api/events", json=LAUNCH)
    res = await client.patch("/api/events/1")
    assert res.status_code == 200
    assert res.json() == {"id": 1, **LAUNCH}
