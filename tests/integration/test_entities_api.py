"""API tests for the user-owned entity endpoints."""

import pytest


@pytest.mark.asyncio
async def test_life_domain_crud(client):
    created = await client.post("/api/life-domains", json={
        "userId": 1, "name": "Health", "score": 72, "icon": "heart", "color": "#10B981",
    })
    assert created.status_code == 201
    domain = created.json()
    assert domain["id"] == 1

    updated = await client.put(f"/api/life-domains/{domain['id']}", json={"score": 80})
    assert updated.status_code == 200
    assert updated.json()["score"] == 80
    assert updated.json()["name"] == "Health"

    listed = await client.get("/api/life-domains", params={"userId": 1})
    assert [d["score"] for d in listed.json()] == [80]

    assert (await client.delete(f"/api/life-domains/{domain['id']}")).status_code == 204
    assert (await client.get(f"/api/life-domains/{domain['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_events_time_range(client):
    for day in (10, 13, 20):
        response = await client.post("/api/events", json={
            "userId": 1,
            "title": f"March {day}",
            "startTime": f"2024-03-{day}T09:00:00Z",
            "endTime": f"2024-03-{day}T10:00:00Z",
            "type": "work",
        })
        assert response.status_code == 201

    response = await client.get("/api/events", params={
        "userId": 1, "startDate": "2024-03-11T00:00:00Z", "endDate": "2024-03-20T09:00:00Z",
    })

    assert response.status_code == 200
    assert [e["title"] for e in response.json()] == ["March 13", "March 20"]


@pytest.mark.asyncio
async def test_event_with_offset_is_returned_in_utc(client):
    response = await client.post("/api/events", json={
        "userId": 1, "title": "Call", "startTime": "2024-03-13T09:00:00+01:00",
        "endTime": "2024-03-13T09:30:00+01:00", "type": "personal",
    })

    assert response.json()["startTime"] == "2024-03-13T08:00:00Z"


@pytest.mark.asyncio
async def test_update_missing_event(client):
    response = await client.put("/api/events/42", json={"title": "Nope"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_moods_newest_first(client):
    for date, mood in [("2024-03-11T08:00:00Z", "sad"), ("2024-03-13T08:00:00Z", "happy")]:
        await client.post("/api/moods", json={"userId": 1, "date": date, "moodType": mood})

    response = await client.get("/api/moods", params={"userId": 1})

    assert [m["moodType"] for m in response.json()] == ["happy", "sad"]


@pytest.mark.asyncio
async def test_transactions_list_and_get(client):
    created = await client.post("/api/transactions", json={
        "userId": 1, "amount": 42.5, "category": "food",
        "date": "2024-03-12T12:00:00Z", "type": "expense", "description": "Lunch",
    })
    assert created.status_code == 201

    fetched = await client.get(f"/api/transactions/{created.json()['id']}")
    assert fetched.json()["amount"] == 42.5

    outside = await client.get("/api/transactions", params={"userId": 1, "startDate": "2024-03-13T00:00:00Z"})
    assert outside.json() == []


@pytest.mark.asyncio
async def test_goal_lifecycle(client):
    created = await client.post("/api/goals", json={
        "userId": 1, "title": "Save 1000", "target": 1000, "current": 250,
        "category": "finance", "icon": "piggy-bank", "deadline": "2024-06-30T00:00:00Z",
    })
    goal = created.json()
    assert goal["isCompleted"] is False

    done = await client.put(f"/api/goals/{goal['id']}", json={"current": 1000, "isCompleted": True})
    assert done.json()["isCompleted"] is True
    assert done.json()["deadline"] == "2024-06-30T00:00:00Z"


@pytest.mark.asyncio
async def test_contact_crud(client):
    created = await client.post("/api/contacts", json={
        "userId": 1, "name": "Jordan", "relationship": "friend",
        "lastContact": "2024-03-01T18:00:00Z",
    })
    contact = created.json()
    assert contact["email"] is None

    cleared = await client.put(f"/api/contacts/{contact['id']}", json={"lastContact": None})
    assert cleared.status_code == 200
    assert cleared.json()["lastContact"] is None

    assert (await client.delete(f"/api/contacts/{contact['id']}")).status_code == 204
    assert (await client.delete(f"/api/contacts/{contact['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_lists_are_scoped_to_user(client):
    await client.post("/api/goals", json={
        "userId": 2, "title": "Other", "target": 1, "current": 0, "category": "x", "icon": "x",
    })

    response = await client.get("/api/goals", params={"userId": 1})

    assert response.json() == []
