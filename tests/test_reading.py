"""Tests for reading sessions, bookmarks and notes."""

import pytest


async def _start(client, catalog, **extra):
    resp = await client.post("/api/reading-sessions", json={
        "user_id": catalog["user"]["id"],
        "summary_id": catalog["summary"]["id"],
        **extra,
    })
    assert resp.status_code == 201
    return resp.json()


# --- reading sessions ---

@pytest.mark.asyncio
async def test_start_reading_session_defaults(client, catalog):
    reading = await _start(client, catalog)
    assert reading["progress_percent"] == 0
    assert reading["current_position"] == 0
    assert reading["is_completed"] is False
    assert reading["time_spent_minutes"] == 0
    assert reading["started_at"] is not None
    assert reading["last_accessed_at"] is not None
    assert reading["completed_at"] is None


@pytest.mark.asyncio
async def test_started_at_is_server_assigned(client, catalog):
    reading = await _start(client, catalog, started_at="2001-01-01T00:00:00")
    assert not reading["started_at"].startswith("2001")


@pytest.mark.asyncio
async def test_start_reading_unknown_summary(client, catalog):
    resp = await client.post("/api/reading-sessions", json={
        "user_id": catalog["user"]["id"],
        "summary_id": "missing",
    })
    assert resp.status_code == 409
    assert resp.json()["detail"] == "FOREIGN KEY constraint failed"


@pytest.mark.asyncio
async def test_progress_out_of_range(client, catalog):
    resp = await client.post("/api/reading-sessions", json={
        "user_id": catalog["user"]["id"],
        "summary_id": catalog["summary"]["id"],
        "progress_percent": 101,
    })
    assert resp.status_code == 422
    assert resp.json()["detail"][0]["field"] == "progress_percent"
    assert resp.json()["detail"][0]["reason"] == "constraint_violated"


@pytest.mark.asyncio
async def test_update_progress_touches_last_accessed(client, catalog):
    reading = await _start(client, catalog)
    resp = await client.put(
        f"/api/reading-sessions/{reading['id']}",
        json={"progress_percent": 40, "current_position": 1200},
    )
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["progress_percent"] == 40
    assert updated["current_position"] == 1200
    assert updated["last_accessed_at"] >= reading["last_accessed_at"]
    assert updated["completed_at"] is None


@pytest.mark.asyncio
async def test_completion_stamped_once(client, catalog):
    reading = await _start(client, catalog)
    resp = await client.put(
        f"/api/reading-sessions/{reading['id']}",
        json={"progress_percent": 100, "is_completed": True},
    )
    completed_at = resp.json()["completed_at"]
    assert completed_at is not None

    # Already complete: further updates keep the original stamp
    resp = await client.put(
        f"/api/reading-sessions/{reading['id']}",
        json={"is_completed": True, "time_spent_minutes": 20},
    )
    assert resp.json()["completed_at"] == completed_at
    assert resp.json()["time_spent_minutes"] == 20


@pytest.mark.asyncio
async def test_created_completed_gets_stamp(client, catalog):
    reading = await _start(client, catalog, is_completed=True)
    assert reading["completed_at"] is not None


@pytest.mark.asyncio
async def test_get_reading_session_with_summary(client, catalog):
    reading = await _start(client, catalog)
    resp = await client.get(f"/api/reading-sessions/{reading['id']}")
    assert resp.status_code == 200
    detail = resp.json()
    assert detail["summary"]["id"] == catalog["summary"]["id"]
    assert detail["summary"]["book"]["title"] == "Atomic Habits"
    assert detail["summary"]["book"]["author"]["name"] == "James Clear"


@pytest.mark.asyncio
async def test_reading_session_not_found(client):
    resp = await client.get("/api/reading-sessions/missing")
    assert resp.status_code == 404
    resp = await client.put("/api/reading-sessions/missing", json={"progress_percent": 5})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_list_user_reading_sessions(client, catalog):
    first = await _start(client, catalog)
    second = await _start(client, catalog)
    await client.put(f"/api/reading-sessions/{second['id']}", json={"is_completed": True})

    resp = await client.get(f"/api/users/{catalog['user']['id']}/reading-sessions")
    assert resp.status_code == 200
    assert [r["id"] for r in resp.json()] == [second["id"], first["id"]]

    resp = await client.get(
        f"/api/users/{catalog['user']['id']}/reading-sessions", params={"completed": "false"}
    )
    assert [r["id"] for r in resp.json()] == [first["id"]]


@pytest.mark.asyncio
async def test_list_reading_sessions_unknown_user(client):
    resp = await client.get("/api/users/ghost/reading-sessions")
    assert resp.status_code == 404


# --- bookmarks ---

@pytest.mark.asyncio
async def test_bookmarks_crud(client, catalog):
    resp = await client.post("/api/bookmarks", json={
        "user_id": catalog["user"]["id"],
        "summary_id": catalog["summary"]["id"],
        "position": 320,
    })
    assert resp.status_code == 201
    bookmark = resp.json()
    assert bookmark["note"] is None

    resp = await client.put(f"/api/bookmarks/{bookmark['id']}", json={"note": "Come back here"})
    assert resp.json()["note"] == "Come back here"
    assert resp.json()["position"] == 320

    resp = await client.get(f"/api/users/{catalog['user']['id']}/bookmarks")
    assert len(resp.json()) == 1

    resp = await client.delete(f"/api/bookmarks/{bookmark['id']}")
    assert resp.status_code == 204
    resp = await client.get(f"/api/users/{catalog['user']['id']}/bookmarks")
    assert resp.json() == []


@pytest.mark.asyncio
async def test_bookmark_requires_position(client, catalog):
    resp = await client.post("/api/bookmarks", json={
        "user_id": catalog["user"]["id"],
        "summary_id": catalog["summary"]["id"],
    })
    assert resp.status_code == 422
    assert resp.json()["detail"][0] == {
        "field": "position",
        "reason": "missing",
        "message": "Field required",
    }


@pytest.mark.asyncio
async def test_bookmarks_filtered_by_summary(client, catalog):
    other = (await client.post("/api/summaries", json={
        "book_id": catalog["book"]["id"],
        "title": "Closing thoughts",
        "content": "...",
        "reading_time_minutes": 3,
        "summary_type": "closing",
    })).json()
    for summary_id, position in ((catalog["summary"]["id"], 10), (other["id"], 5)):
        await client.post("/api/bookmarks", json={
            "user_id": catalog["user"]["id"],
            "summary_id": summary_id,
            "position": position,
        })

    resp = await client.get(
        f"/api/users/{catalog['user']['id']}/bookmarks", params={"summary_id": other["id"]}
    )
    assert [b["position"] for b in resp.json()] == [5]


# --- notes ---

@pytest.mark.asyncio
async def test_note_defaults_private(client, catalog):
    resp = await client.post("/api/notes", json={
        "user_id": catalog["user"]["id"],
        "summary_id": catalog["summary"]["id"],
        "content": "Identity-based habits",
    })
    assert resp.status_code == 201
    note = resp.json()
    assert note["is_private"] is True
    assert note["position"] is None


@pytest.mark.asyncio
async def test_notes_update_and_delete(client, catalog):
    note = (await client.post("/api/notes", json={
        "user_id": catalog["user"]["id"],
        "summary_id": catalog["summary"]["id"],
        "content": "Draft",
        "position": 12,
    })).json()

    resp = await client.put(f"/api/notes/{note['id']}", json={"content": "Final", "is_private": False})
    assert resp.status_code == 200
    assert resp.json()["content"] == "Final"
    assert resp.json()["is_private"] is False
    assert resp.json()["position"] == 12

    resp = await client.delete(f"/api/notes/{note['id']}")
    assert resp.status_code == 204
    resp = await client.delete(f"/api/notes/{note['id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_note_requires_content(client, catalog):
    resp = await client.post("/api/notes", json={
        "user_id": catalog["user"]["id"],
        "summary_id": catalog["summary"]["id"],
        "content": "",
    })
    assert resp.status_code == 422
    resp = await client.get(f"/api/users/{catalog['user']['id']}/notes")
    assert resp.json() == []
