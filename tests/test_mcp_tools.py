"""Tests for MCP tools. Each test gets an EchoreadClient backed by the
test httpx client fixture, seeds data via the API, then calls the tool
function directly."""

import pytest
from echoread.mcp.client import EchoreadClient
from echoread.mcp.tools.catalog import browse_books, get_book, list_categories, read_summary
from echoread.mcp.tools.library import add_bookmark, add_note
from echoread.mcp.tools.reading import reading_history, start_reading, update_reading_progress


@pytest.fixture
def er(client):
    return EchoreadClient(client)


# --- catalog ---

@pytest.mark.asyncio
async def test_list_categories(er, catalog):
    result = await list_categories(er)
    assert result == [{
        "id": catalog["category"]["id"],
        "name": "Self-Help",
        "slug": "self-help",
    }]


@pytest.mark.asyncio
async def test_browse_books_by_category(er, catalog):
    await er.post("/api/books", json={"title": "Deep Work"})
    result = await browse_books(er, category="self-help")
    assert len(result) == 1
    assert result[0]["title"] == "Atomic Habits"
    assert result[0]["author"] == "James Clear"
    assert result[0]["summaries"] == 1


@pytest.mark.asyncio
async def test_browse_books_unknown_category(er, catalog):
    assert await browse_books(er, category="nope") == []


@pytest.mark.asyncio
async def test_browse_books_popular(er, catalog):
    await er.post("/api/books", json={"title": "Deep Work", "is_popular": True})
    result = await browse_books(er, popular=True)
    assert [b["title"] for b in result] == ["Deep Work"]
    assert result[0]["author"] is None


@pytest.mark.asyncio
async def test_get_book(er, catalog):
    result = await get_book(er, book_id=catalog["book"]["id"])
    assert result["category"]["name"] == "Self-Help"
    result = await get_book(er, book_id="missing")
    assert result["status"] == 404


@pytest.mark.asyncio
async def test_read_summary(er, catalog):
    result = await read_summary(er, summary_id=catalog["summary"]["id"])
    assert result["book_title"] == "Atomic Habits"
    assert result["key_takeaways"] == ["Habits compound", "Systems beat goals"]
    assert result["big_ideas"] == []


@pytest.mark.asyncio
async def test_read_summary_not_found(er):
    result = await read_summary(er, summary_id="missing")
    assert result["error"] is True


# --- reading ---

@pytest.mark.asyncio
async def test_reading_flow(er, catalog):
    user_id = catalog["user"]["id"]
    started = await start_reading(er, user_id=user_id, summary_id=catalog["summary"]["id"])
    assert started["progress_percent"] == 0

    updated = await update_reading_progress(er, session_id=started["id"], progress_percent=100, completed=True)
    assert updated["is_completed"] is True
    assert updated["completed_at"] is not None

    history = await reading_history(er, user_id=user_id)
    assert history[0]["session_id"] == started["id"]
    assert history[0]["book"] == "Atomic Habits"
    assert await reading_history(er, user_id=user_id, completed=False) == []


@pytest.mark.asyncio
async def test_reading_history_unknown_user(er):
    assert await reading_history(er, user_id="ghost") == []


# --- library ---

@pytest.mark.asyncio
async def test_add_bookmark_and_note(er, catalog):
    user_id = catalog["user"]["id"]
    summary_id = catalog["summary"]["id"]

    bookmark = await add_bookmark(er, user_id=user_id, summary_id=summary_id, position=42, note="Key bit")
    assert bookmark["position"] == 42
    assert bookmark["note"] == "Key bit"

    note = await add_note(er, user_id=user_id, summary_id=summary_id, content="Shared", private=False)
    assert note["is_private"] is False


@pytest.mark.asyncio
async def test_add_bookmark_unknown_summary(er, catalog):
    result = await add_bookmark(er, user_id=catalog["user"]["id"], summary_id="missing", position=1)
    assert result["status"] == 409
