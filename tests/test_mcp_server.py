import asyncio

import pytest
from sqlalchemy import create_engine, text

from echoread.mcp.__main__ import run_migrations
from echoread.mcp.client import EchoreadClient
from echoread.mcp.server import create_mcp_server


def test_mcp_server_name(client):
    er = EchoreadClient(client)
    mcp = create_mcp_server(er)
    assert mcp.name == "echoread"


@pytest.mark.asyncio
async def test_run_migrations_builds_schema_with_defaults(tmp_path):
    db_file = tmp_path / "echoread.db"
    await asyncio.to_thread(run_migrations, f"sqlite+aiosqlite:///{db_file}")

    engine = create_engine(f"sqlite:///{db_file}")
    with engine.begin() as conn:
        conn.execute(text("INSERT INTO users (id) VALUES ('raw-user')"))
        conn.execute(text("INSERT INTO books (id, title) VALUES ('raw-book', 'Raw Book')"))
        user = conn.execute(text(
            "SELECT subscription_type, reading_streak, created_at FROM users WHERE id = 'raw-user'"
        )).one()
        book = conn.execute(text("SELECT rating, is_popular FROM books WHERE id = 'raw-book'")).one()
    engine.dispose()

    assert user.subscription_type == "free"
    assert user.reading_streak == 0
    assert user.created_at is not None
    assert (book.rating, book.is_popular) == (0, 0)

    # Already at head: a second run is a no-op
    await asyncio.to_thread(run_migrations, f"sqlite+aiosqlite:///{db_file}")
