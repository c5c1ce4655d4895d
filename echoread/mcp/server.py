from fastmcp import FastMCP

from echoread.mcp.client import EchoreadClient
from echoread.mcp.tools.catalog import (
    browse_books as _browse_books,
    get_book as _get_book,
    list_categories as _list_categories,
    read_summary as _read_summary,
)
from echoread.mcp.tools.library import add_bookmark as _add_bookmark, add_note as _add_note
from echoread.mcp.tools.reading import (
    reading_history as _reading_history,
    start_reading as _start_reading,
    update_reading_progress as _update_reading_progress,
)


def create_mcp_server(client: EchoreadClient) -> FastMCP:
    mcp = FastMCP(
        name="echoread",
        instructions=(
            "Echoread serves short summaries of non-fiction books. Use these tools "
            "to browse categories and books, read a summary, track reading "
            "progress, and keep bookmarks and notes. Users, books and summaries "
            "are identified by their ids."
        ),
    )

    @mcp.tool()
    async def list_categories() -> list[dict]:
        """List active categories in display order."""
        return await _list_categories(client)

    @mcp.tool()
    async def browse_books(
        category: str | None = None,
        popular: bool | None = None,
        featured: bool | None = None,
        limit: int = 20,
    ) -> list[dict]:
        """Browse books, optionally by category slug or popular/featured flags."""
        return await _browse_books(
            client, category=category, popular=popular, featured=featured, limit=limit
        )

    @mcp.tool()
    async def get_book(book_id: str) -> dict:
        """Get a book with its author, category and summaries."""
        return await _get_book(client, book_id=book_id)

    @mcp.tool()
    async def read_summary(summary_id: str) -> dict:
        """Read a summary: content, key takeaways and big ideas."""
        return await _read_summary(client, summary_id=summary_id)

    @mcp.tool()
    async def start_reading(user_id: str, summary_id: str) -> dict:
        """Open a reading session for a user on a summary."""
        return await _start_reading(client, user_id=user_id, summary_id=summary_id)

    @mcp.tool()
    async def update_reading_progress(
        session_id: str,
        progress_percent: int | None = None,
        current_position: int | None = None,
        time_spent_minutes: int | None = None,
        completed: bool | None = None,
    ) -> dict:
        """Record progress on a reading session. Marking it completed stamps
        the completion time."""
        return await _update_reading_progress(
            client,
            session_id=session_id,
            progress_percent=progress_percent,
            current_position=current_position,
            time_spent_minutes=time_spent_minutes,
            completed=completed,
        )

    @mcp.tool()
    async def reading_history(user_id: str, completed: bool | None = None) -> list[dict]:
        """A user's reading sessions, most recently accessed first."""
        return await _reading_history(client, user_id=user_id, completed=completed)

    @mcp.tool()
    async def add_bookmark(
        user_id: str, summary_id: str, position: int, note: str | None = None
    ) -> dict:
        """Bookmark a position in a summary."""
        return await _add_bookmark(
            client, user_id=user_id, summary_id=summary_id, position=position, note=note
        )

    @mcp.tool()
    async def add_note(
        user_id: str,
        summary_id: str,
        content: str,
        position: int | None = None,
        private: bool = True,
    ) -> dict:
        """Attach a note to a summary, private by default."""
        return await _add_note(
            client,
            user_id=user_id,
            summary_id=summary_id,
            content=content,
            position=position,
            private=private,
        )

    return mcp
