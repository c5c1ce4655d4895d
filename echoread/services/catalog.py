"""Query contracts for the read-side projections.

A book's details come from one eager-loaded query. Summaries and reading
sessions are loaded flat and joined to those details by id, so nothing is
fetched lazily while a response is serialized and a summary reached through
``Book.summaries`` never has to carry its own ``book`` back-reference.
"""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from echoread.models import Book, ReadingSession, Summary
from echoread.schemas.projections import BookWithDetails, ReadingSessionWithSummary, SummaryWithBook
from echoread.schemas.reading import ReadingSessionResponse
from echoread.schemas.summary import SummaryResponse


def _book_details_query():
    return (
        select(Book)
        .options(
            selectinload(Book.author),
            selectinload(Book.category),
            selectinload(Book.summaries),
        )
        .execution_options(populate_existing=True)
    )


async def _books_by_id(session: AsyncSession, book_ids: Iterable[str]) -> dict[str, BookWithDetails]:
    ids = set(book_ids)
    if not ids:
        return {}
    books = (await session.execute(_book_details_query().where(Book.id.in_(ids)))).scalars().all()
    return {b.id: BookWithDetails.model_validate(b) for b in books}


async def _summaries_by_id(
    session: AsyncSession, summary_ids: Iterable[str]
) -> dict[str, SummaryWithBook]:
    ids = set(summary_ids)
    if not ids:
        return {}
    stmt = select(Summary).where(Summary.id.in_(ids)).execution_options(populate_existing=True)
    summaries = [
        SummaryResponse.model_validate(s) for s in (await session.execute(stmt)).scalars().all()
    ]
    books = await _books_by_id(session, (s.book_id for s in summaries))
    return {
        s.id: SummaryWithBook(**s.model_dump(), book=books[s.book_id])
        for s in summaries
    }


def _with_summary(reading: ReadingSession, summaries: dict[str, SummaryWithBook]) -> ReadingSessionWithSummary:
    data = ReadingSessionResponse.model_validate(reading).model_dump()
    return ReadingSessionWithSummary(**data, summary=summaries[reading.summary_id])


async def get_book_with_details(session: AsyncSession, book_id: str) -> BookWithDetails | None:
    return (await _books_by_id(session, [book_id])).get(book_id)


async def list_books_with_details(
    session: AsyncSession,
    category_id: str | None = None,
    author_id: str | None = None,
    is_popular: bool | None = None,
    is_featured: bool | None = None,
    limit: int = 50,
    offset: int = 0,
) -> list[BookWithDetails]:
    stmt = _book_details_query()
    if category_id:
        stmt = stmt.where(Book.category_id == category_id)
    if author_id:
        stmt = stmt.where(Book.author_id == author_id)
    if is_popular is not None:
        stmt = stmt.where(Book.is_popular.is_(is_popular))
    if is_featured is not None:
        stmt = stmt.where(Book.is_featured.is_(is_featured))
    stmt = stmt.order_by(Book.title).offset(offset).limit(limit)
    books = (await session.execute(stmt)).scalars().all()
    return [BookWithDetails.model_validate(b) for b in books]


async def get_summary_with_book(session: AsyncSession, summary_id: str) -> SummaryWithBook | None:
    return (await _summaries_by_id(session, [summary_id])).get(summary_id)


async def get_reading_session_with_summary(
    session: AsyncSession, session_id: str
) -> ReadingSessionWithSummary | None:
    stmt = (
        select(ReadingSession)
        .where(ReadingSession.id == session_id)
        .execution_options(populate_existing=True)
    )
    reading = (await session.execute(stmt)).scalar_one_or_none()
    if reading is None:
        return None
    summaries = await _summaries_by_id(session, [reading.summary_id])
    return _with_summary(reading, summaries)


async def list_reading_sessions_with_summary(
    session: AsyncSession,
    user_id: str,
    completed: bool | None = None,
) -> list[ReadingSessionWithSummary]:
    stmt = (
        select(ReadingSession)
        .where(ReadingSession.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    if completed is not None:
        stmt = stmt.where(ReadingSession.is_completed.is_(completed))
    stmt = stmt.order_by(ReadingSession.last_accessed_at.desc())
    readings = (await session.execute(stmt)).scalars().all()
    summaries = await _summaries_by_id(session, (r.summary_id for r in readings))
    return [_with_summary(r, summaries) for r in readings]
