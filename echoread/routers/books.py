from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from echoread.database import get_session
from echoread.models import Book, Summary
from echoread.schemas.book import BookCreate, BookResponse, BookUpdate
from echoread.schemas.projections import BookWithDetails
from echoread.schemas.summary import SummaryResponse
from echoread.services.catalog import get_book_with_details, list_books_with_details
from echoread.services.records import create_record, delete_record, get_or_404, update_record

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("/stats")
async def book_stats(session: AsyncSession = Depends(get_session)):
    total = (await session.execute(select(func.count(Book.id)))).scalar()
    published = (
        await session.execute(select(func.count(Summary.id)).where(Summary.is_published.is_(True)))
    ).scalar()
    return {"total_books": total, "published_summaries": published}


@router.get("", response_model=list[BookWithDetails])
async def list_books(
    category_id: str | None = None,
    author_id: str | None = None,
    popular: bool | None = Query(None, description="Only books flagged (or not flagged) popular"),
    featured: bool | None = Query(None, description="Only books flagged (or not flagged) featured"),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    return await list_books_with_details(
        session,
        category_id=category_id,
        author_id=author_id,
        is_popular=popular,
        is_featured=featured,
        limit=limit,
        offset=offset,
    )


@router.get("/{book_id}", response_model=BookWithDetails)
async def get_book(book_id: str, session: AsyncSession = Depends(get_session)):
    book = await get_book_with_details(session, book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.get("/{book_id}/summaries", response_model=list[SummaryResponse])
async def list_book_summaries(
    book_id: str,
    published_only: bool = False,
    session: AsyncSession = Depends(get_session),
):
    await get_or_404(session, Book, book_id, "Book")
    stmt = select(Summary).where(Summary.book_id == book_id)
    if published_only:
        stmt = stmt.where(Summary.is_published.is_(True))
    result = await session.execute(stmt.order_by(Summary.sequence_number, Summary.created_at))
    return result.scalars().all()


@router.post("", response_model=BookResponse, status_code=201)
async def create_book(data: BookCreate, session: AsyncSession = Depends(get_session)):
    return await create_record(session, Book, data)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: str, data: BookUpdate, session: AsyncSession = Depends(get_session)
):
    book = await get_or_404(session, Book, book_id, "Book")
    return await update_record(session, book, data)


@router.delete("/{book_id}", status_code=204)
async def delete_book(book_id: str, session: AsyncSession = Depends(get_session)):
    book = await get_or_404(session, Book, book_id, "Book")
    await delete_record(session, book)
