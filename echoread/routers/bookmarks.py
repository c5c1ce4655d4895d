from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from echoread.database import get_session
from echoread.models import Bookmark, User
from echoread.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from echoread.services.records import create_record, delete_record, get_or_404, update_record

router = APIRouter(tags=["bookmarks"])


@router.post("/api/bookmarks", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(data: BookmarkCreate, session: AsyncSession = Depends(get_session)):
    return await create_record(session, Bookmark, data)


@router.get("/api/users/{user_id}/bookmarks", response_model=list[BookmarkResponse])
async def list_bookmarks(
    user_id: str,
    summary_id: str | None = None,
    session: AsyncSession = Depends(get_session),
):
    await get_or_404(session, User, user_id, "User")
    stmt = select(Bookmark).where(Bookmark.user_id == user_id)
    if summary_id:
        stmt = stmt.where(Bookmark.summary_id == summary_id)
    result = await session.execute(stmt.order_by(Bookmark.summary_id, Bookmark.position))
    return result.scalars().all()


@router.put("/api/bookmarks/{bookmark_id}", response_model=BookmarkResponse)
async def update_bookmark(
    bookmark_id: str, data: BookmarkUpdate, session: AsyncSession = Depends(get_session)
):
    bookmark = await get_or_404(session, Bookmark, bookmark_id, "Bookmark")
    return await update_record(session, bookmark, data)


@router.delete("/api/bookmarks/{bookmark_id}", status_code=204)
async def delete_bookmark(bookmark_id: str, session: AsyncSession = Depends(get_session)):
    bookmark = await get_or_404(session, Bookmark, bookmark_id, "Bookmark")
    await delete_record(session, bookmark)
