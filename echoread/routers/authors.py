from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from echoread.database import get_session
from echoread.models import Author
from echoread.schemas.author import AuthorCreate, AuthorResponse, AuthorUpdate
from echoread.services.records import create_record, delete_record, get_or_404, update_record

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get("", response_model=list[AuthorResponse])
async def list_authors(session: AsyncSession = Depends(get_session)):
    result = await session.execute(select(Author).order_by(Author.name))
    return result.scalars().all()


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(author_id: str, session: AsyncSession = Depends(get_session)):
    return await get_or_404(session, Author, author_id, "Author")


@router.post("", response_model=AuthorResponse, status_code=201)
async def create_author(data: AuthorCreate, session: AsyncSession = Depends(get_session)):
    return await create_record(session, Author, data)


@router.put("/{author_id}", response_model=AuthorResponse)
async def update_author(
    author_id: str, data: AuthorUpdate, session: AsyncSession = Depends(get_session)
):
    author = await get_or_404(session, Author, author_id, "Author")
    return await update_record(session, author, data)


@router.delete("/{author_id}", status_code=204)
async def delete_author(author_id: str, session: AsyncSession = Depends(get_session)):
    author = await get_or_404(session, Author, author_id, "Author")
    await delete_record(session, author)
