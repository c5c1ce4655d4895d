from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from echoread.database import get_session
from echoread.models import Book, Category
from echoread.schemas.book import BookResponse
from echoread.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from echoread.services.records import create_record, delete_record, get_or_404, update_record

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    include_inactive: bool = False, session: AsyncSession = Depends(get_session)
):
    stmt = select(Category)
    if not include_inactive:
        stmt = stmt.where(Category.is_active.is_(True))
    result = await session.execute(stmt.order_by(Category.sort_order, Category.name))
    return result.scalars().all()


@router.get("/by-slug/{slug}", response_model=CategoryResponse)
async def get_category_by_slug(slug: str, session: AsyncSession = Depends(get_session)):
    result = await session.execute(select(Category).where(Category.slug == slug))
    category = result.scalar_one_or_none()
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str, session: AsyncSession = Depends(get_session)):
    return await get_or_404(session, Category, category_id, "Category")


@router.get("/{category_id}/books", response_model=list[BookResponse])
async def list_category_books(category_id: str, session: AsyncSession = Depends(get_session)):
    await get_or_404(session, Category, category_id, "Category")
    result = await session.execute(
        select(Book).where(Book.category_id == category_id).order_by(Book.title)
    )
    return result.scalars().all()


@router.post("", response_model=CategoryResponse, status_code=201)
async def create_category(data: CategoryCreate, session: AsyncSession = Depends(get_session)):
    return await create_record(session, Category, data)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str, data: CategoryUpdate, session: AsyncSession = Depends(get_session)
):
    category = await get_or_404(session, Category, category_id, "Category")
    return await update_record(session, category, data)


@router.delete("/{category_id}", status_code=204)
async def delete_category(category_id: str, session: AsyncSession = Depends(get_session)):
    category = await get_or_404(session, Category, category_id, "Category")
    await delete_record(session, category)
