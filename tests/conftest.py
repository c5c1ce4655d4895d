import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from echoread.database import Base, enable_foreign_keys, get_session
from echoread.app import create_app
import echoread.models  # noqa: F401

TEST_DB_URL = "sqlite+aiosqlite://"  # in-memory

engine = create_async_engine(TEST_DB_URL, echo=False)
enable_foreign_keys(engine)
TestSession = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(autouse=True)
async def setup_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def session():
    async with TestSession() as s:
        yield s


@pytest.fixture
async def client():
    app = create_app()

    async def override_session():
        async with TestSession() as s:
            yield s

    app.dependency_overrides[get_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def catalog(client):
    """A user plus one book (with author and category) carrying one summary."""
    user = (await client.post("/api/users", json={"id": "user-1", "email": "reader@example.com"})).json()
    author = (await client.post("/api/authors", json={"name": "James Clear"})).json()
    category = (await client.post(
        "/api/categories", json={"name": "Self-Help", "slug": "self-help"}
    )).json()
    book = (await client.post("/api/books", json={
        "title": "Atomic Habits",
        "author_id": author["id"],
        "category_id": category["id"],
    })).json()
    summary = (await client.post("/api/summaries", json={
        "book_id": book["id"],
        "title": "Atomic Habits in 15 minutes",
        "content": "Small changes compound.",
        "reading_time_minutes": 15,
        "key_takeaways": ["Habits compound", "Systems beat goals"],
    })).json()
    return {
        "user": user,
        "author": author,
        "category": category,
        "book": book,
        "summary": summary,
    }
