from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from echoread.database import get_session
from echoread.models import ReadingSession, User
from echoread.schemas.projections import ReadingSessionWithSummary
from echoread.schemas.reading import ReadingSessionCreate, ReadingSessionResponse, ReadingSessionUpdate
from echoread.services.catalog import get_reading_session_with_summary, list_reading_sessions_with_summary
from echoread.services.reading import record_progress, start_session
from echoread.services.records import get_or_404

router = APIRouter(tags=["reading"])


@router.post("/api/reading-sessions", response_model=ReadingSessionResponse, status_code=201)
async def create_reading_session(
    data: ReadingSessionCreate, session: AsyncSession = Depends(get_session)
):
    return await start_session(session, data)


@router.get("/api/reading-sessions/{session_id}", response_model=ReadingSessionWithSummary)
async def get_reading_session(session_id: str, session: AsyncSession = Depends(get_session)):
    reading = await get_reading_session_with_summary(session, session_id)
    if reading is None:
        raise HTTPException(status_code=404, detail="Reading session not found")
    return reading


@router.put("/api/reading-sessions/{session_id}", response_model=ReadingSessionResponse)
async def update_reading_session(
    session_id: str,
    data: ReadingSessionUpdate,
    session: AsyncSession = Depends(get_session),
):
    reading = await get_or_404(session, ReadingSession, session_id, "Reading session")
    return await record_progress(session, reading, data)


@router.get("/api/users/{user_id}/reading-sessions", response_model=list[ReadingSessionWithSummary])
async def list_user_reading_sessions(
    user_id: str,
    completed: bool | None = None,
    session: AsyncSession = Depends(get_session),
):
    await get_or_404(session, User, user_id, "User")
    return await list_reading_sessions_with_summary(session, user_id, completed=completed)
