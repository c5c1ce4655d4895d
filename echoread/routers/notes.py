from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from echoread.database import get_session
from echoread.models import Note, User
from echoread.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from echoread.services.records import create_record, delete_record, get_or_404, update_record

router = APIRouter(tags=["notes"])


@router.post("/api/notes", response_model=NoteResponse, status_code=201)
async def create_note(data: NoteCreate, session: AsyncSession = Depends(get_session)):
    return await create_record(session, Note, data)


@router.get("/api/users/{user_id}/notes", response_model=list[NoteResponse])
async def list_notes(
    user_id: str,
    summary_id: str | None = None,
    session: AsyncSession = Depends(get_session),
):
    await get_or_404(session, User, user_id, "User")
    stmt = select(Note).where(Note.user_id == user_id)
    if summary_id:
        stmt = stmt.where(Note.summary_id == summary_id)
    result = await session.execute(stmt.order_by(Note.created_at.desc()))
    return result.scalars().all()


@router.put("/api/notes/{note_id}", response_model=NoteResponse)
async def update_note(note_id: str, data: NoteUpdate, session: AsyncSession = Depends(get_session)):
    note = await get_or_404(session, Note, note_id, "Note")
    return await update_record(session, note, data)


@router.delete("/api/notes/{note_id}", status_code=204)
async def delete_note(note_id: str, session: AsyncSession = Depends(get_session)):
    note = await get_or_404(session, Note, note_id, "Note")
    await delete_record(session, note)
