from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from echoread.database import get_session
from echoread.models import Summary
from echoread.schemas.projections import SummaryWithBook
from echoread.schemas.summary import SummaryCreate, SummaryResponse, SummaryUpdate
from echoread.services.catalog import get_summary_with_book
from echoread.services.records import create_record, delete_record, get_or_404, update_record

router = APIRouter(prefix="/api/summaries", tags=["summaries"])


@router.get("/{summary_id}", response_model=SummaryWithBook)
async def get_summary(summary_id: str, session: AsyncSession = Depends(get_session)):
    summary = await get_summary_with_book(session, summary_id)
    if summary is None:
        raise HTTPException(status_code=404, detail="Summary not found")
    return summary


@router.get("/{summary_id}/big-ideas/{idea_id}")
async def get_big_idea(
    summary_id: str, idea_id: str, session: AsyncSession = Depends(get_session)
):
    summary = await get_or_404(session, Summary, summary_id, "Summary")
    for idea in summary.big_ideas or []:
        if idea.get("id") == idea_id:
            return {"summary_id": summary.id, **idea}
    raise HTTPException(status_code=404, detail="Big idea not found")


@router.post("", response_model=SummaryResponse, status_code=201)
async def create_summary(data: SummaryCreate, session: AsyncSession = Depends(get_session)):
    return await create_record(session, Summary, data)


@router.put("/{summary_id}", response_model=SummaryResponse)
async def update_summary(
    summary_id: str, data: SummaryUpdate, session: AsyncSession = Depends(get_session)
):
    summary = await get_or_404(session, Summary, summary_id, "Summary")
    return await update_record(session, summary, data)


@router.delete("/{summary_id}", status_code=204)
async def delete_summary(summary_id: str, session: AsyncSession = Depends(get_session)):
    summary = await get_or_404(session, Summary, summary_id, "Summary")
    await delete_record(session, summary)
