import logging
from datetime import UTC, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from echoread.models import ReadingSession
from echoread.schemas.reading import ReadingSessionCreate, ReadingSessionUpdate
from echoread.services.records import build_record, commit

logger = logging.getLogger(__name__)


async def start_session(session: AsyncSession, data: ReadingSessionCreate) -> ReadingSession:
    reading = build_record(ReadingSession, data)
    if reading.is_completed and reading.completed_at is None:
        reading.completed_at = datetime.now(UTC)
    session.add(reading)
    await commit(session)
    await session.refresh(reading)
    logger.info("User %s started summary %s", reading.user_id, reading.summary_id)
    return reading


async def record_progress(
    session: AsyncSession, reading: ReadingSession, data: ReadingSessionUpdate
) -> ReadingSession:
    was_completed = reading.is_completed
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(reading, key, value)

    now = datetime.now(UTC)
    reading.last_accessed_at = now
    # completed_at is stamped on the false -> true transition only
    if reading.is_completed and not was_completed:
        reading.completed_at = now
        logger.info("User %s completed summary %s", reading.user_id, reading.summary_id)

    await commit(session)
    await session.refresh(reading)
    return reading
