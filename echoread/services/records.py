"""Insert and partial-update plumbing shared by the routers.

Callers hand in an already validated pydantic payload. Fields the server owns
are never taken from it, declared defaults are already filled in by the
schema, and storage errors are rolled back and re-raised untouched.
"""

import logging
from typing import Any, TypeVar

from fastapi import HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from echoread.database import Base
from echoread.id import new_id

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

SERVER_ASSIGNED = frozenset({"id", "created_at", "updated_at", "started_at", "last_accessed_at"})


def insert_values(payload: BaseModel) -> dict[str, Any]:
    return {
        key: value
        for key, value in payload.model_dump().items()
        if key not in SERVER_ASSIGNED
    }


async def commit(session: AsyncSession) -> None:
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        logger.warning("Write rejected by storage: %s", exc.orig)
        raise


async def get_or_404(session: AsyncSession, model: type[ModelT], row_id: str, label: str) -> ModelT:
    row = await session.get(model, row_id)
    if row is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return row


def build_record(model: type[ModelT], payload: BaseModel, **overrides: Any) -> ModelT:
    values = insert_values(payload)
    values.update(overrides)
    values.setdefault("id", new_id())
    return model(**values)


async def create_record(
    session: AsyncSession, model: type[ModelT], payload: BaseModel, **overrides: Any
) -> ModelT:
    row = build_record(model, payload, **overrides)
    session.add(row)
    await commit(session)
    await session.refresh(row)
    logger.debug("Created %s %s", model.__tablename__, row.id)
    return row


async def update_record(session: AsyncSession, row: ModelT, payload: BaseModel) -> ModelT:
    for key, value in payload.model_dump(exclude_unset=True).items():
        setattr(row, key, value)
    await commit(session)
    await session.refresh(row)
    return row


async def delete_record(session: AsyncSession, row: Base) -> None:
    await session.delete(row)
    await commit(session)
