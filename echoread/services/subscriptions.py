"""Subscription history writes.

A user should hold at most one active subscription. The table does not
enforce it, so activating one here cancels the others in the same commit and
mirrors the plan onto the user row.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from echoread.models import Subscription, User
from echoread.schemas.subscription import SubscriptionCreate
from echoread.services.records import build_record, commit

logger = logging.getLogger(__name__)


async def _cancel_other_active(session: AsyncSession, user_id: str, keep_id: str | None = None) -> int:
    stmt = select(Subscription).where(
        Subscription.user_id == user_id, Subscription.status == "active"
    )
    if keep_id is not None:
        stmt = stmt.where(Subscription.id != keep_id)
    others = (await session.execute(stmt)).scalars().all()
    for sub in others:
        sub.status = "cancelled"
    if others:
        logger.info("Cancelled %d active subscription(s) for user %s", len(others), user_id)
    return len(others)


async def _mirror_onto_user(session: AsyncSession, sub: Subscription) -> None:
    user = await session.get(User, sub.user_id)
    if user is None:
        # Missing user surfaces as a foreign key error on commit
        return
    if sub.status == "active":
        user.subscription_type = sub.type
        user.subscription_expires_at = sub.end_date
    else:
        user.subscription_type = "free"
        user.subscription_expires_at = None


async def create_subscription(session: AsyncSession, data: SubscriptionCreate) -> Subscription:
    sub = build_record(Subscription, data)
    if sub.status == "active":
        await _cancel_other_active(session, sub.user_id)
        await _mirror_onto_user(session, sub)
    session.add(sub)
    await commit(session)
    await session.refresh(sub)
    return sub


async def set_status(session: AsyncSession, sub: Subscription, status: str) -> Subscription:
    was_active = sub.status == "active"
    sub.status = status
    if status == "active":
        await _cancel_other_active(session, sub.user_id, keep_id=sub.id)
        await _mirror_onto_user(session, sub)
    elif was_active:
        await _mirror_onto_user(session, sub)
    await commit(session)
    await session.refresh(sub)
    return sub
