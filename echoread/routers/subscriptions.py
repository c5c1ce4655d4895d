from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from echoread.database import get_session
from echoread.models import Subscription, User
from echoread.schemas.subscription import (
    SubscriptionCreate,
    SubscriptionResponse,
    SubscriptionStatusUpdate,
)
from echoread.services.records import get_or_404
from echoread.services.subscriptions import create_subscription, set_status

router = APIRouter(tags=["subscriptions"])


@router.post("/api/subscriptions", response_model=SubscriptionResponse, status_code=201)
async def add_subscription(data: SubscriptionCreate, session: AsyncSession = Depends(get_session)):
    return await create_subscription(session, data)


@router.get("/api/users/{user_id}/subscriptions", response_model=list[SubscriptionResponse])
async def list_subscriptions(user_id: str, session: AsyncSession = Depends(get_session)):
    await get_or_404(session, User, user_id, "User")
    result = await session.execute(
        select(Subscription)
        .where(Subscription.user_id == user_id)
        .order_by(Subscription.start_date.desc())
    )
    return result.scalars().all()


@router.put("/api/subscriptions/{subscription_id}/status", response_model=SubscriptionResponse)
async def update_subscription_status(
    subscription_id: str,
    data: SubscriptionStatusUpdate,
    session: AsyncSession = Depends(get_session),
):
    sub = await get_or_404(session, Subscription, subscription_id, "Subscription")
    return await set_status(session, sub, data.status)
