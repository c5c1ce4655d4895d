from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from echoread.database import get_session
from echoread.models import User
from echoread.schemas.user import UserResponse, UserUpsert
from echoread.services.records import build_record, commit, get_or_404

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
async def upsert_user(
    data: UserUpsert, response: Response, session: AsyncSession = Depends(get_session)
):
    user = await session.get(User, data.id) if data.id else None
    if user is None:
        overrides = {"id": data.id} if data.id else {}
        user = build_record(User, data, **overrides)
        session.add(user)
        response.status_code = 201
    else:
        for key, value in data.model_dump(exclude_unset=True, exclude={"id"}).items():
            setattr(user, key, value)
    await commit(session)
    await session.refresh(user)
    return user


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, session: AsyncSession = Depends(get_session)):
    return await get_or_404(session, User, user_id, "User")
