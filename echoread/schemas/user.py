from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserUpsert(BaseModel):
    id: str | None = None
    email: str | None = Field(None, max_length=320)
    first_name: str | None = Field(None, max_length=200)
    last_name: str | None = Field(None, max_length=200)
    profile_image_url: str | None = Field(None, max_length=500)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str | None
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    subscription_type: str
    subscription_expires_at: datetime | None
    reading_streak: int
    total_minutes_read: int
    summaries_completed: int
    created_at: datetime
    updated_at: datetime
