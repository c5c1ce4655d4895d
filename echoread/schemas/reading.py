from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from echoread.schemas.common import not_null


class ReadingSessionCreate(BaseModel):
    user_id: str
    summary_id: str
    progress_percent: int = Field(0, ge=0, le=100)
    current_position: int = Field(0, ge=0)
    is_completed: bool = False
    time_spent_minutes: int = Field(0, ge=0)
    completed_at: datetime | None = None


class ReadingSessionUpdate(BaseModel):
    progress_percent: int | None = Field(None, ge=0, le=100)
    current_position: int | None = Field(None, ge=0)
    is_completed: bool | None = None
    time_spent_minutes: int | None = Field(None, ge=0)

    @field_validator("progress_percent", "current_position", "is_completed", "time_spent_minutes", mode="before")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class ReadingSessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    summary_id: str
    progress_percent: int
    current_position: int
    is_completed: bool
    time_spent_minutes: int
    started_at: datetime
    last_accessed_at: datetime
    completed_at: datetime | None
