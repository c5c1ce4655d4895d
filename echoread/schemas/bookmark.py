from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from echoread.schemas.common import not_null


class BookmarkCreate(BaseModel):
    user_id: str
    summary_id: str
    position: int = Field(ge=0)
    note: str | None = None


class BookmarkUpdate(BaseModel):
    position: int | None = Field(None, ge=0)
    note: str | None = None

    @field_validator("position", mode="before")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class BookmarkResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    summary_id: str
    position: int
    note: str | None
    created_at: datetime
