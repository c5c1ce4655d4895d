from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from echoread.schemas.common import not_null


class NoteCreate(BaseModel):
    user_id: str
    summary_id: str
    content: str = Field(min_length=1)
    position: int | None = Field(None, ge=0)
    is_private: bool = True


class NoteUpdate(BaseModel):
    content: str | None = Field(None, min_length=1)
    position: int | None = Field(None, ge=0)
    is_private: bool | None = None

    @field_validator("content", "is_private", mode="before")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class NoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    summary_id: str
    content: str
    position: int | None
    is_private: bool
    created_at: datetime
    updated_at: datetime
