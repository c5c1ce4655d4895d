from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from echoread.schemas.common import not_null


class AuthorCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    bio: str | None = None
    image_url: str | None = Field(None, max_length=500)


class AuthorUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    bio: str | None = None
    image_url: str | None = Field(None, max_length=500)

    @field_validator("name", mode="before")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class AuthorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    bio: str | None
    image_url: str | None
    created_at: datetime
