from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from echoread.schemas.common import not_null


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    slug: str = Field(min_length=1, max_length=100)
    description: str | None = None
    icon_name: str | None = Field(None, max_length=50)
    color: str | None = Field(None, max_length=7)
    is_active: bool = True
    sort_order: int = 0


class CategoryUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    slug: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    icon_name: str | None = Field(None, max_length=50)
    color: str | None = Field(None, max_length=7)
    is_active: bool | None = None
    sort_order: int | None = None

    @field_validator("name", "slug", "is_active", "sort_order", mode="before")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    description: str | None
    icon_name: str | None
    color: str | None
    is_active: bool
    sort_order: int
    created_at: datetime
