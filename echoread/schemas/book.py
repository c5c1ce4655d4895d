from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from echoread.schemas.common import not_null


class BookCreate(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    subtitle: str | None = None
    author_id: str | None = None
    category_id: str | None = None
    cover_image_url: str | None = Field(None, max_length=500)
    description: str | None = None
    published_year: int | None = None
    isbn: str | None = Field(None, max_length=20)
    rating: Decimal = Field(Decimal("0.00"), ge=0, max_digits=3, decimal_places=2)
    ratings_count: int = Field(0, ge=0)
    is_popular: bool = False
    is_featured: bool = False


class BookUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    subtitle: str | None = None
    author_id: str | None = None
    category_id: str | None = None
    cover_image_url: str | None = Field(None, max_length=500)
    description: str | None = None
    published_year: int | None = None
    isbn: str | None = Field(None, max_length=20)
    rating: Decimal | None = Field(None, ge=0, max_digits=3, decimal_places=2)
    ratings_count: int | None = Field(None, ge=0)
    is_popular: bool | None = None
    is_featured: bool | None = None

    @field_validator("title", "rating", "ratings_count", "is_popular", "is_featured", mode="before")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    subtitle: str | None
    author_id: str | None
    category_id: str | None
    cover_image_url: str | None
    description: str | None
    published_year: int | None
    isbn: str | None
    rating: Decimal
    ratings_count: int
    is_popular: bool
    is_featured: bool
    created_at: datetime
    updated_at: datetime

    @field_serializer("rating")
    def serialize_rating(self, rating: Decimal) -> str:
        return f"{rating:.2f}"
