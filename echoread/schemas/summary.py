from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from echoread.schemas.common import not_null

SummaryType = Literal["opening", "main", "closing"]


class BigIdea(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    content: str


class TextTiming(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    text_segment: str
    start_time: float = Field(ge=0, description="Seconds from the start of the audio")
    end_time: float = Field(ge=0, description="Seconds from the start of the audio")

    @model_validator(mode="after")
    def check_order(self):
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class ChapterMarker(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    start_time: float = Field(ge=0, description="Seconds from the start of the audio")
    content: str


def _check_single_sync_source(text_timings, chapter_markers) -> None:
    if text_timings and chapter_markers:
        raise ValueError("Provide only one of: text_timings or chapter_markers")


class SummaryCreate(BaseModel):
    book_id: str
    title: str = Field(min_length=1, max_length=300)
    content: str
    in_this_summary: str | None = None
    key_takeaways: list[str] | None = None
    big_ideas: list[BigIdea] | None = None
    about_author: str | None = None
    reading_time_minutes: int = Field(ge=0)
    audio_url: str | None = Field(None, max_length=500)
    audio_duration_minutes: int | None = Field(None, ge=0)
    text_timings: list[TextTiming] | None = None
    chapter_markers: list[ChapterMarker] | None = None
    use_auto_scroll: bool = True
    summary_type: SummaryType = "opening"
    sequence_number: int = Field(1, ge=1, le=10)
    is_published: bool = False
    is_premium: bool = False

    @model_validator(mode="after")
    def validate_sync_data(self):
        _check_single_sync_source(self.text_timings, self.chapter_markers)
        return self


class SummaryUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    content: str | None = None
    in_this_summary: str | None = None
    key_takeaways: list[str] | None = None
    big_ideas: list[BigIdea] | None = None
    about_author: str | None = None
    reading_time_minutes: int | None = Field(None, ge=0)
    audio_url: str | None = Field(None, max_length=500)
    audio_duration_minutes: int | None = Field(None, ge=0)
    text_timings: list[TextTiming] | None = None
    chapter_markers: list[ChapterMarker] | None = None
    use_auto_scroll: bool | None = None
    summary_type: SummaryType | None = None
    sequence_number: int | None = Field(None, ge=1, le=10)
    is_published: bool | None = None
    is_premium: bool | None = None

    @field_validator(
        "title",
        "content",
        "reading_time_minutes",
        "use_auto_scroll",
        "summary_type",
        "sequence_number",
        "is_published",
        "is_premium",
        mode="before",
    )
    @classmethod
    def reject_null(cls, value):
        return not_null(value)

    @model_validator(mode="after")
    def validate_sync_data(self):
        _check_single_sync_source(self.text_timings, self.chapter_markers)
        return self


class SummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    book_id: str
    title: str
    content: str
    in_this_summary: str | None
    key_takeaways: list[str] | None
    big_ideas: list[BigIdea] | None
    about_author: str | None
    reading_time_minutes: int
    audio_url: str | None
    audio_duration_minutes: int | None
    text_timings: list[TextTiming] | None
    chapter_markers: list[ChapterMarker] | None
    use_auto_scroll: bool
    sync_mode: Literal["text_timings", "chapter_markers", "auto_scroll", "none"] | None = None
    summary_type: str
    sequence_number: int
    is_published: bool
    is_premium: bool
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def compute_sync_mode(self):
        # Stored rows may carry more than one source; the most detailed wins.
        if self.text_timings:
            self.sync_mode = "text_timings"
        elif self.chapter_markers:
            self.sync_mode = "chapter_markers"
        elif self.use_auto_scroll:
            self.sync_mode = "auto_scroll"
        else:
            self.sync_mode = "none"
        return self
