from datetime import UTC, datetime

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text, false, func, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from echoread.database import Base, UTCDateTime


class Summary(Base):
    __tablename__ = "summaries"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    book_id: Mapped[str] = mapped_column(ForeignKey("books.id"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    in_this_summary: Mapped[str | None] = mapped_column(Text)
    key_takeaways: Mapped[list[str] | None] = mapped_column(JSON)
    big_ideas: Mapped[list[dict] | None] = mapped_column(JSON)
    about_author: Mapped[str | None] = mapped_column(Text)
    reading_time_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    audio_url: Mapped[str | None] = mapped_column(String(500))
    audio_duration_minutes: Mapped[int | None] = mapped_column(Integer)
    # Sync data: per-segment timings, coarse chapter markers, or time-estimated
    # auto-scroll. Only one is meaningful per row; nothing here enforces that.
    text_timings: Mapped[list[dict] | None] = mapped_column(JSON)
    chapter_markers: Mapped[list[dict] | None] = mapped_column(JSON)
    use_auto_scroll: Mapped[bool] = mapped_column(Boolean, default=True, server_default=true())
    summary_type: Mapped[str] = mapped_column(String(20), nullable=False, default="opening", server_default="opening")
    sequence_number: Mapped[int] = mapped_column(Integer, default=1, server_default="1")
    is_published: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())
    is_premium: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(UTC), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(UTC), server_default=func.now(), onupdate=lambda: datetime.now(UTC))

    book: Mapped["Book"] = relationship(back_populates="summaries")
    reading_sessions: Mapped[list["ReadingSession"]] = relationship(back_populates="summary", passive_deletes="all")
    bookmarks: Mapped[list["Bookmark"]] = relationship(back_populates="summary", passive_deletes="all")
    notes: Mapped[list["Note"]] = relationship(back_populates="summary", passive_deletes="all")
