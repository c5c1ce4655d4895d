from datetime import UTC, datetime

from sqlalchemy import Boolean, ForeignKey, Integer, false, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from echoread.database import Base, UTCDateTime


class ReadingSession(Base):
    __tablename__ = "reading_sessions"

    id: Mapped[str] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    summary_id: Mapped[str] = mapped_column(ForeignKey("summaries.id"), nullable=False, index=True)
    progress_percent: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    current_position: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())
    time_spent_minutes: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    started_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(UTC), server_default=func.now())
    last_accessed_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(UTC), server_default=func.now())
    completed_at: Mapped[datetime | None] = mapped_column(UTCDateTime)

    user: Mapped["User"] = relationship(back_populates="reading_sessions")
    summary: Mapped["Summary"] = relationship(back_populates="reading_sessions")
