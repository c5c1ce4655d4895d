from datetime import UTC, datetime

from sqlalchemy import ForeignKey, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from echoread.database import Base, UTCDateTime


class Bookmark(Base):
    __tablename__ = "bookmarks"

    id: Mapped[str] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    summary_id: Mapped[str] = mapped_column(ForeignKey("summaries.id"), nullable=False, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    note: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(UTC), server_default=func.now())

    user: Mapped["User"] = relationship(back_populates="bookmarks")
    summary: Mapped["Summary"] = relationship(back_populates="bookmarks")
