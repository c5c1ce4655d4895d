from datetime import UTC, datetime

from sqlalchemy import Boolean, ForeignKey, Integer, Text, func, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from echoread.database import Base, UTCDateTime


class Note(Base):
    __tablename__ = "notes"

    id: Mapped[str] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    summary_id: Mapped[str] = mapped_column(ForeignKey("summaries.id"), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    position: Mapped[int | None] = mapped_column(Integer)
    is_private: Mapped[bool] = mapped_column(Boolean, default=True, server_default=true())
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(UTC), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(UTC), server_default=func.now(), onupdate=lambda: datetime.now(UTC))

    user: Mapped["User"] = relationship(back_populates="notes")
    summary: Mapped["Summary"] = relationship(back_populates="notes")
