from datetime import UTC, datetime

from sqlalchemy import Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from echoread.database import Base, UTCDateTime


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    email: Mapped[str | None] = mapped_column(String(320), unique=True)
    first_name: Mapped[str | None] = mapped_column(String(200))
    last_name: Mapped[str | None] = mapped_column(String(200))
    profile_image_url: Mapped[str | None] = mapped_column(String(500))
    subscription_type: Mapped[str] = mapped_column(String(20), nullable=False, default="free", server_default="free")
    subscription_expires_at: Mapped[datetime | None] = mapped_column(UTCDateTime)
    # Counters are advanced by session tracking elsewhere, never decreased here
    reading_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    total_minutes_read: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    summaries_completed: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(UTC), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(UTC), server_default=func.now(), onupdate=lambda: datetime.now(UTC))

    reading_sessions: Mapped[list["ReadingSession"]] = relationship(back_populates="user", passive_deletes="all")
    bookmarks: Mapped[list["Bookmark"]] = relationship(back_populates="user", passive_deletes="all")
    notes: Mapped[list["Note"]] = relationship(back_populates="user", passive_deletes="all")
    subscriptions: Mapped[list["Subscription"]] = relationship(back_populates="user", passive_deletes="all")
