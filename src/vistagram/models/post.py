# src/vistagram/models/post.py
"""SQLAlchemy model for image posts and their engagement counters."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vistagram.db.session import Base
from vistagram.db.time import utcnow


class Post(Base):
    """An uploaded image with an optional caption.

    ``like_count`` and ``share_count`` are denormalized from the ``likes`` and
    ``shares`` ledgers and are only written by the counter maintainer.
    """

    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint("like_count >= 0", name="ck_posts_like_count_non_negative"),
        CheckConstraint("share_count >= 0", name="ck_posts_share_count_non_negative"),
        Index("ix_posts_created_at", "created_at"),
        Index("ix_posts_user_id", "user_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    # Stable URL returned by the image host; the file itself lives there.
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    caption: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    like_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    share_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)

    user: Mapped[User | None] = relationship(  # noqa: F821
        "User",
        back_populates="posts",
    )
