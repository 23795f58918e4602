# src/vistagram/models/share.py
"""Ledger rows mapping a user's share of a post to a short link code."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from vistagram.db.session import Base
from vistagram.db.time import utcnow


class Share(Base):
    """A durable share of a post by a user.

    Rows are immutable once written; re-sharing returns the existing code.
    """

    __tablename__ = "shares"
    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uq_shares_user_post"),
        UniqueConstraint("short_code", name="uq_shares_short_code"),
        Index("ix_shares_post_id", "post_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Case-sensitive; compared byte-for-byte on resolve.
    short_code: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
