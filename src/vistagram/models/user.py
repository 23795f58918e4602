# src/vistagram/models/user.py
"""SQLAlchemy model for accounts created through identity-provider sign-in."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vistagram.core.settings import MAX_PROFILE_BIO_LENGTH, MAX_PROFILE_NAME_LENGTH
from vistagram.db.session import Base
from vistagram.db.time import utcnow


class User(Base):
    """Account keyed by the email address the identity provider vouches for."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    name: Mapped[str | None] = mapped_column(String(MAX_PROFILE_NAME_LENGTH), nullable=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio: Mapped[str | None] = mapped_column(String(MAX_PROFILE_BIO_LENGTH), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    posts: Mapped[list[Post]] = relationship(  # noqa: F821
        "Post",
        back_populates="user",
    )
