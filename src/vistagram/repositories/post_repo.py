"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from vistagram.models import Like, Post

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier with its author loaded."""
        return self.session.execute(
            select(Post).options(selectinload(Post.user)).where(Post.id == post_id)
        ).scalar_one_or_none()

    def list_recent(self, *, limit: int, offset: int = 0) -> list[Post]:
        """Return posts newest first."""
        result = self.session.execute(
            select(Post)
            .options(selectinload(Post.user))
            .order_by(Post.created_at.desc(), Post.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars())

    def list_popular(self, limit: int | None = None) -> list[Post]:
        """Return posts sorted by descending like count."""
        stmt = (
            select(Post)
            .options(selectinload(Post.user))
            .order_by(Post.like_count.desc(), Post.created_at.desc(), Post.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars())

    def list_by_author(self, user_id: int, limit: int | None = None) -> list[Post]:
        """Return a user's posts newest first."""
        stmt = (
            select(Post)
            .options(selectinload(Post.user))
            .where(Post.user_id == user_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars())

    def liked_post_ids(self, user_id: int, post_ids: list[int]) -> set[int]:
        """Return the subset of ``post_ids`` the user has liked."""
        if not post_ids:
            return set()
        result = self.session.execute(
            select(Like.post_id).where(Like.user_id == user_id, Like.post_id.in_(post_ids))
        )
        return set(result.scalars())

    def create(self, *, user_id: int, image_url: str, caption: str | None) -> Post:
        """Insert a new post and return the persisted ORM instance.

        Counters start at zero; only the counter maintainer changes them.
        """
        post = Post(user_id=user_id, image_url=image_url, caption=caption)
        self.session.add(post)
        self.session.flush()
        return post
