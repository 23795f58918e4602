"""Denormalized like/share counters kept in step with their ledgers."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import case, select, update
from sqlalchemy.orm import InstrumentedAttribute, Session

from vistagram.models import Post
from vistagram.services.errors import PostNotFoundError


@dataclass(frozen=True)
class PostCounts:
    """Snapshot of a post's engagement counters."""

    like_count: int
    share_count: int


class PostCounterMaintainer:
    """Applies counter changes as SQL expressions inside the caller's transaction.

    Every write is ``column = column +/- 1`` evaluated by the database, so
    concurrent requests on different (user, post) pairs never lose an update.
    This class never commits; the ledger that owns the transaction does.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def increment_likes(self, post_id: int) -> int:
        """Add one like and return the new ``like_count``."""
        return self._apply(post_id, Post.like_count, Post.like_count + 1)

    def decrement_likes(self, post_id: int) -> int:
        """Remove one like, floored at zero, and return the new ``like_count``."""
        floored = case((Post.like_count > 0, Post.like_count - 1), else_=0)
        return self._apply(post_id, Post.like_count, floored)

    def increment_shares(self, post_id: int) -> int:
        """Add one share and return the new ``share_count``."""
        return self._apply(post_id, Post.share_count, Post.share_count + 1)

    def read(self, post_id: int) -> PostCounts:
        """Return the committed counters for a post straight from the table."""
        row = self.db.execute(
            select(Post.like_count, Post.share_count).where(Post.id == post_id)
        ).first()
        if row is None:
            raise PostNotFoundError(post_id)
        return PostCounts(like_count=int(row.like_count), share_count=int(row.share_count))

    def _apply(self, post_id: int, column: InstrumentedAttribute[int], value: object) -> int:
        self.db.execute(
            update(Post)
            .where(Post.id == post_id)
            .values({column: value})
            .execution_options(synchronize_session=False)
        )
        # Reload so any Post already in the session reflects the database value.
        post = self.db.execute(
            select(Post).where(Post.id == post_id).execution_options(populate_existing=True)
        ).scalar_one_or_none()
        if post is None:
            raise PostNotFoundError(post_id)
        return int(getattr(post, column.key))
