"""Like ledger: at most one like per (user, post), counted on the post."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vistagram.models import Like, Post
from vistagram.services.counters import PostCounterMaintainer
from vistagram.services.errors import AlreadyLikedError, NotLikedError, PostNotFoundError

# Configure logger for this module
logger = logging.getLogger(__name__)


class LikeLedger:
    """Service toggling like state and the post's ``like_count`` together."""

    def __init__(self, db: Session, counters: PostCounterMaintainer | None = None) -> None:
        self.db = db
        self.counters = counters or PostCounterMaintainer(db)

    def has_liked(self, user_id: int, post_id: int) -> bool:
        """Return True if the user currently likes the post."""
        return self._find(user_id, post_id) is not None

    def like(self, user_id: int, post_id: int) -> int:
        """Record a like and bump the counter in one transaction.

        Returns:
            The post's new ``like_count``.

        Raises:
            PostNotFoundError: If the post does not exist.
            AlreadyLikedError: If the user already likes the post, including when
                a concurrent request inserted the row first.
        """
        self._require_post(post_id)
        if self._find(user_id, post_id) is not None:
            raise AlreadyLikedError(user_id, post_id)

        try:
            self.db.add(Like(user_id=user_id, post_id=post_id))
            self.db.flush()
            like_count = self.counters.increment_likes(post_id)
            self.db.commit()
        except IntegrityError as err:
            self.db.rollback()
            if self._find(user_id, post_id) is not None:
                raise AlreadyLikedError(user_id, post_id) from err
            raise
        except Exception:
            self.db.rollback()
            raise

        logger.info("User %s liked post %s (like_count=%d)", user_id, post_id, like_count)
        return like_count

    def unlike(self, user_id: int, post_id: int) -> int:
        """Remove a like and decrement the counter in one transaction.

        Returns:
            The post's new ``like_count``; never below zero.

        Raises:
            PostNotFoundError: If the post does not exist.
            NotLikedError: If there is no like to remove.
        """
        self._require_post(post_id)

        try:
            result = self.db.execute(
                delete(Like)
                .where(Like.user_id == user_id, Like.post_id == post_id)
                .execution_options(synchronize_session=False)
            )
            removed = result.rowcount
            if removed:
                like_count = self.counters.decrement_likes(post_id)
                self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        if not removed:
            self.db.rollback()
            raise NotLikedError(user_id, post_id)

        logger.info("User %s unliked post %s (like_count=%d)", user_id, post_id, like_count)
        return like_count

    def _find(self, user_id: int, post_id: int) -> Like | None:
        return self.db.execute(
            select(Like).where(Like.user_id == user_id, Like.post_id == post_id)
        ).scalar_one_or_none()

    def _require_post(self, post_id: int) -> None:
        exists = self.db.execute(select(Post.id).where(Post.id == post_id)).first()
        if exists is None:
            raise PostNotFoundError(post_id)
