"""Share ledger: one durable short code per (user, post)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vistagram.core.settings import settings
from vistagram.models import Post, Share
from vistagram.services.counters import PostCounterMaintainer
from vistagram.services.errors import (
    CodeGenerationExhaustedError,
    PostNotFoundError,
    ShortCodeNotFoundError,
)
from vistagram.services.short_code import generate_short_code, is_plausible_short_code

# Configure logger for this module
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShareResult:
    """Outcome of a share request."""

    short_code: str
    share_count: int
    created: bool


class ShareLedger:
    """Service issuing share codes and maintaining ``share_count``."""

    def __init__(
        self,
        db: Session,
        *,
        code_generator: Callable[[], str] = generate_short_code,
        max_attempts: int | None = None,
        counters: PostCounterMaintainer | None = None,
    ) -> None:
        self.db = db
        self.code_generator = code_generator
        if max_attempts is None:
            max_attempts = settings.share_code_max_attempts
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.counters = counters or PostCounterMaintainer(db)

    def create_or_get_share(self, user_id: int, post_id: int) -> ShareResult:
        """Return the user's share code for a post, creating it on first share.

        Re-sharing is idempotent: the existing code is returned and the counter
        is left alone. A new share inserts the row and increments
        ``share_count`` in a single transaction.

        Raises:
            PostNotFoundError: If the post does not exist.
            CodeGenerationExhaustedError: If every candidate code collided.
        """
        existing = self._find(user_id, post_id)
        if existing is not None:
            return self._existing_result(existing)
        if self.db.execute(select(Post.id).where(Post.id == post_id)).first() is None:
            raise PostNotFoundError(post_id)

        for attempt in range(1, self.max_attempts + 1):
            short_code = self.code_generator()
            if self._code_taken(short_code):
                logger.warning(
                    "Short code collision on attempt %d/%d", attempt, self.max_attempts
                )
                continue

            try:
                self.db.add(Share(user_id=user_id, post_id=post_id, short_code=short_code))
                self.db.flush()
                share_count = self.counters.increment_shares(post_id)
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                # A concurrent request from the same user may have won the insert.
                existing = self._find(user_id, post_id)
                if existing is not None:
                    return self._existing_result(existing)
                if self._code_taken(short_code):
                    logger.warning(
                        "Short code raced on attempt %d/%d", attempt, self.max_attempts
                    )
                    continue
                raise
            except Exception:
                self.db.rollback()
                raise

            logger.info(
                "User %s shared post %s as %s (share_count=%d)",
                user_id,
                post_id,
                short_code,
                share_count,
            )
            return ShareResult(short_code=short_code, share_count=share_count, created=True)

        logger.error(
            "Exhausted %d attempts generating a share code for post %s",
            self.max_attempts,
            post_id,
        )
        raise CodeGenerationExhaustedError(self.max_attempts)

    def resolve_short_code(self, short_code: str) -> int:
        """Return the post id behind a short code (exact, case-sensitive match).

        Raises:
            ShortCodeNotFoundError: If no share uses the code.
        """
        if not is_plausible_short_code(short_code):
            raise ShortCodeNotFoundError(short_code)
        post_id = self.db.execute(
            select(Share.post_id).where(Share.short_code == short_code)
        ).scalar_one_or_none()
        if post_id is None:
            raise ShortCodeNotFoundError(short_code)
        return int(post_id)

    def _existing_result(self, share: Share) -> ShareResult:
        counts = self.counters.read(share.post_id)
        return ShareResult(
            short_code=share.short_code,
            share_count=counts.share_count,
            created=False,
        )

    def _find(self, user_id: int, post_id: int) -> Share | None:
        return self.db.execute(
            select(Share).where(Share.user_id == user_id, Share.post_id == post_id)
        ).scalar_one_or_none()

    def _code_taken(self, short_code: str) -> bool:
        return self.db.execute(
            select(Share.id).where(Share.short_code == short_code)
        ).first() is not None
