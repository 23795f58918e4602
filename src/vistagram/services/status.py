"""Read-only engagement status for a post."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from vistagram.services.counters import PostCounterMaintainer
from vistagram.services.likes import LikeLedger


@dataclass(frozen=True)
class PostStatus:
    """Counters for a post plus the caller's like state."""

    like_count: int
    share_count: int
    is_liked: bool


def get_post_status(db: Session, post_id: int, user_id: int | None = None) -> PostStatus:
    """Return the latest committed counters for a post.

    ``is_liked`` is only looked up when ``user_id`` is given; anonymous
    callers always see ``False``.

    Raises:
        PostNotFoundError: If the post does not exist.
    """
    counts = PostCounterMaintainer(db).read(post_id)
    is_liked = False
    if user_id is not None:
        is_liked = LikeLedger(db).has_liked(user_id, post_id)
    return PostStatus(
        like_count=counts.like_count,
        share_count=counts.share_count,
        is_liked=is_liked,
    )
