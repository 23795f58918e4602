"""Service-level helpers for creating and listing posts."""
from __future__ import annotations

import logging
from enum import Enum

from sqlalchemy.orm import Session

from vistagram.models.post import Post
from vistagram.repositories.post_repo import PostRepository
from vistagram.schemas.post import PostAuthor, PostResponse
from vistagram.services.errors import PostNotFoundError

logger = logging.getLogger(__name__)


class TimelineFilter(str, Enum):
    """Alternative orderings of the timeline."""

    POPULAR = "popular"
    MINE = "mine"


def create_post(
    db: Session,
    *,
    user_id: int,
    image_url: str,
    caption: str | None,
) -> Post:
    """Persist a post for an image the client already uploaded.

    Args:
        db: Database session; committed on success.
        user_id: Author of the post.
        image_url: Stable URL returned by the image host.
        caption: Optional caption text.

    Returns:
        The persisted post with zeroed counters.
    """
    repo = PostRepository(db)
    try:
        post = repo.create(user_id=user_id, image_url=image_url, caption=caption)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(post)
    logger.info("User %s created post %s", user_id, post.id)
    return post


def list_timeline(
    db: Session,
    *,
    page: int,
    limit: int,
    viewer_id: int | None = None,
) -> list[PostResponse]:
    """Return one page of the timeline, newest first."""
    repo = PostRepository(db)
    posts = repo.list_recent(limit=limit, offset=(page - 1) * limit)
    return _with_like_state(repo, posts, viewer_id)


def filter_posts(
    db: Session,
    kind: TimelineFilter,
    viewer_id: int | None = None,
) -> list[PostResponse]:
    """Return the popular or the viewer's own posts.

    The ``mine`` filter needs a viewer; callers check authentication first.
    """
    repo = PostRepository(db)
    if kind is TimelineFilter.POPULAR:
        posts = repo.list_popular()
    else:
        if viewer_id is None:
            raise ValueError("The 'mine' filter requires a signed-in user")
        posts = repo.list_by_author(viewer_id)
    return _with_like_state(repo, posts, viewer_id)


def get_post(db: Session, post_id: int, viewer_id: int | None = None) -> PostResponse:
    """Return a single post.

    Raises:
        PostNotFoundError: If the post does not exist.
    """
    repo = PostRepository(db)
    post = repo.get_by_id(post_id)
    if post is None:
        raise PostNotFoundError(post_id)
    return _with_like_state(repo, [post], viewer_id)[0]


def to_post_response(post: Post, *, is_liked: bool = False) -> PostResponse:
    """Convert a Post ORM instance to an API schema."""
    return PostResponse(
        id=post.id,
        user_id=post.user_id,
        image_url=post.image_url,
        caption=post.caption,
        created_at=post.created_at,
        like_count=post.like_count or 0,
        share_count=post.share_count or 0,
        is_liked=is_liked,
        user=PostAuthor.model_validate(post.user) if post.user is not None else None,
    )


def _with_like_state(
    repo: PostRepository,
    posts: list[Post],
    viewer_id: int | None,
) -> list[PostResponse]:
    liked: set[int] = set()
    if viewer_id is not None:
        liked = repo.liked_post_ids(viewer_id, [post.id for post in posts])
    return [to_post_response(post, is_liked=post.id in liked) for post in posts]
