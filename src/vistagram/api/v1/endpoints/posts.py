# src/vistagram/api/v1/endpoints/posts.py
"""Post-related endpoints for the Vistagram API."""

from fastapi import APIRouter, HTTPException, Query, status

from vistagram.api.v1.dependencies import CurrentUserDep, OptionalUserDep, SessionDep
from vistagram.core.settings import settings
from vistagram.schemas.post import PostCreate, PostResponse
from vistagram.services.errors import PostNotFoundError
from vistagram.services.timeline import (
    TimelineFilter,
    create_post,
    filter_posts,
    get_post,
    list_timeline,
    to_post_response,
)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/", response_model=list[PostResponse])
async def list_posts(
    db: SessionDep,
    current_user: OptionalUserDep,
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int | None = Query(None, ge=1, description="Posts per page"),
) -> list[PostResponse]:
    """List the timeline newest first.

    Args:
        db: Database session
        current_user: Signed-in viewer, used to fill ``is_liked``
        page: 1-based page number
        limit: Page size, defaulting to and capped by configuration

    Returns:
        One page of posts with author summaries
    """
    page_size = min(limit or settings.timeline_default_limit, settings.timeline_max_limit)
    return list_timeline(
        db,
        page=page,
        limit=page_size,
        viewer_id=current_user.id if current_user else None,
    )


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_new_post(
    post_data: PostCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> PostResponse:
    """Create a post for an image already stored by the image host."""
    post = create_post(
        db,
        user_id=current_user.id,
        image_url=post_data.image_url,
        caption=post_data.caption,
    )
    return to_post_response(post)


@router.get("/filter", response_model=list[PostResponse])
async def filtered_posts(
    db: SessionDep,
    current_user: OptionalUserDep,
    filter_type: str | None = Query(None, alias="type", description="Either 'popular' or 'mine'"),
) -> list[PostResponse]:
    """Return popular posts, or the signed-in user's own posts."""
    try:
        kind = TimelineFilter(filter_type)
    except ValueError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filter type must be 'popular' or 'mine'",
        ) from err

    if kind is TimelineFilter.MINE and current_user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    return filter_posts(db, kind, current_user.id if current_user else None)


@router.get("/{post_id}", response_model=PostResponse)
async def get_single_post(
    post_id: int,
    db: SessionDep,
    current_user: OptionalUserDep,
) -> PostResponse:
    """Return a single post, as shown on a share-link landing page."""
    try:
        return get_post(db, post_id, current_user.id if current_user else None)
    except PostNotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Post not found"
        ) from err
