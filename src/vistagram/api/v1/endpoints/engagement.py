# src/vistagram/api/v1/endpoints/engagement.py
"""Like, share and status endpoints for posts."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from vistagram.api.v1.dependencies import CurrentUserDep, OptionalUserDep, SessionDep
from vistagram.schemas.engagement import LikeResponse, PostStatusResponse, ShareResponse
from vistagram.services.errors import (
    AlreadyLikedError,
    CodeGenerationExhaustedError,
    NotLikedError,
    PostNotFoundError,
)
from vistagram.services.likes import LikeLedger
from vistagram.services.shares import ShareLedger
from vistagram.services.status import get_post_status

router = APIRouter(prefix="/posts", tags=["engagement"])


def get_like_ledger(db: SessionDep) -> LikeLedger:
    """Return a like ledger bound to the request session."""
    return LikeLedger(db)


def get_share_ledger(db: SessionDep) -> ShareLedger:
    """Return a share ledger bound to the request session."""
    return ShareLedger(db)


LikeLedgerDep = Annotated[LikeLedger, Depends(get_like_ledger)]
ShareLedgerDep = Annotated[ShareLedger, Depends(get_share_ledger)]


def _post_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


@router.post("/{post_id}/like", response_model=LikeResponse)
async def like_post(
    post_id: int,
    current_user: CurrentUserDep,
    ledger: LikeLedgerDep,
) -> LikeResponse:
    """Like a post on behalf of the signed-in user."""
    try:
        like_count = ledger.like(current_user.id, post_id)
    except PostNotFoundError as err:
        raise _post_not_found() from err
    except AlreadyLikedError as err:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err)) from err
    return LikeResponse(like_count=like_count, is_liked=True)


@router.delete("/{post_id}/like", response_model=LikeResponse)
async def unlike_post(
    post_id: int,
    current_user: CurrentUserDep,
    ledger: LikeLedgerDep,
) -> LikeResponse:
    """Remove the signed-in user's like from a post."""
    try:
        like_count = ledger.unlike(current_user.id, post_id)
    except PostNotFoundError as err:
        raise _post_not_found() from err
    except NotLikedError as err:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err)) from err
    return LikeResponse(like_count=like_count, is_liked=False)


@router.post("/{post_id}/share", response_model=ShareResponse)
async def share_post(
    post_id: int,
    current_user: CurrentUserDep,
    ledger: ShareLedgerDep,
) -> ShareResponse:
    """Return the signed-in user's share code for a post, creating it if needed."""
    try:
        result = ledger.create_or_get_share(current_user.id, post_id)
    except PostNotFoundError as err:
        raise _post_not_found() from err
    except CodeGenerationExhaustedError as err:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate unique share code",
        ) from err
    return ShareResponse(
        share_count=result.share_count,
        is_shared=True,
        short_code=result.short_code,
    )


@router.get("/{post_id}/status", response_model=PostStatusResponse)
async def post_status(
    post_id: int,
    db: SessionDep,
    current_user: OptionalUserDep,
) -> PostStatusResponse:
    """Return like/share counters and whether the caller likes the post."""
    try:
        post_state = get_post_status(
            db,
            post_id,
            current_user.id if current_user is not None else None,
        )
    except PostNotFoundError as err:
        raise _post_not_found() from err
    return PostStatusResponse(
        like_count=post_state.like_count,
        share_count=post_state.share_count,
        is_liked=post_state.is_liked,
    )
