# src/vistagram/api/v1/endpoints/shares.py
"""Short-link redirect endpoints."""

import logging

from fastapi import APIRouter
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from vistagram.api.v1.dependencies import SessionDep
from vistagram.core.settings import settings
from vistagram.services.errors import ShortCodeNotFoundError
from vistagram.services.shares import ShareLedger

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/share", tags=["shares"])
short_link_router = APIRouter(tags=["shares"])


def resolve_redirect_target(db: SessionDep, short_code: str) -> str:
    """Map a short code to the post page, or to the fallback page.

    Unknown codes and storage failures both land on the fallback; the
    failure is logged rather than shown to whoever followed the link.
    """
    try:
        post_id = ShareLedger(db).resolve_short_code(short_code)
    except ShortCodeNotFoundError:
        logger.debug("Short code %r not found", short_code)
        return settings.share_redirect_fallback
    except SQLAlchemyError:
        logger.exception("Failed to resolve short code %r", short_code)
        db.rollback()
        return settings.share_redirect_fallback
    return settings.post_url_template.format(post_id=post_id)


@router.get("/{short_code}", response_class=RedirectResponse)
async def follow_share_link(short_code: str, db: SessionDep) -> RedirectResponse:
    """Redirect a share link to the shared post."""
    return RedirectResponse(url=resolve_redirect_target(db, short_code))


@short_link_router.get("/s/{short_code}", response_class=RedirectResponse)
async def follow_short_link(short_code: str, db: SessionDep) -> RedirectResponse:
    """Root-level alias for share links."""
    return RedirectResponse(url=resolve_redirect_target(db, short_code))
