"""Account creation on sign-in and profile edits."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vistagram.core.settings import MAX_PROFILE_NAME_LENGTH, settings
from vistagram.models import User
from vistagram.services.identity import IdentityProfile

logger = logging.getLogger(__name__)


def get_or_create_user(db: Session, profile: IdentityProfile) -> tuple[User, bool]:
    """Return the account for a verified identity, creating it on first sign-in.

    Returns:
        Tuple of the user and whether the row was created.
    """
    user = db.execute(select(User).where(User.email == profile.email)).scalar_one_or_none()
    if user is not None:
        return user, False

    # Provider display names are not length-checked upstream.
    name = profile.name[:MAX_PROFILE_NAME_LENGTH] if profile.name else profile.name
    user = User(email=profile.email, name=name, image=profile.image)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Two first sign-ins raced on the unique email.
        db.rollback()
        user = db.execute(select(User).where(User.email == profile.email)).scalar_one()
        return user, False
    db.refresh(user)
    logger.info("New user created: %s", user.email)
    return user, True


def validate_profile(name: str, bio: str | None) -> None:
    """Raise ValueError if the submitted profile fields are unacceptable."""
    if not name or not name.strip():
        raise ValueError("Name is required")
    if len(name.strip()) > MAX_PROFILE_NAME_LENGTH:
        raise ValueError(f"Name cannot exceed {MAX_PROFILE_NAME_LENGTH} characters")
    if bio and len(bio) > settings.profile_bio_max_length:
        raise ValueError(
            f"Bio cannot exceed {settings.profile_bio_max_length} characters"
        )


def update_profile(
    db: Session,
    user: User,
    *,
    name: str,
    image: str | None,
    bio: str | None,
) -> User:
    """Validate and store profile fields for a user."""
    validate_profile(name, bio)
    user.name = name.strip()
    user.image = image
    user.bio = bio
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    return user
