# src/vistagram/api/v1/endpoints/auth.py
"""Authentication endpoints for the Vistagram API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from vistagram.api.v1.dependencies import SessionDep
from vistagram.core.security import create_access_token
from vistagram.schemas.user import SessionRequest, SessionResponse, UserResponse
from vistagram.services.identity import (
    GoogleIdentityProvider,
    IdentityVerificationError,
    get_identity_provider,
)
from vistagram.services.users import get_or_create_user

router = APIRouter(prefix="/auth", tags=["authentication"])


def get_identity_provider_dep() -> GoogleIdentityProvider:
    """Return the identity provider client."""
    return get_identity_provider()


IdentityProviderDep = Annotated[GoogleIdentityProvider, Depends(get_identity_provider_dep)]


@router.post(
    "/session",
    summary="Exchange an identity-provider ID token for a session token",
    response_model=SessionResponse,
)
async def create_session(
    body: SessionRequest,
    db: SessionDep,
    identity_provider: IdentityProviderDep,
) -> SessionResponse:
    """Sign a user in, creating the account on first sign-in."""
    try:
        profile = await identity_provider.verify(body.id_token)
    except IdentityVerificationError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(err),
        ) from err

    user, _created = get_or_create_user(db, profile)
    return SessionResponse(
        access_token=create_access_token(user.id),
        token_type="bearer",
        user=UserResponse.model_validate(user),
    )
