"""JWT helpers for session tokens issued after identity-provider sign-in."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import jwt

from vistagram.core.settings import settings


def create_access_token(subject: int | str, extra_claims: dict[str, str] | None = None) -> str:
    """Create JWT access token for user authentication."""
    to_encode: dict[str, object] = {"sub": str(subject)}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> dict[str, object]:
    """Decode and verify a session token.

    Raises:
        jose.JWTError: If the signature or expiry check fails.
    """
    payload: dict[str, object] = jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.jwt_algorithm],
    )
    return payload
