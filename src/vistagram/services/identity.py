"""Client for the external identity provider (Google ID tokens).

The OAuth dance happens in the browser; the backend only asks Google to
vouch for the resulting ID token and reads the profile claims from it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from vistagram.core.settings import settings

# Configure logger for this module
logger = logging.getLogger(__name__)

HTTP_OK = 200


class IdentityVerificationError(RuntimeError):
    """Raised when an ID token cannot be verified or lacks required claims."""


@dataclass(frozen=True)
class IdentityProfile:
    """Claims the application relies on after sign-in."""

    subject: str
    email: str
    name: str | None = None
    image: str | None = None


class GoogleIdentityProvider:
    """Verifies Google ID tokens through the tokeninfo endpoint."""

    def __init__(
        self,
        *,
        client_id: str | None = None,
        tokeninfo_url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.client_id = client_id if client_id is not None else settings.google_client_id
        self.tokeninfo_url = tokeninfo_url or settings.google_tokeninfo_url
        self.timeout_seconds = timeout_seconds or settings.identity_http_timeout_seconds
        self._transport = transport

    async def verify(self, id_token: str) -> IdentityProfile:
        """Return the verified profile behind an ID token.

        Raises:
            IdentityVerificationError: If the provider rejects the token, the
                audience does not match, or no verified email is present.
        """
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout_seconds),
                transport=self._transport,
            ) as client:
                response = await client.get(self.tokeninfo_url, params={"id_token": id_token})
        except httpx.HTTPError as exc:
            logger.error("Identity provider unreachable: %s", exc)
            raise IdentityVerificationError("Identity provider unavailable") from exc

        if response.status_code != HTTP_OK:
            logger.warning("Identity provider rejected token (%s)", response.status_code)
            raise IdentityVerificationError("Invalid identity token")

        claims = response.json()
        if self.client_id and claims.get("aud") != self.client_id:
            logger.warning("ID token audience mismatch: %r", claims.get("aud"))
            raise IdentityVerificationError("Identity token was issued for another client")

        email = claims.get("email")
        if not email:
            raise IdentityVerificationError("Identity provider returned no email")
        if str(claims.get("email_verified", "false")).lower() != "true":
            raise IdentityVerificationError("Email address is not verified")

        return IdentityProfile(
            subject=str(claims.get("sub", "")),
            email=str(email).lower(),
            name=claims.get("name"),
            image=claims.get("picture"),
        )


def get_identity_provider() -> GoogleIdentityProvider:
    """Return an identity provider client configured from settings."""
    return GoogleIdentityProvider()
