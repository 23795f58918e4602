"""Client for the external image host (Cloudinary unsigned uploads).

Images are never stored by Vistagram itself; the host returns a stable
``secure_url`` that posts reference.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from vistagram.core.settings import settings

# Configure logger for this module
logger = logging.getLogger(__name__)

HTTP_OK = 200


class ImageHostError(RuntimeError):
    """Raised when the image host rejects or fails an upload."""


class ImageHostNotConfiguredError(ImageHostError):
    """Raised when uploads are attempted without host credentials."""


class InvalidImageError(ImageHostError):
    """Raised when the submitted file is not an acceptable image."""


class ImageTooLargeError(InvalidImageError):
    """Raised when the submitted file exceeds the configured size limit."""


@dataclass(frozen=True)
class ImageHostConfig:
    """Connection details for the image host."""

    upload_url: str | None
    upload_preset: str | None
    timeout_seconds: float
    max_bytes: int

    @classmethod
    def from_settings(cls) -> ImageHostConfig:
        return cls(
            upload_url=settings.cloudinary_upload_url,
            upload_preset=settings.cloudinary_upload_preset,
            timeout_seconds=settings.image_upload_timeout_seconds,
            max_bytes=settings.image_max_bytes,
        )


class CloudinaryImageHost:
    """Uploads image bytes and returns the hosted URL."""

    def __init__(
        self,
        config: ImageHostConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or ImageHostConfig.from_settings()
        self._transport = transport

    def validate(self, *, content_type: str | None, size: int) -> None:
        """Check the file before any network call.

        Raises:
            InvalidImageError: If the content type is not ``image/*``.
            ImageTooLargeError: If the payload is empty or too large.
        """
        if not content_type or not content_type.startswith("image/"):
            logger.warning("Rejected upload with content type %r", content_type)
            raise InvalidImageError("Only image files are allowed")
        if size <= 0:
            raise InvalidImageError("Image file is empty")
        if size > self.config.max_bytes:
            raise ImageTooLargeError(
                f"Image exceeds the {self.config.max_bytes} byte upload limit"
            )

    async def upload(self, *, filename: str, content_type: str | None, data: bytes) -> str:
        """Upload an image and return its secure URL."""
        self.validate(content_type=content_type, size=len(data))
        if not self.config.upload_url or not self.config.upload_preset:
            raise ImageHostNotConfiguredError("Image host is not configured")

        logger.debug("Uploading %s (%d bytes, %s)", filename, len(data), content_type)
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout_seconds),
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self.config.upload_url,
                    data={"upload_preset": self.config.upload_preset},
                    files={"file": (filename, data, content_type)},
                )
        except httpx.HTTPError as exc:
            logger.error("Image upload failed: %s", exc)
            raise ImageHostError("Failed to upload image") from exc

        if response.status_code != HTTP_OK:
            logger.error(
                "Image host responded %s: %s", response.status_code, response.text[:200]
            )
            raise ImageHostError(
                f"Failed to upload image: {response.status_code} {response.reason_phrase}"
            )

        try:
            secure_url = response.json().get("secure_url")
        except ValueError as exc:
            raise ImageHostError("Image host returned an unreadable response") from exc
        if not secure_url:
            raise ImageHostError("Image host response did not include a URL")

        logger.info("Uploaded %s to %s", filename, secure_url)
        return str(secure_url)


def get_image_host() -> CloudinaryImageHost:
    """Return an image host client configured from settings."""
    return CloudinaryImageHost()
