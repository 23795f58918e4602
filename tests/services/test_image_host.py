"""Tests for the image host client."""

import httpx
import pytest

from vistagram.services.image_host import (
    CloudinaryImageHost,
    ImageHostConfig,
    ImageHostError,
    ImageHostNotConfiguredError,
    ImageTooLargeError,
    InvalidImageError,
)

UPLOAD_URL = "https://api.cloudinary.test/v1_1/demo/image/upload"


def _config(**overrides) -> ImageHostConfig:
    values = {
        "upload_url": UPLOAD_URL,
        "upload_preset": "unsigned",
        "timeout_seconds": 5.0,
        "max_bytes": 1024,
    }
    values.update(overrides)
    return ImageHostConfig(**values)


@pytest.mark.asyncio
async def test_upload_returns_secure_url() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"secure_url": "https://res.cloudinary.test/img.png"})

    host = CloudinaryImageHost(_config(), transport=httpx.MockTransport(handler))
    url = await host.upload(filename="cat.png", content_type="image/png", data=b"\x89PNG")

    assert url == "https://res.cloudinary.test/img.png"
    assert len(seen) == 1
    assert str(seen[0].url) == UPLOAD_URL
    body = seen[0].content
    assert b"upload_preset" in body
    assert b"unsigned" in body


@pytest.mark.asyncio
async def test_rejects_non_images_without_network_call() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - must not run
        raise AssertionError("network call made")

    host = CloudinaryImageHost(_config(), transport=httpx.MockTransport(handler))
    with pytest.raises(InvalidImageError):
        await host.upload(filename="notes.txt", content_type="text/plain", data=b"hello")
    with pytest.raises(InvalidImageError):
        await host.upload(filename="empty.png", content_type="image/png", data=b"")
    with pytest.raises(ImageTooLargeError):
        await host.upload(filename="big.png", content_type="image/png", data=b"x" * 2048)


@pytest.mark.asyncio
async def test_host_error_status() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(400, text="bad preset"))
    host = CloudinaryImageHost(_config(), transport=transport)
    with pytest.raises(ImageHostError, match="400"):
        await host.upload(filename="cat.png", content_type="image/png", data=b"img")


@pytest.mark.asyncio
async def test_missing_secure_url() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
    host = CloudinaryImageHost(_config(), transport=transport)
    with pytest.raises(ImageHostError):
        await host.upload(filename="cat.png", content_type="image/png", data=b"img")


@pytest.mark.asyncio
async def test_network_failure_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("down", request=request)

    host = CloudinaryImageHost(_config(), transport=httpx.MockTransport(handler))
    with pytest.raises(ImageHostError):
        await host.upload(filename="cat.png", content_type="image/png", data=b"img")


@pytest.mark.asyncio
async def test_unconfigured_host() -> None:
    host = CloudinaryImageHost(_config(upload_url=None))
    with pytest.raises(ImageHostNotConfiguredError):
        await host.upload(filename="cat.png", content_type="image/png", data=b"img")
