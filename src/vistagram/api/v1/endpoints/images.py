# src/vistagram/api/v1/endpoints/images.py
"""Image upload endpoint backed by the external image host."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from vistagram.api.v1.dependencies import CurrentUserDep
from vistagram.schemas.image import ImageUploadResponse
from vistagram.services.image_host import (
    CloudinaryImageHost,
    ImageHostError,
    ImageHostNotConfiguredError,
    ImageTooLargeError,
    InvalidImageError,
    get_image_host,
)

router = APIRouter(prefix="/images", tags=["images"])


def get_image_host_dep() -> CloudinaryImageHost:
    """Return the image host client."""
    return get_image_host()


ImageHostDep = Annotated[CloudinaryImageHost, Depends(get_image_host_dep)]


@router.post("/", response_model=ImageUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    current_user: CurrentUserDep,
    image_host: ImageHostDep,
    file: UploadFile = File(...),
) -> ImageUploadResponse:
    """Upload an image and return the hosted URL to reference from a post."""
    # One byte past the limit is enough for the host to reject oversized files.
    data = await file.read(image_host.config.max_bytes + 1)
    try:
        image_url = await image_host.upload(
            filename=file.filename or "upload",
            content_type=file.content_type,
            data=data,
        )
    except ImageTooLargeError as err:
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE, detail=str(err)
        ) from err
    except InvalidImageError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    except ImageHostNotConfiguredError as err:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(err)
        ) from err
    except ImageHostError as err:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(err)) from err
    return ImageUploadResponse(image_url=image_url)
