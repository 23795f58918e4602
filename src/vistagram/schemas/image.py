"""Image upload schemas."""

from pydantic import BaseModel, Field


class ImageUploadResponse(BaseModel):
    """URL of an image stored by the image host."""

    image_url: str = Field(..., description="Secure URL returned by the image host")
