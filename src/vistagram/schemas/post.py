"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostCreate(BaseModel):
    """Schema for creating a new post from an already-hosted image."""

    image_url: str = Field(..., min_length=1, max_length=2048, description="URL returned by the image host")
    caption: str | None = Field(None, max_length=2200, description="Optional caption")

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str) -> str:
        """Reject blank URLs."""
        v = v.strip()
        if not v:
            raise ValueError("Image URL is required")
        return v


class PostAuthor(BaseModel):
    """Author summary embedded in timeline entries."""

    id: int
    name: str | None
    email: str
    image: str | None

    model_config = ConfigDict(from_attributes=True)


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    user_id: int | None
    image_url: str
    caption: str | None
    created_at: datetime
    like_count: int
    share_count: int
    is_liked: bool = False
    user: PostAuthor | None = None

    model_config = ConfigDict(from_attributes=True)
