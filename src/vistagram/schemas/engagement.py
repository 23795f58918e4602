"""Like, share and status response schemas."""

from pydantic import BaseModel, Field


class LikeResponse(BaseModel):
    """Result of a like or unlike."""

    like_count: int = Field(..., ge=0)
    is_liked: bool


class ShareResponse(BaseModel):
    """Result of a share; repeated shares return the same code."""

    share_count: int = Field(..., ge=0)
    is_shared: bool = True
    short_code: str = Field(..., description="Code used to build the share link")


class PostStatusResponse(BaseModel):
    """Current counters for a post and the caller's like state."""

    like_count: int = Field(..., ge=0)
    share_count: int = Field(..., ge=0)
    is_liked: bool
