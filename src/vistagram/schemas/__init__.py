"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .engagement import LikeResponse, PostStatusResponse, ShareResponse
from .image import ImageUploadResponse
from .post import PostAuthor, PostCreate, PostResponse
from .user import (
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    SessionRequest,
    SessionResponse,
    UserResponse,
)

__all__ = [
    "LikeResponse", "PostStatusResponse", "ShareResponse",
    "ImageUploadResponse",
    "PostAuthor", "PostCreate", "PostResponse",
    "ProfileUpdateRequest", "ProfileUpdateResponse",
    "SessionRequest", "SessionResponse", "UserResponse",
]
