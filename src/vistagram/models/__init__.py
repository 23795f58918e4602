"""SQLAlchemy models for the Vistagram application."""

from .like import Like
from .post import Post
from .share import Share
from .user import User

__all__ = [
    "Like",
    "Post",
    "Share",
    "User",
]
