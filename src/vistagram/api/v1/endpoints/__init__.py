# src/vistagram/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .engagement import router as engagement_router
from .images import router as images_router
from .posts import router as posts_router
from .shares import router as shares_router
from .shares import short_link_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "engagement_router",
    "images_router",
    "posts_router",
    "shares_router",
    "short_link_router",
    "users_router",
]
