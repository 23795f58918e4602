# src/vistagram/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    engagement_router,
    images_router,
    posts_router,
    shares_router,
    short_link_router,
    users_router,
)

__all__ = [
    "auth_router",
    "engagement_router",
    "images_router",
    "posts_router",
    "shares_router",
    "short_link_router",
    "users_router",
]
