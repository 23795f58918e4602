# src/vistagram/services/__init__.py
"""Business logic services for the Vistagram application."""

from .counters import PostCounterMaintainer, PostCounts
from .likes import LikeLedger
from .shares import ShareLedger, ShareResult
from .status import PostStatus, get_post_status

__all__ = [
    "LikeLedger",
    "PostCounterMaintainer",
    "PostCounts",
    "PostStatus",
    "ShareLedger",
    "ShareResult",
    "get_post_status",
]
