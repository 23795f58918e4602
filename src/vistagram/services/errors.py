"""Error taxonomy for the like/share engagement services.

Endpoints translate these into HTTP responses; the services never turn a
failed mutation into a success.
"""

from __future__ import annotations


class EngagementError(RuntimeError):
    """Base class for engagement failures surfaced to callers."""


class PostNotFoundError(EngagementError):
    """Raised when the referenced post does not exist."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id


class ShortCodeNotFoundError(EngagementError):
    """Raised when no share matches a short code."""

    def __init__(self, short_code: str) -> None:
        super().__init__(f"Unknown short code {short_code!r}")
        self.short_code = short_code


class AlreadyLikedError(EngagementError):
    """Raised when a user likes a post they already like."""

    def __init__(self, user_id: int, post_id: int) -> None:
        super().__init__("Post already liked")
        self.user_id = user_id
        self.post_id = post_id


class NotLikedError(EngagementError):
    """Raised when a user unlikes a post they have not liked."""

    def __init__(self, user_id: int, post_id: int) -> None:
        super().__init__("Post not liked yet")
        self.user_id = user_id
        self.post_id = post_id


class CodeGenerationExhaustedError(EngagementError):
    """Raised when every short-code candidate collided with an existing share."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"Failed to generate a unique share code after {attempts} attempts")
        self.attempts = attempts
