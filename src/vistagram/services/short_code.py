"""Random short codes for share links."""

from __future__ import annotations

import secrets
import string
from typing import Final

from vistagram.core.settings import MAX_SHARE_CODE_LENGTH, settings

SHORT_CODE_ALPHABET: Final[str] = string.ascii_letters + string.digits


def generate_short_code(length: int | None = None) -> str:
    """Return a random alphanumeric code.

    Uniqueness is not guaranteed here; the share ledger checks for collisions.
    """
    size = settings.share_code_length if length is None else length
    if not 1 <= size <= MAX_SHARE_CODE_LENGTH:
        raise ValueError(f"Short code length must be between 1 and {MAX_SHARE_CODE_LENGTH}")
    return "".join(secrets.choice(SHORT_CODE_ALPHABET) for _ in range(size))


def is_plausible_short_code(candidate: str) -> bool:
    """Return True if the string could have been produced by the generator."""
    return (
        0 < len(candidate) <= MAX_SHARE_CODE_LENGTH
        and all(char in SHORT_CODE_ALPHABET for char in candidate)
    )
