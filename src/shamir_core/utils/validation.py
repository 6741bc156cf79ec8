"""Validation helpers for user supplied sharing parameters."""
from __future__ import annotations

from typing import Tuple


def ensure_count(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def parse_share_token(token: str) -> Tuple[int, int]:
    """Parse a ``POSITION:VALUE`` token.

    The value may be decimal or ``0x`` prefixed hexadecimal.
    """

    position, sep, value = token.strip().partition(":")
    if not sep or not position or not value:
        raise ValueError(f"Share '{token}' must look like POSITION:VALUE")
    try:
        return int(position, 10), int(value, 0)
    except ValueError:
        raise ValueError(f"Share '{token}' must contain integers") from None


__all__ = ["ensure_count", "parse_share_token"]
