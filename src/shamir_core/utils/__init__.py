"""Utility exports."""
from .codec import secret_from_bytes, secret_to_bytes, to_text
from .validation import ensure_count, parse_share_token

__all__ = [
    "secret_from_bytes",
    "secret_to_bytes",
    "to_text",
    "ensure_count",
    "parse_share_token",
]
