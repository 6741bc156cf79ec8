"""Conversions between secret bytes and field integers."""
from __future__ import annotations


def secret_from_bytes(data: bytes | bytearray | memoryview) -> int:
    """Interpret ``data`` as a big-endian unsigned integer."""
    return int.from_bytes(bytes(data), "big")


def secret_to_bytes(value: int, length: int | None = None) -> bytes:
    """Serialise ``value`` big-endian.

    Without ``length`` the minimal number of bytes is used, so leading zero
    bytes of the original input are not restored.
    """

    if value < 0:
        raise ValueError("Secret values are non-negative")
    size = length if length is not None else max(1, (value.bit_length() + 7) // 8)
    return value.to_bytes(size, "big")


def to_text(value: int, encoding: str = "utf-8") -> str:
    return secret_to_bytes(value).decode(encoding)


__all__ = ["secret_from_bytes", "secret_to_bytes", "to_text"]
