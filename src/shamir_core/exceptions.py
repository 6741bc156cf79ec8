"""Central exception hierarchy."""
from __future__ import annotations

from typing import Sequence


class ShamirError(Exception):
    """Base exception for all sharing failures"""


class InvalidPrime(ShamirError):
    """Raised when the configured modulus fails the primality check"""


class InvalidSecret(ShamirError, ValueError):
    """Raised when a secret lies outside the open range (0, p)"""


class NullConfiguration(ShamirError):
    """Raised when a required setting is missing before a dependent operation"""


class InvalidField(ShamirError, ArithmeticError):
    """Raised for a degenerate modular inverse, e.g. colliding share positions"""


class ReconstructionMismatch(ShamirError):
    """Raised when a subset of shares does not reconstruct the expected secret"""

    def __init__(self, positions: Sequence[int], expected: int, actual: int) -> None:
        self.positions = tuple(positions)
        self.expected = expected
        self.actual = actual
        super().__init__(f"Shares at positions {list(self.positions)} reconstructed a different secret")


class ShareCountMismatch(ShamirError):
    """Raised when a share set does not have the required size"""

    def __init__(self, message: str, *, expected: int | None = None, actual: int | None = None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message)


__all__ = [
    "ShamirError",
    "InvalidPrime",
    "InvalidSecret",
    "NullConfiguration",
    "InvalidField",
    "ReconstructionMismatch",
    "ShareCountMismatch",
]
