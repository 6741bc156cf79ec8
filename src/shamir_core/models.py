"""Shared domain models used across shamir-core."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Tuple, Union

Coordinates = Mapping[int, int]


@dataclass(slots=True, frozen=True)
class Share:
    """A single point ``(position, value)`` on the sharing polynomial."""

    position: int
    value: int

    def as_tuple(self) -> Tuple[int, int]:
        return self.position, self.value


ShareInput = Union[Coordinates, Iterable[Union[Share, Tuple[int, int]]]]


class SessionState(str, Enum):
    UNCONFIGURED = "UNCONFIGURED"
    PRIME_SET = "PRIME_SET"
    SHARE_COUNTS_SET = "SHARE_COUNTS_SET"
    SECRETS_INITIALIZED = "SECRETS_INITIALIZED"
    SHARES_CREATED = "SHARES_CREATED"
    SECRETS_CLEARED = "SECRETS_CLEARED"


def shares_from_values(values: Iterable[int]) -> list[Share]:
    """Attach positions ``1..n`` to share values indexed by ``position - 1``."""
    return [Share(position=index + 1, value=value) for index, value in enumerate(values)]


__all__ = [
    "Coordinates",
    "Share",
    "ShareInput",
    "SessionState",
    "shares_from_values",
]
