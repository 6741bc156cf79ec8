"""Lagrange interpolation at ``x = 0``."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Iterable, Optional, Sequence

from . import field
from .exceptions import InvalidField, ShareCountMismatch
from .models import Share, ShareInput


def as_coordinates(shares: ShareInput) -> Dict[int, int]:
    """Normalise shares into a position to value mapping.

    Mappings are copied as-is. Iterables of :class:`Share` or ``(x, y)``
    pairs are checked for repeated positions.
    """

    if isinstance(shares, Mapping):
        return dict(shares)
    coordinates: Dict[int, int] = {}
    for item in shares:
        position, value = item.as_tuple() if isinstance(item, Share) else item
        if position in coordinates:
            raise InvalidField(f"Position {position} was supplied more than once")
        coordinates[position] = value
    return coordinates


def coordinates_from_shares(shares: Sequence[int], positions: Iterable[int]) -> Dict[int, int]:
    """Pick share values by position from a list indexed by ``position - 1``."""
    return {position: shares[position - 1] for position in positions}


def reconstruct(shares: ShareInput, prime: int, required: Optional[int] = None) -> int:
    """Recover the free coefficient from the supplied points.

    ``required`` enforces an exact share count. Positions that coincide
    modulo ``prime`` raise :class:`InvalidField`.
    """

    coordinates = as_coordinates(shares)
    if not coordinates:
        raise ShareCountMismatch("At least one share is required", expected=required, actual=0)
    if required is not None and len(coordinates) != required:
        raise ShareCountMismatch(
            f"Expected exactly {required} shares, got {len(coordinates)}",
            expected=required,
            actual=len(coordinates),
        )

    points = [(field.reduce(x, prime), field.reduce(y, prime)) for x, y in coordinates.items()]
    secret = 0
    for reference, (xi, yi) in enumerate(points):
        if xi == 0:
            raise InvalidField("Position 0 is reserved for the secret")
        numerator = 1
        denominator = 1
        for other, (xj, _) in enumerate(points):
            if other == reference:
                continue
            numerator = field.multiply(numerator, field.negate(xj, prime), prime)
            denominator = field.multiply(denominator, field.subtract(xi, xj, prime), prime)
        term = field.multiply(field.multiply(yi, numerator, prime), field.inverse(denominator, prime), prime)
        secret = field.reduce(prime + secret + term, prime)
    return secret


__all__ = ["as_coordinates", "coordinates_from_shares", "reconstruct"]
