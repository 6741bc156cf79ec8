"""Exhaustive checking of every threshold-sized share subset."""
from __future__ import annotations

from itertools import combinations
from typing import Dict, Iterator, Sequence

import structlog

from .exceptions import ReconstructionMismatch, ShareCountMismatch
from .reconstruct import reconstruct

logger = structlog.get_logger(__name__)


def iter_share_subsets(shares: Sequence[int], required: int) -> Iterator[Dict[int, int]]:
    """Yield position to value mappings for every ``required``-sized subset.

    Subsets come out in lexicographic order of their positions.
    """

    if required < 1:
        raise ShareCountMismatch("The required share count must be at least 1", expected=required)
    for indices in combinations(range(len(shares)), required):
        yield {index + 1: shares[index] for index in indices}


def validate_all_combinations(expected_secret: int, prime: int, required: int, shares: Sequence[int]) -> int:
    """Reconstruct from every subset of ``required`` shares.

    Returns the number of subsets checked, which is ``C(len(shares), required)``.
    Raises :class:`ReconstructionMismatch` for the first subset that does not
    yield ``expected_secret``.
    """

    count = 0
    for coordinates in iter_share_subsets(shares, required):
        actual = reconstruct(coordinates, prime)
        if actual != expected_secret:
            positions = sorted(coordinates)
            logger.error("combinations.mismatch", positions=positions, checked=count)
            raise ReconstructionMismatch(positions, expected_secret, actual)
        count += 1
    logger.debug("combinations.validated", total=len(shares), required=required, count=count)
    return count


__all__ = ["iter_share_subsets", "validate_all_combinations"]
