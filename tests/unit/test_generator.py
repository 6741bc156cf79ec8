import random
import secrets
from typing import Iterator, List

import pytest

from shamir_core.combinations import validate_all_combinations
from shamir_core.exceptions import InvalidSecret, NullConfiguration
from shamir_core.generator import (
    create_secrets,
    create_shares,
    generate_secret,
    init_polynomial,
    split_secret,
)

PRIME = 73_939_133


class ScriptedRandom:
    """Return a fixed sequence of candidates from getrandbits."""

    def __init__(self, values: List[int]) -> None:
        self._values: Iterator[int] = iter(values)
        self.requested_bits: List[int] = []

    def getrandbits(self, k: int) -> int:
        self.requested_bits.append(k)
        return next(self._values)


def test_generate_secret_rejects_out_of_range_candidates() -> None:
    scripted = ScriptedRandom([0, 7, 3])
    assert generate_secret(scripted, 7) == 3
    assert scripted.requested_bits == [3, 3, 3]


def test_generate_secret_bounds_for_smallest_prime() -> None:
    rng = secrets.SystemRandom()
    for _ in range(100):
        assert generate_secret(rng, 2) == 1


def test_create_secrets_are_in_open_range() -> None:
    values = create_secrets(secrets.SystemRandom(), PRIME, 3)
    assert len(values) == 3
    for value in values:
        assert 0 < value < PRIME


def test_init_polynomial_keeps_supplied_secret() -> None:
    polynomial = init_polynomial(42, random.Random(7), PRIME, 4)
    assert polynomial[0] == 42
    assert len(polynomial) == 4
    assert all(0 < coefficient < PRIME for coefficient in polynomial)


def test_init_polynomial_generates_secret_when_missing() -> None:
    polynomial = init_polynomial(None, random.Random(7), PRIME, 1)
    assert len(polynomial) == 1
    assert 0 < polynomial[0] < PRIME


@pytest.mark.parametrize("secret", [0, -1, PRIME, PRIME + 2])
def test_init_polynomial_rejects_out_of_range_secret(secret: int) -> None:
    with pytest.raises(InvalidSecret):
        init_polynomial(secret, random.Random(7), PRIME, 3)


def test_init_polynomial_accepts_boundary_secrets() -> None:
    assert init_polynomial(1, random.Random(1), PRIME, 2)[0] == 1
    assert init_polynomial(PRIME - 1, random.Random(1), PRIME, 2)[0] == PRIME - 1


def test_init_polynomial_requires_threshold() -> None:
    with pytest.raises(NullConfiguration):
        init_polynomial(5, random.Random(1), PRIME, 0)


def test_create_shares_evaluates_positions_from_one() -> None:
    # f(x) = 3 + 2x over GF(7)
    assert create_shares(7, [3, 2], 3) == [5, 0, 2]
    assert create_shares(7, [3], 2) == [3, 3]


def test_create_shares_rejects_empty_slots() -> None:
    with pytest.raises(NullConfiguration):
        create_shares(7, [3, None], 3)
    with pytest.raises(NullConfiguration):
        create_shares(7, [], 3)


def test_split_secret_shares_validate() -> None:
    rng = secrets.SystemRandom()
    secret = generate_secret(rng, PRIME)
    shares = split_secret(rng, PRIME, secret, 3, 5)
    assert len(shares) == 5
    assert validate_all_combinations(secret, PRIME, 3, shares) == 10
