import secrets

import pytest

from shamir_core.exceptions import InvalidField, ShareCountMismatch
from shamir_core.generator import split_secret
from shamir_core.models import Share, shares_from_values
from shamir_core.reconstruct import as_coordinates, coordinates_from_shares, reconstruct

PRIME = 2**127 - 1


def test_reconstruct_small_field_by_hand() -> None:
    # f(x) = 3 + 2x over GF(7): f(1) = 5, f(2) = 0
    assert reconstruct({1: 5, 2: 0}, 7) == 3


def test_reconstruct_any_subset() -> None:
    shares = split_secret(secrets.SystemRandom(), PRIME, 123456789, 3, 6)
    assert reconstruct(coordinates_from_shares(shares, [1, 2, 3]), PRIME) == 123456789
    assert reconstruct(coordinates_from_shares(shares, [2, 4, 6]), PRIME) == 123456789
    assert reconstruct(coordinates_from_shares(shares, [1, 3, 4, 5, 6]), PRIME) == 123456789


def test_reconstruct_is_order_independent() -> None:
    shares = split_secret(secrets.SystemRandom(), PRIME, 987654321, 4, 4)
    forward = {index + 1: value for index, value in enumerate(shares)}
    backward = dict(reversed(list(forward.items())))
    assert reconstruct(forward, PRIME) == reconstruct(backward, PRIME) == 987654321


def test_reconstruct_accepts_share_objects_and_pairs() -> None:
    values = split_secret(secrets.SystemRandom(), PRIME, 55, 2, 3)
    share_objects = shares_from_values(values)
    assert reconstruct(share_objects[1:], PRIME) == 55
    assert reconstruct([share.as_tuple() for share in share_objects[:2]], PRIME) == 55


def test_single_share_threshold_returns_value() -> None:
    assert reconstruct({4: 99}, PRIME) == 99


def test_duplicate_positions_are_rejected() -> None:
    with pytest.raises(InvalidField):
        as_coordinates([Share(1, 10), Share(1, 11)])


def test_colliding_positions_fail_inverse() -> None:
    with pytest.raises(InvalidField):
        reconstruct({1: 5, 8: 6}, 7)


def test_position_zero_is_reserved() -> None:
    with pytest.raises(InvalidField):
        reconstruct({0: 5, 1: 6}, 7)


def test_empty_share_set() -> None:
    with pytest.raises(ShareCountMismatch):
        reconstruct({}, 7)


def test_exact_share_count() -> None:
    with pytest.raises(ShareCountMismatch) as excinfo:
        reconstruct({1: 5, 2: 0}, 7, required=3)
    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 2
    assert reconstruct({1: 5, 2: 0}, 7, required=2) == 3
