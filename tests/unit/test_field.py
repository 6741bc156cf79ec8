import pytest

from shamir_core import field
from shamir_core.exceptions import InvalidField


@pytest.mark.parametrize(
    ("value", "expected"),
    [(-1, 6), (0, 0), (7, 0), (15, 1), (-15, 6)],
)
def test_reduce_is_canonical(value: int, expected: int) -> None:
    assert field.reduce(value, 7) == expected


def test_negate_stays_in_range() -> None:
    assert field.negate(0, 7) == 0
    assert field.negate(3, 7) == 4
    assert field.negate(-3, 7) == 3
    assert field.negate(10, 7) == 4


def test_arithmetic_results_are_reduced() -> None:
    assert field.add(5, 6, 7) == 4
    assert field.subtract(2, 5, 7) == 4
    assert field.multiply(-3, 4, 7) == 2
    assert field.power(3, 6, 7) == 1
    assert field.power(-2, 3, 7) == 6


def test_inverse_round_trips() -> None:
    prime = 2305843009213693951
    for value in (1, 2, 12345, prime - 1):
        assert field.multiply(value, field.inverse(value, prime), prime) == 1
    assert field.inverse(3, 7) == 5


@pytest.mark.parametrize("value", [0, 7, -14])
def test_inverse_of_zero_fails(value: int) -> None:
    with pytest.raises(InvalidField):
        field.inverse(value, 7)


def test_inverse_fails_for_shared_factor() -> None:
    with pytest.raises(InvalidField):
        field.inverse(2, 8)
