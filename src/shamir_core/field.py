"""Modular arithmetic over GF(p).

Every helper takes the modulus explicitly and returns a value in the
canonical range ``[0, prime)``.
"""
from __future__ import annotations

from .exceptions import InvalidField


def reduce(value: int, prime: int) -> int:
    return value % prime


def negate(value: int, prime: int) -> int:
    return (prime - value % prime) % prime


def add(lhs: int, rhs: int, prime: int) -> int:
    return (lhs + rhs) % prime


def subtract(lhs: int, rhs: int, prime: int) -> int:
    return (lhs - rhs) % prime


def multiply(lhs: int, rhs: int, prime: int) -> int:
    return (lhs * rhs) % prime


def power(base: int, exponent: int, prime: int) -> int:
    return pow(base % prime, exponent, prime)


def inverse(value: int, prime: int) -> int:
    """Return the multiplicative inverse of ``value`` modulo ``prime``.

    Raises
    ------
    InvalidField
        If ``value`` is congruent to zero or shares a factor with the modulus.
    """

    value %= prime
    if value == 0:
        raise InvalidField(f"0 has no inverse modulo {prime}")
    try:
        return pow(value, -1, prime)
    except ValueError as exc:
        raise InvalidField(f"{value} is not invertible modulo {prime}") from exc


__all__ = ["reduce", "negate", "add", "subtract", "multiply", "power", "inverse"]
