"""Polynomial construction and share evaluation."""
from __future__ import annotations

import secrets
from typing import List, Optional, Protocol, Sequence

from . import field
from .exceptions import InvalidSecret, NullConfiguration


class RandomSource(Protocol):
    """Anything producing uniform random bits on demand."""

    def getrandbits(self, k: int, /) -> int:
        ...


def default_random() -> RandomSource:
    return secrets.SystemRandom()


def generate_secret(random: RandomSource, prime: int) -> int:
    """Draw a uniform element of the open range ``(0, prime)``.

    Candidates carry as many bits as the prime and are rejected until they
    fall inside the range, so no value is favoured by a modular reduction.
    """

    bits = prime.bit_length()
    while True:
        candidate = random.getrandbits(bits)
        if 0 < candidate < prime:
            return candidate


def create_secrets(random: RandomSource, prime: int, count: int) -> List[int]:
    return [generate_secret(random, prime) for _ in range(count)]


def check_secret(secret: int, prime: int) -> int:
    if isinstance(secret, bool) or not isinstance(secret, int):
        raise TypeError(f"Secret must be an integer, got {type(secret).__name__}")
    if secret <= 0:
        raise InvalidSecret("Secret must be greater than 0")
    if secret >= prime:
        raise InvalidSecret(f"Secret must be less than the prime {prime}")
    return secret


def init_polynomial(secret: Optional[int], random: RandomSource, prime: int, required: int) -> List[int]:
    """Return ``required`` coefficients with ``secret`` as the free term."""
    if required < 1:
        raise NullConfiguration("The required share count must be at least 1")
    head = generate_secret(random, prime) if secret is None else check_secret(secret, prime)
    return [head, *create_secrets(random, prime, required - 1)]


def evaluate(polynomial: Sequence[int], position: int, prime: int) -> int:
    value = polynomial[0]
    for exp in range(1, len(polynomial)):
        term = field.multiply(polynomial[exp], field.power(position, exp, prime), prime)
        value = field.add(value, term, prime)
    return value


def create_shares(prime: int, polynomial: Sequence[Optional[int]], total: int) -> List[int]:
    """Evaluate the polynomial at positions ``1..total``.

    The result is indexed by ``position - 1``.
    """

    if not polynomial:
        raise NullConfiguration("No coefficients have been initialised")
    for index, coefficient in enumerate(polynomial):
        if coefficient is None:
            raise NullConfiguration(f"Coefficient slot {index} is empty")
    return [evaluate(polynomial, position, prime) for position in range(1, total + 1)]  # type: ignore[arg-type]


def split_secret(random: RandomSource, prime: int, secret: int, required: int, total: int) -> List[int]:
    polynomial = init_polynomial(secret, random, prime, required)
    return create_shares(prime, polynomial, total)


__all__ = [
    "RandomSource",
    "default_random",
    "generate_secret",
    "create_secrets",
    "check_secret",
    "init_polynomial",
    "evaluate",
    "create_shares",
    "split_secret",
]
