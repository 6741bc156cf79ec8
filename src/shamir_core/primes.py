"""Prime modulus helpers: Mersenne construction and probabilistic primality."""
from __future__ import annotations

import secrets
from typing import Optional, Tuple

from .exceptions import InvalidPrime, NullConfiguration

DEFAULT_ROUNDS = 40

# Exponents k for which 2**k - 1 is prime.
MERSENNE_EXPONENTS: Tuple[int, ...] = (
    2, 3, 5, 7, 13, 17, 19, 31, 61, 89, 107, 127, 521, 607, 1_279, 2_203,
    2_281, 3_217, 4_253, 4_423, 9_689, 9_941, 11_213, 19_937, 21_701, 23_209,
)

_SMALL_PRIMES: Tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47)


def mersenne_prime(exponent: int) -> int:
    """Return ``2**exponent - 1``; primality is not checked here."""
    if exponent < 2:
        raise ValueError("Mersenne exponent must be at least 2")
    return (1 << exponent) - 1


def is_probable_prime(candidate: int, rounds: int = DEFAULT_ROUNDS, random: Optional[secrets.SystemRandom] = None) -> bool:
    if candidate < 2:
        return False
    for small in _SMALL_PRIMES:
        if candidate == small:
            return True
        if candidate % small == 0:
            return False

    rng = random or secrets.SystemRandom()
    d = candidate - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for _ in range(rounds):
        a = rng.randrange(2, candidate - 1)
        x = pow(a, d, candidate)
        if x == 1 or x == candidate - 1:
            continue
        for _ in range(s - 1):
            x = pow(x, 2, candidate)
            if x == candidate - 1:
                break
        else:
            return False
    return True


def validate_prime(prime: Optional[int], rounds: int = DEFAULT_ROUNDS) -> int:
    if prime is None:
        raise NullConfiguration("A prime must be set before it can be validated")
    if not is_probable_prime(prime, rounds):
        raise InvalidPrime(f"{prime} is not prime")
    return prime


__all__ = ["DEFAULT_ROUNDS", "MERSENNE_EXPONENTS", "mersenne_prime", "is_probable_prime", "validate_prime"]
