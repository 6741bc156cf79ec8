"""Mutable sharing session: configure, generate, validate, clear."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

import structlog

from .combinations import validate_all_combinations
from .config import SharingConfig
from .exceptions import InvalidPrime, NullConfiguration, ShareCountMismatch
from .generator import RandomSource, create_shares, default_random, init_polynomial
from .models import SessionState, ShareInput
from .primes import DEFAULT_ROUNDS, mersenne_prime, validate_prime
from .reconstruct import reconstruct
from .utils.codec import secret_from_bytes
from .utils.validation import ensure_count

logger = structlog.get_logger(__name__)

SecretInput = Union[int, bytes, bytearray, memoryview]


class ShamirSession:
    """Single-owner builder for one sharing of one secret.

    Setters return the session so calls can be chained::

        session = (
            ShamirSession()
            .set_mersenne_exponent(521)
            .set_required_shares(3)
            .set_total_shares(5)
            .init_secrets(b"Shamir's Secret")
        )
        shares = session.create_shares()

    The prime and the required share count must be set before
    :meth:`init_secrets`. Clearing secrets drops the session's references to
    the coefficients; Python integers are immutable, so copies may remain in
    memory until the interpreter reuses it.
    """

    def __init__(
        self,
        *,
        random: Optional[RandomSource] = None,
        prime: Optional[int] = None,
        total_shares: int = 0,
        required_shares: int = 0,
        primality_rounds: int = DEFAULT_ROUNDS,
        strict_share_counts: bool = False,
    ) -> None:
        self._random = random
        self._prime: Optional[int] = None
        self._total_shares = ensure_count("total_shares", total_shares)
        self._required_shares = 0
        self._polynomial: List[Optional[int]] = []
        self._initialized = False
        self._shares_created = False
        self.primality_rounds = primality_rounds
        self.strict_share_counts = strict_share_counts
        self.set_required_shares(required_shares)
        self.set_prime(prime)

    @classmethod
    def from_config(cls, config: SharingConfig, *, random: Optional[RandomSource] = None) -> "ShamirSession":
        return cls(
            random=random,
            prime=config.resolved_prime(),
            total_shares=config.total_shares,
            required_shares=config.required_shares,
            primality_rounds=config.primality_rounds,
            strict_share_counts=config.strict_share_counts,
        )

    @property
    def prime(self) -> Optional[int]:
        return self._prime

    @property
    def total_shares(self) -> int:
        return self._total_shares

    @property
    def required_shares(self) -> int:
        return self._required_shares

    @property
    def secret(self) -> Optional[int]:
        return self._polynomial[0] if self._polynomial else None

    @property
    def coefficients(self) -> Tuple[Optional[int], ...]:
        return tuple(self._polynomial)

    @property
    def random(self) -> Optional[RandomSource]:
        return self._random

    @property
    def state(self) -> SessionState:
        if self._initialized and self.secret is None:
            return SessionState.SECRETS_CLEARED
        if any(coefficient is not None for coefficient in self._polynomial):
            return SessionState.SHARES_CREATED if self._shares_created else SessionState.SECRETS_INITIALIZED
        if self._prime is None:
            return SessionState.UNCONFIGURED
        if self._total_shares > 0 and self._required_shares > 0:
            return SessionState.SHARE_COUNTS_SET
        return SessionState.PRIME_SET

    def set_random(self, random: Optional[RandomSource]) -> "ShamirSession":
        self._random = random
        return self

    def set_prime(self, prime: Optional[int]) -> "ShamirSession":
        if prime is not None and prime < 2:
            raise InvalidPrime(f"{prime} cannot be a field modulus")
        if prime != self._prime and any(coefficient is not None for coefficient in self._polynomial):
            # Coefficients drawn for the old field are meaningless in the new one.
            logger.info("session.prime.changed", discarded=len(self._polynomial))
            self.clear_secrets()
        self._prime = prime
        return self

    def set_mersenne_exponent(self, exponent: int) -> "ShamirSession":
        return self.set_prime(mersenne_prime(exponent))

    def validate_prime(self) -> "ShamirSession":
        validate_prime(self._prime, self.primality_rounds)
        return self

    def validate_and_set_prime(self, prime: int) -> "ShamirSession":
        validate_prime(prime, self.primality_rounds)
        return self.set_prime(prime)

    def set_total_shares(self, total_shares: int) -> "ShamirSession":
        self._total_shares = ensure_count("total_shares", total_shares)
        return self

    def set_required_shares(self, required_shares: int) -> "ShamirSession":
        """Set the threshold, resizing the coefficient slots.

        Existing coefficients are kept up to the new size; added slots are
        empty until :meth:`init_secrets` runs again.
        """

        required_shares = ensure_count("required_shares", required_shares)
        kept = self._polynomial[:required_shares]
        self._polynomial = kept + [None] * (required_shares - len(kept))
        self._required_shares = required_shares
        return self

    def init_secrets(self, secret: Optional[SecretInput] = None) -> "ShamirSession":
        """Fill the polynomial with ``secret`` (or a random one) and random blinding terms.

        Bytes are read as a big-endian unsigned integer.
        """

        if self._prime is None:
            raise NullConfiguration("A prime must be set before initialising secrets")
        if self._required_shares < 1:
            raise NullConfiguration("The required share count must be set before initialising secrets")
        if isinstance(secret, (bytes, bytearray, memoryview)):
            secret = secret_from_bytes(secret)
        if self._random is None:
            self._random = default_random()

        self._polynomial = list(init_polynomial(secret, self._random, self._prime, self._required_shares))
        self._initialized = True
        self._shares_created = False
        logger.debug(
            "session.secrets.initialized",
            required_shares=self._required_shares,
            supplied=secret is not None,
        )
        return self

    def create_shares(self) -> List[int]:
        """Return share values indexed by ``position - 1``."""
        if self._prime is None:
            raise NullConfiguration("A prime must be set before creating shares")
        if self._total_shares < 1:
            raise NullConfiguration("The total share count must be set before creating shares")
        if self._total_shares < self._required_shares:
            if self.strict_share_counts:
                raise ShareCountMismatch(
                    f"Creating {self._total_shares} shares cannot satisfy a threshold of {self._required_shares}",
                    expected=self._required_shares,
                    actual=self._total_shares,
                )
            logger.warning(
                "session.shares.below_threshold",
                total_shares=self._total_shares,
                required_shares=self._required_shares,
            )

        shares = create_shares(self._prime, self._polynomial, self._total_shares)
        self._shares_created = True
        logger.debug("session.shares.created", total_shares=len(shares))
        return shares

    def validate_share_combinations(self, shares: Sequence[int]) -> int:
        secret = self.secret
        if self._prime is None or secret is None:
            raise NullConfiguration("Secrets must be initialised before validating shares")
        return validate_all_combinations(secret, self._prime, self._required_shares, shares)

    def reconstruct(self, shares: ShareInput, *, exact: bool = False) -> int:
        if self._prime is None:
            raise NullConfiguration("A prime must be set before reconstructing")
        return reconstruct(shares, self._prime, self._required_shares if exact else None)

    def clear_secret(self, index: int) -> "ShamirSession":
        self._polynomial[index] = None
        return self

    def clear_secrets(self) -> "ShamirSession":
        for index in range(len(self._polynomial)):
            self._polynomial[index] = None
        self._shares_created = False
        return self

    def __repr__(self) -> str:
        held = sum(1 for coefficient in self._polynomial if coefficient is not None)
        prime_bits = self._prime.bit_length() if self._prime is not None else None
        return (
            f"ShamirSession(prime_bits={prime_bits}, total_shares={self._total_shares}, "
            f"required_shares={self._required_shares}, coefficients={held}/{len(self._polynomial)}, "
            f"state={self.state.value})"
        )


__all__ = ["ShamirSession", "SecretInput"]
