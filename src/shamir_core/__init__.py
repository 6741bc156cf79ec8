"""shamir-core: (t, n)-threshold secret sharing over a prime field.

Usage::

    from shamir_core import ShamirSession, reconstruct

    session = ShamirSession(prime=2**521 - 1, total_shares=5, required_shares=3)
    shares = session.init_secrets(b"Shamir's Secret").create_shares()
    secret = reconstruct({1: shares[0], 3: shares[2], 5: shares[4]}, session.prime)
"""

from shamir_core.combinations import iter_share_subsets, validate_all_combinations
from shamir_core.exceptions import (
    InvalidField,
    InvalidPrime,
    InvalidSecret,
    NullConfiguration,
    ReconstructionMismatch,
    ShamirError,
    ShareCountMismatch,
)
from shamir_core.generator import create_secrets, create_shares, generate_secret, init_polynomial, split_secret
from shamir_core.models import SessionState, Share
from shamir_core.primes import is_probable_prime, mersenne_prime, validate_prime
from shamir_core.reconstruct import coordinates_from_shares, reconstruct
from shamir_core.session import ShamirSession
from shamir_core.version import __version__

__all__ = [
    "ShamirSession",
    "SessionState",
    "Share",
    "generate_secret",
    "create_secrets",
    "init_polynomial",
    "create_shares",
    "split_secret",
    "reconstruct",
    "coordinates_from_shares",
    "iter_share_subsets",
    "validate_all_combinations",
    "is_probable_prime",
    "mersenne_prime",
    "validate_prime",
    "ShamirError",
    "InvalidPrime",
    "InvalidSecret",
    "NullConfiguration",
    "InvalidField",
    "ReconstructionMismatch",
    "ShareCountMismatch",
    "__version__",
]
