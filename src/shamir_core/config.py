"""Configuration loading utilities for shamir-core."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .paths import default_config_path
from .primes import DEFAULT_ROUNDS, mersenne_prime


class SharingConfig(BaseModel):
    mersenne_exponent: int = Field(default=521, ge=2, description="Field modulus is 2**exponent - 1")
    prime: Optional[int] = Field(default=None, description="Explicit modulus, overrides the exponent")
    total_shares: int = Field(default=5, ge=1, description="Number of shares to create (n)")
    required_shares: int = Field(default=3, ge=1, description="Shares needed to reconstruct (t)")
    primality_rounds: int = Field(default=DEFAULT_ROUNDS, ge=1, le=256)
    strict_share_counts: bool = Field(
        default=False,
        description="Reject creating fewer shares than the threshold",
    )

    @field_validator("prime")
    @classmethod
    def _validate_prime(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 2:
            raise ValueError("prime must be at least 2")
        return value

    def resolved_prime(self) -> int:
        if self.prime is not None:
            return self.prime
        return mersenne_prime(self.mersenne_exponent)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class AppConfig(BaseModel):
    sharing: SharingConfig = Field(default_factory=SharingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".shamir" / "config.yaml"
    yield default_config_path()


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load the first existing file on the search path, or the defaults."""
    source = next((candidate for candidate in config_search_paths(path) if candidate.is_file()), None)
    if source is None:
        return DEFAULT_CONFIG.model_copy(deep=True)
    data = yaml.safe_load(source.read_text(encoding="utf-8")) or {}
    try:
        return AppConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration in {source}: {exc}") from exc


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), sort_keys=False), encoding="utf-8")
