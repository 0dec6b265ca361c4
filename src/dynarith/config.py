"""Engine configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dynarith.exceptions import InvalidInputError
from dynarith.validators import validate_range

NUM_PRECISION_ENV = "DYNARITH_NUM_PRECISION"
MAX_INT_DIGITS_ENV = "DYNARITH_MAX_INT_DIGITS"

# Beyond 17 fractional digits a double carries no more information.
MAX_NUM_PRECISION = 17


def _check_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(value, f"{name} must be an int")


def _int_from_env(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidInputError(raw, f"{name} must be an integer") from e


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for the arithmetic core."""

    # Fractional digits used when a Num is stringified (C's %f uses 6)
    num_precision: int = 6
    # Largest Int, in decimal digits, that ``^`` may produce
    max_int_digits: int = 10_000

    def __post_init__(self) -> None:
        _check_int("num_precision", self.num_precision)
        validate_range(self.num_precision, min_val=0, max_val=MAX_NUM_PRECISION)
        _check_int("max_int_digits", self.max_int_digits)
        validate_range(self.max_int_digits, min_val=1)

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Build a config from ``DYNARITH_*`` environment variables."""
        overrides = {}
        precision = _int_from_env(NUM_PRECISION_ENV)
        if precision is not None:
            overrides["num_precision"] = precision
        max_digits = _int_from_env(MAX_INT_DIGITS_ENV)
        if max_digits is not None:
            overrides["max_int_digits"] = max_digits
        return cls(**overrides)


@lru_cache(maxsize=None)
def get_config() -> EngineConfig:
    """Process-wide config, read from the environment on first use."""
    return EngineConfig.from_env()
