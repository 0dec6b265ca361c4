"""Input validation functions with strict type checking."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, TypeVar

from dynarith.exceptions import (
    DivisionByZeroError,
    InvalidInputError,
    MalformedNumberError,
    OutOfRangeError,
)

if TYPE_CHECKING:
    from dynarith.bigint import BigInt

T = TypeVar("T", int, float)

DECIMAL_DIGITS = frozenset("0123456789")


def validate_decimal_text(text: str) -> tuple[bool, str]:
    """
    Validate an optionally signed run of ASCII decimal digits.

    Args:
        text: The text to validate

    Returns:
        A ``(negative, digits)`` pair with the sign stripped off

    Raises:
        MalformedNumberError: If the text is not a signed decimal integer
    """
    if not isinstance(text, str):
        raise MalformedNumberError(str(text), f"Expected text, got {type(text).__name__}")

    negative = False
    digits = text
    if digits[:1] in ("+", "-"):
        negative = digits[0] == "-"
        digits = digits[1:]

    if not digits:
        if text:
            raise MalformedNumberError(text, "Sign without digits")
        raise MalformedNumberError(text, "Empty number")

    for ch in digits:
        if ch not in DECIMAL_DIGITS:
            raise MalformedNumberError(text, f"Unexpected character {ch!r}")

    return negative, digits


def validate_native_int(value: Any) -> int:
    """
    Validate that a value is a native integer (bool excluded).

    Raises:
        InvalidInputError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(value, f"Expected int, got {type(value).__name__}")
    return value


def validate_finite(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")

    return value


def validate_divisor(dividend: BigInt, divisor: BigInt) -> BigInt:
    """
    Validate that a BigInt divisor is not zero.

    Raises:
        DivisionByZeroError: If divisor is zero
    """
    if divisor.is_zero:
        raise DivisionByZeroError(dividend)
    return divisor


def validate_non_negative(exponent: BigInt) -> BigInt:
    """Validate that a BigInt exponent is not negative."""
    if exponent.is_negative:
        raise InvalidInputError(exponent, "Exponent must be non-negative")
    return exponent


def validate_range(
    value: T,
    min_val: float | None = None,
    max_val: float | None = None,
    inclusive: bool = True,
) -> T:
    """
    Validate that a value is within a specified range.

    Args:
        value: The value to validate
        min_val: Minimum allowed value (None for no limit)
        max_val: Maximum allowed value (None for no limit)
        inclusive: Whether bounds are inclusive

    Returns:
        The validated value

    Raises:
        OutOfRangeError: If value is outside the range
    """
    validate_finite(value)

    if min_val is not None:
        if inclusive and value < min_val:
            raise OutOfRangeError(value, min_val, max_val)
        if not inclusive and value <= min_val:
            raise OutOfRangeError(value, min_val, max_val)

    if max_val is not None:
        if inclusive and value > max_val:
            raise OutOfRangeError(value, min_val, max_val)
        if not inclusive and value >= max_val:
            raise OutOfRangeError(value, min_val, max_val)

    return value
