"""
Arbitrary-precision signed integers.

A BigInt is a sign plus a tuple of digits in base ``10**4``, least
significant digit first. Values are always kept in canonical form: the most
significant digit is never zero, and zero is ``Sign.ZERO`` with no digits.
That makes dataclass equality and hashing exact value equality.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass
from functools import total_ordering

from dynarith.exceptions import InvalidInputError
from dynarith.validators import validate_decimal_text, validate_finite, validate_native_int

BASE = 10_000
DIGIT_WIDTH = 4

Magnitude = tuple[int, ...]


class Sign(enum.IntEnum):
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


class Ordering(enum.IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def canonical_magnitude(digits: Iterable[int]) -> Magnitude:
    """Strip most-significant zero digits."""
    result = list(digits)
    while result and result[-1] == 0:
        result.pop()
    return tuple(result)


def compare_magnitudes(a: Magnitude, b: Magnitude) -> Ordering:
    """Compare two canonical magnitudes: length first, then digits from the top."""
    if len(a) != len(b):
        return Ordering.LESS if len(a) < len(b) else Ordering.GREATER
    for da, db in zip(reversed(a), reversed(b)):
        if da != db:
            return Ordering.LESS if da < db else Ordering.GREATER
    return Ordering.EQUAL


@total_ordering
@dataclass(frozen=True)
class BigInt:
    """
    Immutable arbitrary-precision integer.

    Build instances with :func:`parse`, :meth:`from_int`, :meth:`from_float`
    or :meth:`from_magnitude`; the raw constructor only accepts canonical
    input.

    Example:
        >>> parse("-12345678901234567890")
        BigInt('-12345678901234567890')
        >>> BigInt.from_float(-2.75)
        BigInt('-2')
    """

    sign: Sign
    digits: Magnitude = ()

    def __post_init__(self) -> None:
        if not isinstance(self.sign, Sign):
            raise InvalidInputError(self.sign, "Expected Sign")
        if not isinstance(self.digits, tuple):
            raise InvalidInputError(self.digits, "Digits must be a tuple")
        for digit in self.digits:
            if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit < BASE:
                raise InvalidInputError(self.digits, f"Digit out of range [0, {BASE})")
        if self.digits and self.digits[-1] == 0:
            raise InvalidInputError(self.digits, "Most significant digit is zero")
        if (self.sign is Sign.ZERO) != (not self.digits):
            raise InvalidInputError((self.sign, self.digits), "Sign does not match magnitude")

    @classmethod
    def from_magnitude(cls, negative: bool, digits: Iterable[int]) -> BigInt:
        """Build a canonical BigInt from a possibly non-canonical magnitude."""
        magnitude = canonical_magnitude(digits)
        if not magnitude:
            return cls(Sign.ZERO)
        return cls(Sign.NEGATIVE if negative else Sign.POSITIVE, magnitude)

    @classmethod
    def zero(cls) -> BigInt:
        return cls(Sign.ZERO)

    @classmethod
    def one(cls) -> BigInt:
        return cls(Sign.POSITIVE, (1,))

    @classmethod
    def from_int(cls, value: int) -> BigInt:
        """Exact conversion from a native integer."""
        validate_native_int(value)
        remaining = abs(value)
        digits = []
        while remaining:
            remaining, digit = divmod(remaining, BASE)
            digits.append(digit)
        return cls.from_magnitude(value < 0, digits)

    @classmethod
    def from_float(cls, value: float) -> BigInt:
        """Conversion from a native float, truncating toward zero."""
        validate_finite(value)
        return cls.from_int(math.trunc(value))

    @property
    def is_zero(self) -> bool:
        return self.sign is Sign.ZERO

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def negate(self) -> BigInt:
        return BigInt(Sign(-self.sign), self.digits)

    def abs(self) -> BigInt:
        if self.is_negative:
            return self.negate()
        return self

    def to_float(self) -> float:
        """Nearest double; magnitudes past the double range become infinity."""
        return float(format(self))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __str__(self) -> str:
        return format(self)

    def __repr__(self) -> str:
        return f"BigInt({format(self)!r})"


def parse(text: str) -> BigInt:
    """
    Parse an optionally signed decimal integer.

    Leading zeros are accepted and collapsed; ``"-0"`` is canonical zero.

    Raises:
        MalformedNumberError: On empty input, a bare sign or a non-digit
    """
    negative, digits = validate_decimal_text(text)
    chunks = [
        int(digits[max(end - DIGIT_WIDTH, 0) : end])
        for end in range(len(digits), 0, -DIGIT_WIDTH)
    ]
    return BigInt.from_magnitude(negative, chunks)


def format(value: BigInt) -> str:  # noqa: A001
    """Render a BigInt as decimal text; zero is ``"0"`` with no sign."""
    if value.is_zero:
        return "0"
    head = str(value.digits[-1])
    tail = "".join(f"{digit:0{DIGIT_WIDTH}d}" for digit in reversed(value.digits[:-1]))
    prefix = "-" if value.is_negative else ""
    return prefix + head + tail


def compare(a: BigInt, b: BigInt) -> Ordering:
    """Order two BigInts by sign, then digit count, then digits from the top."""
    if a.sign != b.sign:
        return Ordering.LESS if a.sign < b.sign else Ordering.GREATER
    order = compare_magnitudes(a.digits, b.digits)
    if a.is_negative:
        return Ordering(-order)
    return order
