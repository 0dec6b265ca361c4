"""
Arithmetic kernel over BigInt.

Every operation works digit by digit on magnitudes (least significant digit
first, base ``10**4``) and returns a new canonical BigInt. Nothing here
touches Variables; type coercion belongs to the dispatch layer.
"""

from __future__ import annotations

import math

from dynarith.bigint import (
    BASE,
    DIGIT_WIDTH,
    BigInt,
    Magnitude,
    Ordering,
    canonical_magnitude,
    compare_magnitudes,
)
from dynarith.exceptions import OutOfRangeError
from dynarith.validators import validate_divisor, validate_non_negative


def _add_magnitudes(a: Magnitude, b: Magnitude) -> Magnitude:
    result = []
    carry = 0
    for i in range(max(len(a), len(b))):
        total = carry + (a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0)
        if total >= BASE:
            total -= BASE
            carry = 1
        else:
            carry = 0
        result.append(total)
    if carry:
        result.append(carry)
    return tuple(result)


def _sub_magnitudes(a: Magnitude, b: Magnitude) -> Magnitude:
    """Subtract ``b`` from ``a``; requires ``a >= b``."""
    result = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - borrow - (b[i] if i < len(b) else 0)
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    return canonical_magnitude(result)


def _mul_magnitudes(a: Magnitude, b: Magnitude) -> Magnitude:
    if not a or not b:
        return ()
    result = [0] * (len(a) + len(b))
    for i, da in enumerate(a):
        if da == 0:
            continue
        carry = 0
        for j, db in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + da * db + carry, BASE)
        k = i + len(b)
        while carry:
            carry, result[k] = divmod(result[k] + carry, BASE)
            k += 1
    return canonical_magnitude(result)


def _mul_small(a: Magnitude, factor: int) -> Magnitude:
    """Multiply a magnitude by a single digit."""
    if factor == 0 or not a:
        return ()
    result = []
    carry = 0
    for digit in a:
        carry, low = divmod(digit * factor + carry, BASE)
        result.append(low)
    if carry:
        result.append(carry)
    return tuple(result)


def _divmod_small(a: Magnitude, divisor: int) -> tuple[Magnitude, Magnitude]:
    """Divide a magnitude by a single nonzero digit."""
    quotient = [0] * len(a)
    remainder = 0
    for i in reversed(range(len(a))):
        quotient[i], remainder = divmod(remainder * BASE + a[i], divisor)
    return canonical_magnitude(quotient), canonical_magnitude((remainder,))


def _divmod_magnitudes(a: Magnitude, b: Magnitude) -> tuple[Magnitude, Magnitude]:
    """Schoolbook long division of magnitudes; ``b`` must be nonzero."""
    if compare_magnitudes(a, b) is Ordering.LESS:
        return (), a
    if len(b) == 1:
        return _divmod_small(a, b[0])

    quotient = [0] * len(a)
    remainder: Magnitude = ()
    for i in reversed(range(len(a))):
        # Bring down the next digit.
        remainder = canonical_magnitude((a[i],) + remainder)
        if compare_magnitudes(remainder, b) is Ordering.LESS:
            continue
        # Largest q with b * q <= remainder.
        low, high = 1, BASE - 1
        while low < high:
            mid = (low + high + 1) // 2
            if compare_magnitudes(_mul_small(b, mid), remainder) is Ordering.GREATER:
                high = mid - 1
            else:
                low = mid
        quotient[i] = low
        remainder = _sub_magnitudes(remainder, _mul_small(b, low))
    return canonical_magnitude(quotient), remainder


def _signed_add(a_negative: bool, a: Magnitude, b_negative: bool, b: Magnitude) -> BigInt:
    if a_negative == b_negative:
        return BigInt.from_magnitude(a_negative, _add_magnitudes(a, b))
    order = compare_magnitudes(a, b)
    if order is Ordering.EQUAL:
        return BigInt.zero()
    if order is Ordering.GREATER:
        return BigInt.from_magnitude(a_negative, _sub_magnitudes(a, b))
    return BigInt.from_magnitude(b_negative, _sub_magnitudes(b, a))


def add(a: BigInt, b: BigInt) -> BigInt:
    """
    Add two BigInts.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Associative: add(add(a, b), c) == add(a, add(b, c))
        - Identity: add(a, 0) == a
    """
    return _signed_add(a.is_negative, a.digits, b.is_negative, b.digits)


def subtract(a: BigInt, b: BigInt) -> BigInt:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0
    """
    return _signed_add(a.is_negative, a.digits, not b.is_negative, b.digits)


def multiply(a: BigInt, b: BigInt) -> BigInt:
    """
    Multiply two BigInts.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Zero: multiply(a, 0) == 0
    """
    negative = a.is_negative != b.is_negative
    return BigInt.from_magnitude(negative, _mul_magnitudes(a.digits, b.digits))


def divmod_trunc(dividend: BigInt, divisor: BigInt) -> tuple[BigInt, BigInt]:
    """
    Long division truncating toward zero.

    The quotient takes the sign of the product of the operand signs and the
    remainder takes the sign of the dividend, so that
    ``dividend == quotient * divisor + remainder`` and
    ``abs(remainder) < abs(divisor)``.

    Raises:
        DivisionByZeroError: If divisor is zero
    """
    validate_divisor(dividend, divisor)
    quotient, remainder = _divmod_magnitudes(dividend.digits, divisor.digits)
    return (
        BigInt.from_magnitude(dividend.is_negative != divisor.is_negative, quotient),
        BigInt.from_magnitude(dividend.is_negative, remainder),
    )


def divide(dividend: BigInt, divisor: BigInt) -> BigInt:
    """Truncated quotient; see :func:`divmod_trunc`."""
    return divmod_trunc(dividend, divisor)[0]


def modulo(dividend: BigInt, divisor: BigInt) -> BigInt:
    """Remainder with the sign of the dividend; see :func:`divmod_trunc`."""
    return divmod_trunc(dividend, divisor)[1]


def _log10_magnitude(a: Magnitude) -> float:
    """Approximate log10 of a nonzero magnitude from its leading digits."""
    lead = 0
    for digit in reversed(a[-3:]):
        lead = lead * BASE + digit
    return math.log10(lead) + DIGIT_WIDTH * (len(a) - min(len(a), 3))


def _check_power_size(base: BigInt, exponent: BigInt, max_digits: int) -> None:
    # 0 and +-1 stay small under any exponent.
    if base.digits in ((), (1,)):
        return
    estimated = exponent.to_float() * _log10_magnitude(base.digits)
    if estimated >= max_digits:
        raise OutOfRangeError(estimated, max_val=max_digits)


def power(base: BigInt, exponent: BigInt, max_digits: int | None = None) -> BigInt:
    """
    Raise base to a non-negative exponent by repeated squaring.

    ``power(x, 0)`` is 1 for every x, zero included. When ``max_digits`` is
    given, the result size is estimated before any multiplication and an
    oversized result is refused.

    Raises:
        InvalidInputError: If exponent is negative
        OutOfRangeError: If the result would reach ``max_digits`` decimal digits
    """
    validate_non_negative(exponent)
    if max_digits is not None:
        _check_power_size(base, exponent, max_digits)
    result = BigInt.one()
    square = base
    remaining = exponent.digits
    while remaining:
        remaining, bit = _divmod_small(remaining, 2)
        if bit:
            result = multiply(result, square)
        if remaining:
            square = multiply(square, square)
    return result
