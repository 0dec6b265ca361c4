"""Unit tests for the BigInt arithmetic kernel."""

import pytest

from dynarith import BigInt, DivisionByZeroError, InvalidInputError, OutOfRangeError, parse
from dynarith.kernel import add, divide, divmod_trunc, modulo, multiply, power, subtract


def n(text: str) -> BigInt:
    return parse(text)


class TestAdd:
    """Tests for the add function."""

    def test_add_positive_numbers(self):
        assert add(n("2"), n("3")) == n("5")

    def test_add_negative_numbers(self):
        assert add(n("-2"), n("-3")) == n("-5")

    def test_add_mixed_signs(self):
        assert add(n("-2"), n("3")) == n("1")
        assert add(n("2"), n("-3")) == n("-1")

    def test_add_with_zero(self):
        assert add(n("5"), n("0")) == n("5")
        assert add(n("0"), n("-5")) == n("-5")

    def test_add_carries_across_digits(self):
        assert add(n("9999"), n("1")) == n("10000")
        assert add(n("99999999999999999999"), n("1")) == n("100000000000000000000")

    def test_add_large(self):
        assert add(n("123456789012345678901234567890"), n("1")) == n(
            "123456789012345678901234567891"
        )

    def test_add_opposites_is_canonical_zero(self):
        result = add(n("123456789123456789"), n("-123456789123456789"))
        assert result == BigInt.zero()
        assert result.is_zero


class TestSubtract:
    """Tests for the subtract function."""

    def test_subtract_positive_numbers(self):
        assert subtract(n("5"), n("3")) == n("2")

    def test_subtract_resulting_negative(self):
        assert subtract(n("3"), n("5")) == n("-2")

    def test_subtract_borrows_across_digits(self):
        assert subtract(n("100000000"), n("1")) == n("99999999")

    def test_subtract_strips_leading_zeros(self):
        result = subtract(n("100000001"), n("100000000"))
        assert result == n("1")
        assert result.digits == (1,)

    def test_subtract_same_number(self):
        assert subtract(n("-77"), n("-77")) == BigInt.zero()

    def test_subtract_negative(self):
        assert subtract(n("-5"), n("-8")) == n("3")
        assert subtract(n("0"), n("-8")) == n("8")


class TestMultiply:
    """Tests for the multiply function."""

    def test_multiply_positive_numbers(self):
        assert multiply(n("3"), n("4")) == n("12")

    def test_multiply_signs(self):
        assert multiply(n("-3"), n("4")) == n("-12")
        assert multiply(n("3"), n("-4")) == n("-12")
        assert multiply(n("-3"), n("-4")) == n("12")

    def test_multiply_by_zero(self):
        assert multiply(n("-1000"), n("0")).is_zero
        assert multiply(n("0"), n("1000")).is_zero

    def test_multiply_large(self):
        assert multiply(n("99999999999999999999"), n("99999999999999999999")) == n(
            "9999999999999999999800000000000000000001"
        )

    def test_multiply_with_inner_zero_digits(self):
        assert multiply(n("100000001"), n("100000001")) == n("10000000200000001")


class TestDivmod:
    """Tests for truncating division and modulus."""

    def test_divide_evenly(self):
        assert divide(n("10"), n("2")) == n("5")

    def test_divide_with_remainder(self):
        assert divmod_trunc(n("7"), n("2")) == (n("3"), n("1"))

    @pytest.mark.parametrize(
        "a, b, q, r",
        [
            ("-7", "2", "-3", "-1"),
            ("7", "-2", "-3", "1"),
            ("-7", "-2", "3", "-1"),
            ("1", "5", "0", "1"),
            ("-1", "5", "0", "-1"),
        ],
    )
    def test_truncates_toward_zero(self, a, b, q, r):
        assert divmod_trunc(n(a), n(b)) == (n(q), n(r))

    def test_divide_multi_digit_divisor(self):
        q = n("124999998873437")
        b = n("987654321987")
        r = n("653614776171")
        a = add(multiply(q, b), r)
        assert divmod_trunc(a, b) == (q, r)
        assert divmod_trunc(a.negate(), b) == (q.negate(), r.negate())

    def test_divide_power_of_ten(self):
        assert divmod_trunc(n("1" + "0" * 30), n("1" + "0" * 12)) == (
            n("1" + "0" * 18),
            BigInt.zero(),
        )

    def test_divide_by_itself(self):
        a = n("-31415926535897932384626433")
        assert divmod_trunc(a, a) == (n("1"), BigInt.zero())

    def test_divide_smaller_dividend(self):
        assert divmod_trunc(n("12345"), n("1234567890")) == (BigInt.zero(), n("12345"))

    def test_divide_zero_dividend(self):
        assert divmod_trunc(n("0"), n("-9")) == (BigInt.zero(), BigInt.zero())

    def test_divide_by_zero_raises(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            divide(n("10"), n("0"))
        assert exc_info.value.dividend == n("10")

    def test_modulo_by_zero_raises(self):
        with pytest.raises(DivisionByZeroError):
            modulo(n("10"), n("0"))

    def test_modulo_sign_follows_dividend(self):
        assert modulo(n("-10"), n("3")) == n("-1")
        assert modulo(n("10"), n("-3")) == n("1")


class TestPower:
    """Tests for the power function."""

    def test_power_positive_exponent(self):
        assert power(n("2"), n("10")) == n("1024")

    def test_power_zero_exponent(self):
        assert power(n("5"), n("0")) == n("1")
        assert power(n("0"), n("0")) == n("1")

    def test_power_one_exponent(self):
        assert power(n("-5"), n("1")) == n("-5")

    def test_power_negative_base(self):
        assert power(n("-3"), n("3")) == n("-27")
        assert power(n("-3"), n("4")) == n("81")

    def test_power_large(self):
        assert power(n("2"), n("100")) == n("1267650600228229401496703205376")

    def test_power_zero_base(self):
        assert power(n("0"), n("5")).is_zero

    def test_power_negative_exponent_raises(self):
        with pytest.raises(InvalidInputError):
            power(n("2"), n("-1"))

    def test_power_over_cap_raises(self):
        with pytest.raises(OutOfRangeError):
            power(n("2"), n("1000000000000"), max_digits=10_000)

    def test_power_under_cap(self):
        assert power(n("10"), n("9"), max_digits=10) == n("1000000000")

    def test_power_at_cap_raises(self):
        with pytest.raises(OutOfRangeError):
            power(n("10"), n("10"), max_digits=10)

    @pytest.mark.parametrize("base, expected", [("0", "0"), ("1", "1"), ("-1", "-1")])
    def test_power_trivial_bases_ignore_cap(self, base, expected):
        assert power(n(base), n("1" + "0" * 30 + "1"), max_digits=1) == n(expected)
