"""
Binary operators over Variables.

Each operator looks up an implementation in a table keyed by the pair of
operand type tags, coercing Int to Num where the pair is mixed. Operators
never raise: poisoned operands, undefined type pairs and arithmetic failures
all come back as an invalid Variable carrying the error.
"""

from __future__ import annotations

import enum
import logging
import math
import operator
from collections.abc import Callable
from types import MappingProxyType

from dynarith import kernel
from dynarith.bigint import BigInt
from dynarith.config import get_config
from dynarith.exceptions import (
    ArithmeticCoreError,
    InvalidInputError,
    PoisonedOperandError,
    TypeMismatchError,
)
from dynarith.strings import STRINGIFIABLE, concat_text
from dynarith.variable import TypeTag, Variable, make_int, make_invalid, make_num, make_string

logger = logging.getLogger(__name__)

BinaryOperationImpl = Callable[[Variable, Variable], Variable]
TypeSet = frozenset[TypeTag]
BinaryOperationImplTable = list[tuple[tuple[TypeSet, TypeSet], BinaryOperationImpl]]

INT: TypeSet = frozenset({TypeTag.INT})
NUMERIC: TypeSet = frozenset({TypeTag.INT, TypeTag.NUM})


def _fail(op_name: str, a: Variable, b: Variable, error: ArithmeticCoreError) -> Variable:
    logger.debug("%s(%s, %s) is invalid: %s", op_name, a.type_name, b.type_name, error)
    return make_invalid(error)


def eval_binary_operation(
    table: BinaryOperationImplTable, a: Variable, b: Variable, op_name: str
) -> Variable:
    """Run the first implementation in ``table`` whose type sets match ``a`` and ``b``."""
    if a.is_invalid or b.is_invalid:
        return _fail(op_name, a, b, PoisonedOperandError(op_name))
    for (types_a, types_b), impl in table:
        if a.tag in types_a and b.tag in types_b:
            try:
                return impl(a, b)
            except ArithmeticCoreError as e:
                return _fail(op_name, a, b, e)
    else:
        return _fail(op_name, a, b, TypeMismatchError(op_name, a.type_name, b.type_name))


def _as_float(var: Variable) -> float:
    if var.tag is TypeTag.INT:
        return var.payload.to_float()
    return var.payload


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


# Float primitives follow IEEE 754 / C semantics instead of raising.


def _float_div(x: float, y: float) -> float:
    if y == 0.0:
        if x == 0.0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def _float_mod(x: float, y: float) -> float:
    try:
        return math.fmod(x, y)
    except ValueError:
        return math.nan


def _float_pow(x: float, y: float) -> float:
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0 and _is_odd_integer(y):
            return -math.inf
        return math.inf
    except ValueError:
        if x == 0.0:
            # Zero raised to a negative power.
            if _is_odd_integer(y):
                return math.copysign(math.inf, x)
            return math.inf
        return math.nan


def _int_impl(fn: Callable[[BigInt, BigInt], BigInt]) -> BinaryOperationImpl:
    return lambda a, b: make_int(fn(a.payload, b.payload))


def _float_impl(fn: Callable[[float, float], float]) -> BinaryOperationImpl:
    return lambda a, b: make_num(fn(_as_float(a), _as_float(b)))


def _int_pow(a: Variable, b: Variable) -> Variable:
    if b.payload.is_negative:
        return make_num(_float_pow(a.payload.to_float(), b.payload.to_float()))
    return make_int(kernel.power(a.payload, b.payload, get_config().max_int_digits))


def _concat(a: Variable, b: Variable) -> Variable:
    return make_string(concat_text(a, b))


add_impls: BinaryOperationImplTable = [
    ((INT, INT), _int_impl(kernel.add)),
    ((NUMERIC, NUMERIC), _float_impl(operator.add)),
]
sub_impls: BinaryOperationImplTable = [
    ((INT, INT), _int_impl(kernel.subtract)),
    ((NUMERIC, NUMERIC), _float_impl(operator.sub)),
]
mul_impls: BinaryOperationImplTable = [
    ((INT, INT), _int_impl(kernel.multiply)),
    ((NUMERIC, NUMERIC), _float_impl(operator.mul)),
]
div_impls: BinaryOperationImplTable = [
    ((INT, INT), _int_impl(kernel.divide)),
    ((NUMERIC, NUMERIC), _float_impl(_float_div)),
]
mod_impls: BinaryOperationImplTable = [
    ((INT, INT), _int_impl(kernel.modulo)),
    ((NUMERIC, NUMERIC), _float_impl(_float_mod)),
]
pow_impls: BinaryOperationImplTable = [
    ((INT, INT), _int_pow),
    ((NUMERIC, NUMERIC), _float_impl(_float_pow)),
]
concat_impls: BinaryOperationImplTable = [
    ((STRINGIFIABLE, STRINGIFIABLE), _concat),
]


def add(a: Variable, b: Variable) -> Variable:
    """
    Add two numeric variables.

    Int + Int is exact and stays Int; any Num operand promotes the other
    side to Num.
    """
    return eval_binary_operation(add_impls, a, b, "Addition")


def sub(a: Variable, b: Variable) -> Variable:
    """Subtract b from a; same coercion as :func:`add`."""
    return eval_binary_operation(sub_impls, a, b, "Subtraction")


def mul(a: Variable, b: Variable) -> Variable:
    """Multiply two numeric variables; same coercion as :func:`add`."""
    return eval_binary_operation(mul_impls, a, b, "Multiplication")


def div(a: Variable, b: Variable) -> Variable:
    """
    Divide a by b.

    Int / Int truncates toward zero and is invalid for a zero divisor.
    With a Num operand the division is IEEE: a zero divisor gives a signed
    infinity, or NaN for 0 / 0.
    """
    return eval_binary_operation(div_impls, a, b, "Division")


def mod(a: Variable, b: Variable) -> Variable:
    """
    Remainder of a divided by b.

    For Int operands the remainder takes the sign of the dividend, so
    ``add(mul(div(a, b), b), mod(a, b)) == a``. With a Num operand this is
    ``fmod``.
    """
    return eval_binary_operation(mod_impls, a, b, "Modulus")


def pow(a: Variable, b: Variable) -> Variable:  # noqa: A001
    """
    Raise a to the power b.

    Int ** non-negative Int is exact. A negative Int exponent, or any Num
    operand, computes a float power and returns Num.
    """
    return eval_binary_operation(pow_impls, a, b, "Exponentiation")


def concat(a: Variable, b: Variable) -> Variable:
    """
    Concatenate the textual forms of two Int, Num or String variables.

    Example:
        >>> concat(make_string("score:"), make_int(5)).payload
        'score:5'
    """
    return eval_binary_operation(concat_impls, a, b, "Concatenation")


class BinaryOperator(enum.Enum):
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULUS = "%"
    EXPONENT = "^"
    STR_CONCAT = ".."

    def __str__(self) -> str:
        return self.value


OperatorFunc = Callable[[Variable, Variable], Variable]

OPERATORS = MappingProxyType(
    {
        BinaryOperator.PLUS: add,
        BinaryOperator.MINUS: sub,
        BinaryOperator.MULTIPLY: mul,
        BinaryOperator.DIVIDE: div,
        BinaryOperator.MODULUS: mod,
        BinaryOperator.EXPONENT: pow,
        BinaryOperator.STR_CONCAT: concat,
    }
)


def get_operator(symbol: str | BinaryOperator) -> OperatorFunc:
    """
    Look up the operator function for a symbol such as ``"+"``.

    Raises:
        InvalidInputError: If the symbol names no operator
    """
    try:
        op = BinaryOperator(symbol)
    except ValueError as e:
        raise InvalidInputError(symbol, "Unknown operator") from e
    return OPERATORS[op]


def apply(symbol: str | BinaryOperator, a: Variable, b: Variable) -> Variable:
    """Apply the operator named by ``symbol`` to two variables."""
    return get_operator(symbol)(a, b)
