"""
Arithmetic and value-typing core for a small dynamically typed language.

This package provides:
- Arbitrary-precision integers built from digit operations (BigInt)
- A tagged dynamic value type (Variable)
- Seven exception-free binary operators with Int/Num/String coercion
"""

from dynarith.bigint import BigInt, Ordering, Sign, compare, format, parse
from dynarith.config import EngineConfig, get_config
from dynarith.exceptions import (
    ArithmeticCoreError,
    DivisionByZeroError,
    InvalidInputError,
    MalformedNumberError,
    OutOfRangeError,
    PoisonedOperandError,
    TypeMismatchError,
)
from dynarith.operations import (
    OPERATORS,
    BinaryOperator,
    add,
    apply,
    concat,
    div,
    get_operator,
    mod,
    mul,
    pow,
    sub,
)
from dynarith.strings import stringify
from dynarith.variable import (
    TYPE_NAMES,
    LiteralKind,
    TypeTag,
    Variable,
    from_literal,
    make_function,
    make_int,
    make_invalid,
    make_num,
    make_object,
    make_string,
)

__all__ = [
    "OPERATORS",
    "TYPE_NAMES",
    "ArithmeticCoreError",
    "BigInt",
    "BinaryOperator",
    "DivisionByZeroError",
    "EngineConfig",
    "InvalidInputError",
    "LiteralKind",
    "MalformedNumberError",
    "Ordering",
    "OutOfRangeError",
    "PoisonedOperandError",
    "Sign",
    "TypeMismatchError",
    "TypeTag",
    "Variable",
    "add",
    "apply",
    "compare",
    "concat",
    "div",
    "format",
    "from_literal",
    "get_config",
    "get_operator",
    "make_function",
    "make_int",
    "make_invalid",
    "make_num",
    "make_object",
    "make_string",
    "mod",
    "mul",
    "parse",
    "pow",
    "stringify",
    "sub",
]

__version__ = "0.1.0"
