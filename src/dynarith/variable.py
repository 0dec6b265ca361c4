"""
Typed values exchanged with the evaluator.

A :class:`Variable` is a tagged union: the tag decides the payload's shape,
and the shape is checked whenever a Variable is built. Variables are frozen,
so operators can never mutate their inputs.
"""

from __future__ import annotations

import dataclasses
import enum
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from dynarith.bigint import BigInt, parse
from dynarith.exceptions import (
    ArithmeticCoreError,
    InvalidInputError,
    MalformedNumberError,
    TypeMismatchError,
)
from dynarith.validators import validate_decimal_text


class TypeTag(enum.Enum):
    OBJECT = enum.auto()
    NUM = enum.auto()
    INT = enum.auto()
    STRING = enum.auto()
    FUNCTION = enum.auto()
    INVALID = enum.auto()

    def __str__(self) -> str:
        return TYPE_NAMES[self]


# Read-only after import; used for diagnostics only.
TYPE_NAMES = MappingProxyType(
    {
        TypeTag.OBJECT: "object",
        TypeTag.NUM: "num",
        TypeTag.INT: "int",
        TypeTag.STRING: "string",
        TypeTag.FUNCTION: "function",
        TypeTag.INVALID: "invalid",
    }
)


def _check_payload(tag: TypeTag, payload: Any) -> None:
    if tag is TypeTag.INT:
        ok = isinstance(payload, BigInt)
    elif tag is TypeTag.NUM:
        ok = isinstance(payload, float)
    elif tag is TypeTag.STRING:
        ok = isinstance(payload, str)
    elif tag is TypeTag.FUNCTION:
        ok = callable(payload)
    elif tag is TypeTag.OBJECT:
        ok = payload is not None
    elif tag is TypeTag.INVALID:
        ok = payload is None
    else:
        raise InvalidInputError(tag, "Unknown type tag")
    if not ok:
        raise InvalidInputError(
            type(payload).__name__, f"Payload does not match type {TYPE_NAMES[tag]}"
        )


@dataclass(frozen=True)
class Variable:
    """
    A dynamically typed value.

    Only ``tag`` and ``payload`` take part in equality. ``dynamic`` marks a
    binding that may be rebound to a value of another type; ``name`` and
    ``error`` exist for diagnostics.
    """

    tag: TypeTag
    payload: Any = None
    dynamic: bool = field(default=False, compare=False)
    name: str | None = field(default=None, compare=False)
    error: ArithmeticCoreError | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.tag, TypeTag):
            raise InvalidInputError(self.tag, "Expected TypeTag")
        _check_payload(self.tag, self.payload)
        if self.error is not None and self.tag is not TypeTag.INVALID:
            raise InvalidInputError(self.error, "Only invalid variables carry an error")

    @property
    def type_name(self) -> str:
        return TYPE_NAMES[self.tag]

    @property
    def is_invalid(self) -> bool:
        return self.tag is TypeTag.INVALID

    def rebind(self, new: Variable) -> Variable:
        """
        Rebind this variable's name to a new value.

        Returns:
            ``new`` carrying this binding's name and dynamic flag

        Raises:
            TypeMismatchError: If the binding is not dynamic and the types differ
        """
        if not self.dynamic and new.tag is not self.tag:
            raise TypeMismatchError("Rebinding", self.type_name, new.type_name)
        return dataclasses.replace(new, dynamic=self.dynamic, name=self.name)


def make_int(
    value: BigInt | int | str, *, dynamic: bool = False, name: str | None = None
) -> Variable:
    """
    Build an Int variable from a BigInt, a native int or decimal text.

    Raises:
        MalformedNumberError: If text does not parse
        InvalidInputError: For any other payload type
    """
    if isinstance(value, str):
        value = parse(value)
    elif not isinstance(value, BigInt):
        value = BigInt.from_int(value)
    return Variable(TypeTag.INT, value, dynamic, name)


def make_num(value: float, *, dynamic: bool = False, name: str | None = None) -> Variable:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")
    try:
        value = float(value)
    except OverflowError as e:
        raise InvalidInputError(value, "Integer too large for a num") from e
    return Variable(TypeTag.NUM, value, dynamic, name)


def make_string(text: str, *, dynamic: bool = False, name: str | None = None) -> Variable:
    return Variable(TypeTag.STRING, text, dynamic, name)


def make_function(
    fn: Callable[..., Any], *, dynamic: bool = False, name: str | None = None
) -> Variable:
    return Variable(TypeTag.FUNCTION, fn, dynamic, name)


def make_object(obj: Any, *, dynamic: bool = False, name: str | None = None) -> Variable:
    return Variable(TypeTag.OBJECT, obj, dynamic, name)


def make_invalid(
    error: ArithmeticCoreError | None = None, *, dynamic: bool = False, name: str | None = None
) -> Variable:
    return Variable(TypeTag.INVALID, None, dynamic, name, error)


class LiteralKind(enum.Enum):
    INTEGER = enum.auto()
    DOUBLE = enum.auto()
    STRING = enum.auto()


def _parse_double(lexeme: str) -> float:
    """Accept ``[sign]digits[.digits]`` or ``[sign].digits``, nothing else."""
    whole, dot, fraction = lexeme.partition(".")
    if whole in ("", "+", "-"):
        if not dot or not fraction:
            raise MalformedNumberError(lexeme, "No digits in number")
    else:
        validate_decimal_text(whole)
    if dot:
        if not fraction:
            raise MalformedNumberError(lexeme, "No digits after decimal point")
        validate_decimal_text(fraction)
        if fraction[0] in "+-":
            raise MalformedNumberError(lexeme, "Sign inside fraction")
    value = float(lexeme)
    if not math.isfinite(value):
        raise MalformedNumberError(lexeme, "Number out of range")
    return value


def from_literal(kind: LiteralKind, lexeme: str, *, name: str | None = None) -> Variable:
    """
    Build a Variable from a literal token's lexeme.

    Raises:
        MalformedNumberError: If a numeric lexeme is malformed
    """
    if kind is LiteralKind.INTEGER:
        return make_int(lexeme, name=name)
    if kind is LiteralKind.DOUBLE:
        return make_num(_parse_double(lexeme), name=name)
    if kind is LiteralKind.STRING:
        return make_string(lexeme, name=name)
    raise InvalidInputError(kind, "Unknown literal kind")
