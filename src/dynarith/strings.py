"""Textual rendering of numeric values and string concatenation."""

from __future__ import annotations

import math

from dynarith import bigint
from dynarith.config import EngineConfig, get_config
from dynarith.exceptions import InvalidInputError
from dynarith.variable import TypeTag, Variable

STRINGIFIABLE = frozenset({TypeTag.INT, TypeTag.NUM, TypeTag.STRING})


def format_num(value: float, precision: int) -> str:
    """
    Fixed-point, locale-independent rendering of a double.

    Matches C's ``%.<precision>f``: ``inf``, ``-inf`` and ``nan`` for
    non-finite values, and negative zero keeps its sign.
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{precision}f}"


def stringify(var: Variable, config: EngineConfig | None = None) -> str:
    """
    Render an Int, Num or String variable as text.

    Raises:
        InvalidInputError: For any other type
    """
    if var.tag is TypeTag.STRING:
        return var.payload
    if var.tag is TypeTag.INT:
        return bigint.format(var.payload)
    if var.tag is TypeTag.NUM:
        config = config or get_config()
        return format_num(var.payload, config.num_precision)
    raise InvalidInputError(var.type_name, "Type has no textual representation")


def concat_text(a: Variable, b: Variable) -> str:
    return stringify(a) + stringify(b)
