"""Custom exceptions for the dynarith arithmetic core."""

from typing import Any


class ArithmeticCoreError(Exception):
    """Base exception for all arithmetic core errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class MalformedNumberError(ArithmeticCoreError):
    """Raised when text does not parse as a signed decimal number."""

    def __init__(self, text: str, reason: str = "malformed number") -> None:
        super().__init__(reason, repr(text))
        self.text = text
        self.reason = reason


class DivisionByZeroError(ArithmeticCoreError):
    """Raised when attempting to divide by zero."""

    def __init__(self, dividend: Any) -> None:
        super().__init__("Division by zero", dividend)
        self.dividend = dividend


class TypeMismatchError(ArithmeticCoreError):
    """Raised when an operation is not defined for the given types."""

    def __init__(self, operation: str, left_type: str, right_type: str) -> None:
        super().__init__(f"{operation} is not defined for {left_type} and {right_type}")
        self.operation = operation
        self.left_type = left_type
        self.right_type = right_type


class PoisonedOperandError(ArithmeticCoreError):
    """Raised when an operand is already invalid."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} received an invalid operand")
        self.operation = operation


class InvalidInputError(ArithmeticCoreError):
    """Raised when input is invalid (wrong type, non-finite, bad payload)."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class OutOfRangeError(InvalidInputError):
    """Raised when a value is outside acceptable range."""

    def __init__(
        self, value: float, min_val: float | None = None, max_val: float | None = None
    ) -> None:
        range_str = f"[{min_val}, {max_val}]"
        super().__init__(value, f"Value out of range {range_str}")
        self.min_val = min_val
        self.max_val = max_val
