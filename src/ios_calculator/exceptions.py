"""Custom exceptions for the calculator engine."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class UnknownOperatorError(CalculatorError):
    """Raised when a symbol does not name one of the four operators."""

    def __init__(self, symbol: Any) -> None:
        super().__init__("Unknown operator", symbol)
        self.symbol = symbol


class InvalidInputError(CalculatorError):
    """Raised when input is invalid (wrong type, negative digit)."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class OutOfRangeError(CalculatorError):
    """Raised when a value is outside acceptable range."""

    def __init__(
        self, value: float, min_val: float | None = None, max_val: float | None = None
    ) -> None:
        range_str = f"[{min_val}, {max_val}]"
        super().__init__(f"Value out of range {range_str}", value)
        self.min_val = min_val
        self.max_val = max_val


class BufferInvariantError(CalculatorError):
    """
    Raised when the token buffer is in a shape the engine never produces.

    This signals a programming error, not bad user input, and is never
    caught inside the package.
    """

    def __init__(self, reason: str, buffer: Any = None) -> None:
        super().__init__(reason, buffer)
        self.reason = reason
