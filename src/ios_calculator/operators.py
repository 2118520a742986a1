"""The four arithmetic operators and their order of operations."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from ios_calculator.exceptions import UnknownOperatorError
from ios_calculator.operations import add, divide, multiply, subtract

if TYPE_CHECKING:
    from collections.abc import Callable


class Operator(Enum):
    """
    A binary operator, keyed by its button symbol.

    Lower precedence numbers bind tighter (BIDMAS): multiply and divide are
    2, add and subtract are 3.
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    def evaluate(self, a: float, b: float) -> float:
        """Apply the operator to a and b."""
        return _FUNCTIONS[self](a, b)

    def precedes(self, other: Operator) -> bool:
        """
        Whether other binds tighter than self.

        When an operator already in the buffer precedes a newly pressed
        one, the new operator's operands must be evaluated first, so the
        pending chain is left unreduced.

        Example:
            >>> Operator.ADD.precedes(Operator.MULTIPLY)
            True
            >>> Operator.MULTIPLY.precedes(Operator.ADD)
            False
        """
        return self.precedence > other.precedence

    def __str__(self) -> str:
        return self.value


_PRECEDENCE: dict[Operator, int] = {
    Operator.ADD: 3,
    Operator.SUBTRACT: 3,
    Operator.MULTIPLY: 2,
    Operator.DIVIDE: 2,
}

_FUNCTIONS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
}


def parse_operator(symbol: str) -> Operator:
    """
    Look up the operator for a button symbol.

    Raises:
        UnknownOperatorError: If symbol is not one of + - * /
    """
    try:
        return Operator(symbol)
    except ValueError as e:
        raise UnknownOperatorError(symbol) from e
