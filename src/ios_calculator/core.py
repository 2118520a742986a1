"""Calculator engine: the expression buffer behind the keypad."""

from __future__ import annotations

import logging

from ios_calculator.exceptions import BufferInvariantError
from ios_calculator.number import SIGNIFICANT_FIGURES, NumberValue
from ios_calculator.operations import negate, percent
from ios_calculator.operators import Operator
from ios_calculator.validators import validate_digit, validate_significant_figures

logger = logging.getLogger(__name__)

Token = NumberValue | Operator


class CalculatorEngine:
    """
    A button-driven four-function calculator with iOS semantics.

    The buffer alternates numbers and operators, starting with a number;
    only the last token may be an operator (one is pending). Operators that
    bind tighter than the one before them are stacked rather than evaluated,
    and the buffer is reduced right to left, which yields BIDMAS order.

    After "=", the buffer keeps the last operator and operand so pressing
    "=" again repeats them.

    Example:
        >>> calc = CalculatorEngine()
        >>> calc.submit_number(1)
        >>> calc.submit_operator(Operator.ADD)
        >>> calc.submit_number(2)
        >>> calc.submit_operator(Operator.MULTIPLY)
        >>> calc.submit_number(3)
        >>> calc.submit_equals()
        >>> calc.display
        '7'
    """

    def __init__(self, significant_figures: int | None = SIGNIFICANT_FIGURES) -> None:
        """
        Initialize the engine in its all-clear state.

        Args:
            significant_figures: Digit limit for entry and display (None for no limit)

        Raises:
            InvalidInputError: If significant_figures is not an integer
            OutOfRangeError: If significant_figures is outside [1, 17]
        """
        self._significant_figures = validate_significant_figures(significant_figures)
        self._reset()

    def _reset(self) -> None:
        self._buffer: list[Token] = [self._number(0)]
        self._display_index = 0
        self._cleared = True
        self._editing = False

    def _number(self, value: float) -> NumberValue:
        return NumberValue.from_numeric(value, self._significant_figures)

    @property
    def buffer(self) -> tuple[Token, ...]:
        """Snapshot of the token buffer."""
        return tuple(
            token.copy() if isinstance(token, NumberValue) else token for token in self._buffer
        )

    @property
    def display_index(self) -> int:
        """Position of the number being shown."""
        return self._display_index

    @property
    def cleared(self) -> bool:
        """True when the clear key should read "AC" rather than "C"."""
        return self._cleared

    @property
    def editing(self) -> bool:
        """True when the next digit extends the shown number."""
        return self._editing

    @property
    def significant_figures(self) -> int | None:
        return self._significant_figures

    @property
    def display(self) -> str:
        """Formatted text for the display."""
        return self._display_number().to_display_string()

    def _display_number(self) -> NumberValue:
        token = self._buffer[self._display_index]
        if not isinstance(token, NumberValue):
            raise BufferInvariantError("Display index points to a non-number", self._buffer)
        return token

    def _last_token(self) -> Token:
        if not self._buffer:
            raise BufferInvariantError("Buffer is empty")
        return self._buffer[-1]

    def current_display(self) -> NumberValue:
        """Return a copy of the number being shown."""
        return self._display_number().copy()

    def active_operator(self) -> Operator | None:
        """The pending operator, if the buffer ends with one."""
        token = self._last_token()
        if isinstance(token, Operator):
            return token
        return None

    def _last_operator(self) -> Operator | None:
        for token in reversed(self._buffer):
            if isinstance(token, Operator):
                return token
        return None

    def _reduce(self) -> NumberValue:
        """
        Evaluate the buffer from the right, one (a, op, b) triple at a time.

        Returns:
            The value the whole buffer reduces to

        Raises:
            BufferInvariantError: If the buffer does not start with a number
        """
        tokens = list(self._buffer)
        index = len(tokens) - 1

        while index >= 2:
            a, op, b = tokens[index - 2], tokens[index - 1], tokens[index]
            if (
                isinstance(a, NumberValue)
                and isinstance(op, Operator)
                and isinstance(b, NumberValue)
            ):
                tokens[index - 2] = self._number(op.evaluate(a.numeric, b.numeric))
            index -= 2

        result = tokens[0] if tokens else None
        if not isinstance(result, NumberValue):
            raise BufferInvariantError("Buffer does not reduce to a number", self._buffer)
        return result

    def clear(self) -> None:
        """
        Handle the AC/C key.

        "AC" (already cleared) resets everything. "C" zeroes only the shown
        entry and keeps any pending operator, so "3 + C 3 =" gives 6.
        """
        if self._cleared:
            logger.debug("All clear")
            self._reset()
            return

        if isinstance(self._last_token(), Operator):
            self._buffer.append(self._number(0))
            self._display_index = len(self._buffer) - 1
        else:
            self._buffer[self._display_index] = self._number(0)
        self._editing = False
        self._cleared = True

    def submit_equals(self) -> None:
        """
        Evaluate the pending expression into the first slot.

        The final operator and operand are kept, so another "=" repeats
        them against the new result.
        """
        self._editing = False

        # Nothing to calculate.
        if len(self._buffer) <= 2:
            return

        if isinstance(self._last_token(), Operator):
            self._buffer.pop()

        result = self._reduce()
        logger.debug("Reduced %d tokens to %s", len(self._buffer), result.numeric)

        self._buffer[0] = result
        self._display_index = 0
        if len(self._buffer) > 3:
            del self._buffer[1:3]

    def submit_operator(self, operator: Operator) -> None:
        """
        Commit an operator key.

        Pressing another operator straight after one swaps it. If the new
        operator binds tighter than the previous pending one, it is stacked
        and nothing is evaluated yet; otherwise the chain is reduced first.
        """
        self._editing = False
        last = self._last_token()

        if isinstance(last, Operator):
            if last is not operator:
                self._buffer[-1] = operator
            return

        if self._display_index > 0:
            previous = self._last_operator()
            if previous is not None and previous.precedes(operator):
                self._buffer.append(operator)
                return
            self.submit_equals()

        del self._buffer[1:]
        self._buffer.append(operator)

    def submit_number(self, digit: int) -> None:
        """Enter a digit, extending the shown number or starting a new one."""
        validate_digit(digit)

        if isinstance(self._last_token(), Operator):
            self._buffer.append(NumberValue.from_digit(digit, self._significant_figures))
            self._display_index += 2
        elif self._editing:
            self._display_number().append_digit(digit)
        else:
            self._buffer[self._display_index] = NumberValue.from_digit(
                digit, self._significant_figures
            )

        self._editing = True
        self._cleared = False

    def submit_decimal(self) -> None:
        """Enter a decimal point; on a fresh entry this types "0."."""
        if not self._editing:
            self.submit_number(0)
        self._display_number().decimalise()

    def submit_negative(self) -> None:
        """Flip the sign of the shown number."""
        number = self._display_number()
        number.set_numeric(negate(number.numeric))
        self._editing = True

    def submit_percentage(self) -> None:
        """Divide the shown number by 100, evaluating any pending chain first."""
        if self._display_index > 0:
            self.submit_equals()
        number = self._display_number()
        number.set_numeric(percent(number.numeric))

    def __repr__(self) -> str:
        tokens = " ".join(
            token.text if isinstance(token, NumberValue) else token.symbol
            for token in self._buffer
        )
        return (
            f"CalculatorEngine(buffer=[{tokens}], display_index={self._display_index}, "
            f"cleared={self._cleared}, editing={self._editing})"
        )
