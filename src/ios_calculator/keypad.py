"""Button dispatch: turns keypad button ids into engine operations."""

from __future__ import annotations

import logging
import re

from ios_calculator.core import CalculatorEngine
from ios_calculator.exceptions import UnknownOperatorError
from ios_calculator.number import SIGNIFICANT_FIGURES
from ios_calculator.operators import parse_operator

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")

CLEAR_BUTTONS = frozenset({"c", "ac"})
NEGATE_BUTTONS = frozenset({"±", "+/-"})


class Keypad:
    """
    The query and press surface a calculator UI binds to.

    Example:
        >>> keypad = Keypad()
        >>> keypad.press_all("1", "+", "2", "*", "3", "=")
        >>> keypad.output
        '7'
    """

    def __init__(self, significant_figures: int | None = SIGNIFICANT_FIGURES) -> None:
        self.engine = CalculatorEngine(significant_figures)

    @property
    def output(self) -> str:
        """Text for the display."""
        return self.engine.display

    @property
    def show_all_clear(self) -> bool:
        """True when the clear button should be labelled "AC"."""
        return self.engine.cleared

    @property
    def active_operator(self) -> str | None:
        """Symbol of the operator button to highlight."""
        operator = self.engine.active_operator()
        return operator.symbol if operator is not None else None

    def press(self, button: str) -> bool:
        """
        Forward one button press to the engine.

        Unknown buttons are logged and ignored.

        Returns:
            Whether the button was recognised
        """
        button = button.strip().lower()
        logger.debug("Button pressed: %r", button)

        if _DIGITS.fullmatch(button):
            self.engine.submit_number(int(button))
        elif button == ".":
            self.engine.submit_decimal()
        elif button == "=":
            self.engine.submit_equals()
        elif button in CLEAR_BUTTONS:
            self.engine.clear()
        elif button in NEGATE_BUTTONS:
            self.engine.submit_negative()
        elif button == "%":
            self.engine.submit_percentage()
        else:
            try:
                operator = parse_operator(button)
            except UnknownOperatorError:
                logger.warning("Unknown button pressed: %r", button)
                return False
            self.engine.submit_operator(operator)
        return True

    def press_all(self, *buttons: str) -> None:
        """Press each button in turn."""
        for button in buttons:
            self.press(button)

    def __repr__(self) -> str:
        return f"Keypad(output={self.output!r}, engine={self.engine!r})"
