"""Display numbers: an arithmetic value paired with its in-progress text."""

from __future__ import annotations

import math
from decimal import Decimal

from ios_calculator.truncate import count_digits, truncate_digits
from ios_calculator.validators import validate_digit, validate_significant_figures

SIGNIFICANT_FIGURES = 9
GROUPING_SEPARATOR = ","


def stringify(value: float) -> str:
    """
    Render a float positionally with its shortest round-tripping digits.

    Example:
        >>> stringify(4.0)
        '4'
        >>> stringify(-0.0)
        '-0'
        >>> stringify(1e-07)
        '0.0000001'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def exponential_parts(value: float) -> tuple[str, int]:
    """
    Split a finite float into a shortest coefficient and a power of ten.

    Example:
        >>> exponential_parts(1234567890.0)
        ('1.23456789', 9)
        >>> exponential_parts(-0.00000000123456789)
        ('-1.23456789', -9)
    """
    decimal = Decimal(repr(value))
    sign, digits, _ = decimal.as_tuple()
    exponent = decimal.adjusted() if decimal else 0

    text = "".join(map(str, digits)).rstrip("0") or "0"
    coefficient = text[0] if len(text) == 1 else f"{text[0]}.{text[1:]}"
    if sign:
        coefficient = f"-{coefficient}"
    return coefficient, exponent


def group_thousands(integer: int) -> str:
    """Format an integer with a fixed thousands separator."""
    return f"{integer:,}".replace(",", GROUPING_SEPARATOR)


class NumberValue:
    """
    A calculator number as the user sees it while typing.

    The float is the arithmetic truth; the text keeps entry state the float
    cannot hold, such as a trailing decimal point ("1.") or a signed zero
    ("-0"). Both are kept in step by every mutator.

    Example:
        >>> number = NumberValue.from_numeric(1)
        >>> number.append_digit(2)
        >>> number.decimalise()
        >>> str(number)
        '12.'
    """

    __slots__ = ("_numeric", "_text", "_significant_figures")

    def __init__(
        self, numeric: float, text: str, significant_figures: int | None = SIGNIFICANT_FIGURES
    ) -> None:
        self._numeric = float(numeric)
        self._text = text
        self._significant_figures = validate_significant_figures(significant_figures)

    @classmethod
    def from_numeric(
        cls, value: float, significant_figures: int | None = SIGNIFICANT_FIGURES
    ) -> NumberValue:
        """Create a number whose text is derived from value."""
        value = float(value)
        return cls(value, stringify(value), significant_figures)

    @classmethod
    def from_digit(
        cls, digit: int, significant_figures: int | None = SIGNIFICANT_FIGURES
    ) -> NumberValue:
        """Create a number for the first key of a new entry."""
        validate_digit(digit)
        text = str(digit)
        if significant_figures is not None:
            text = truncate_digits(text, significant_figures)
        return cls(float(text), text, significant_figures)

    @property
    def numeric(self) -> float:
        """The value used for arithmetic."""
        return self._numeric

    @property
    def text(self) -> str:
        """The raw entry text."""
        return self._text

    @property
    def significant_figures(self) -> int | None:
        return self._significant_figures

    def set_numeric(self, value: float) -> None:
        """Overwrite the value, discarding any pending entry text."""
        self._numeric = float(value)
        self._text = stringify(self._numeric)

    def append_digit(self, digit: int) -> None:
        """
        Append a key to the entry text and reparse it.

        Silently ignored once the text holds significant_figures digits, or
        when the value is not finite. A multi-digit key only contributes the
        digits that still fit.
        """
        validate_digit(digit)
        if not math.isfinite(self._numeric):
            return
        if (
            self._significant_figures is not None
            and count_digits(self._text) >= self._significant_figures
        ):
            return

        if self._text == "0":
            self._text = str(digit)
        elif self._text == "-0":
            self._text = f"-{digit}"
        else:
            self._text += str(digit)

        if self._significant_figures is not None:
            self._text = truncate_digits(self._text, self._significant_figures)
        self._numeric = float(self._text)

    def decimalise(self) -> None:
        """Add a trailing decimal point unless the number already has one."""
        if not self._numeric.is_integer() or "." in self._text:
            return
        self._text += "."

    def to_display_string(self) -> str:
        """
        Format the number for the display.

        Numbers whose decimal exponent is sf or more away from zero are
        shown as "{coefficient}e{exponent}" with the coefficient truncated
        so the whole reading fits. Everything else is shown with grouped thousands
        and the typed fractional digits, truncated to sf digits. Digits are
        always cut, never rounded.
        """
        if not math.isfinite(self._numeric):
            return stringify(self._numeric)

        sf = self._significant_figures
        coefficient, exponent = exponential_parts(self._numeric)

        if sf is not None and abs(exponent) >= sf:
            max_coefficient_len = max(1, sf - (len(str(exponent)) + 1))
            return f"{truncate_digits(coefficient, max_coefficient_len)}e{exponent}"

        integer = math.trunc(self._numeric)
        output = ""
        # trunc() drops the sign of -0.3
        if integer == 0 and math.copysign(1.0, self._numeric) < 0:
            output = "-"
        output += group_thousands(integer)

        _, point, fraction = self._text.partition(".")
        if point:
            output += f".{fraction}"

        if sf is not None:
            return truncate_digits(output, sf)
        return output

    def copy(self) -> NumberValue:
        return NumberValue(self._numeric, self._text, self._significant_figures)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"NumberValue(numeric={self._numeric!r}, text={self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberValue):
            return NotImplemented
        return (
            self._text == other._text
            and self._significant_figures == other._significant_figures
            and (
                self._numeric == other._numeric
                or (math.isnan(self._numeric) and math.isnan(other._numeric))
            )
        )

    __hash__ = None  # type: ignore[assignment]
