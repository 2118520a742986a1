"""
Calculator engine with iOS-calculator button semantics.

This package provides:
- An editable expression buffer with BIDMAS-aware reduction
- "=" repetition of the last operation
- Display formatting with grouping, digit truncation and exponents
- A button dispatcher and a terminal keypad
"""

from ios_calculator.core import CalculatorEngine, Token
from ios_calculator.exceptions import (
    BufferInvariantError,
    CalculatorError,
    InvalidInputError,
    OutOfRangeError,
    UnknownOperatorError,
)
from ios_calculator.keypad import Keypad
from ios_calculator.number import SIGNIFICANT_FIGURES, NumberValue, stringify
from ios_calculator.operations import add, divide, multiply, negate, percent, subtract
from ios_calculator.operators import Operator, parse_operator
from ios_calculator.truncate import count_digits, truncate_digits
from ios_calculator.validators import validate_digit, validate_significant_figures

__all__ = [
    "SIGNIFICANT_FIGURES",
    "BufferInvariantError",
    "CalculatorEngine",
    "CalculatorError",
    "InvalidInputError",
    "Keypad",
    "NumberValue",
    "Operator",
    "OutOfRangeError",
    "Token",
    "UnknownOperatorError",
    "add",
    "count_digits",
    "divide",
    "multiply",
    "negate",
    "parse_operator",
    "percent",
    "stringify",
    "subtract",
    "truncate_digits",
    "validate_digit",
    "validate_significant_figures",
]

__version__ = "0.1.0"
