"""
Binary arithmetic with IEEE-754 semantics.

Nothing here raises: overflow yields infinity and division by zero yields a
signed infinity or NaN, which the display layer renders as-is.
"""

import math


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a
    """
    return a + b


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Identity: subtract(a, 0) == a
        - Self-inverse: subtract(a, a) == 0 (for finite a)
    """
    return a - b


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
    """
    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Python raises ZeroDivisionError for float division by zero, so the
    IEEE-754 result is produced explicitly:

        - divide(a, 0) is +/-inf, signed by both a and the zero
        - divide(0, 0) and divide(nan, 0) are nan

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b
    """
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)

    return a / b


def percent(value: float) -> float:
    """Convert value to a fraction of one hundred."""
    return value / 100


def negate(value: float) -> float:
    """Flip the sign of value, including the sign of zero."""
    return value * -1
