"""Argument validation for values entering the engine."""

from ios_calculator.exceptions import InvalidInputError, OutOfRangeError

# A float carries at most 17 significant decimal digits
MIN_SIGNIFICANT_FIGURES = 1
MAX_SIGNIFICANT_FIGURES = 17


def validate_digit(value: int) -> int:
    """
    Validate a digit key value.

    Keys are normally 0-9, but any non-negative integer is accepted and
    entered as its decimal text.

    Args:
        value: The key value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(value, f"Expected integer digit, got {type(value).__name__}")

    if value < 0:
        raise InvalidInputError(value, "Digit must be non-negative")

    return value


def validate_significant_figures(value: int | None) -> int | None:
    """
    Validate a significant-figure limit.

    Args:
        value: The limit, or None for no limit

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an integer
        OutOfRangeError: If value is outside [1, 17]
    """
    if value is None:
        return value

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(
            value, f"Expected integer significant figures, got {type(value).__name__}"
        )

    if not MIN_SIGNIFICANT_FIGURES <= value <= MAX_SIGNIFICANT_FIGURES:
        raise OutOfRangeError(value, MIN_SIGNIFICANT_FIGURES, MAX_SIGNIFICANT_FIGURES)

    return value
