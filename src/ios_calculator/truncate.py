"""Digit-counting string truncation."""

DIGITS = frozenset("0123456789")


def count_digits(text: str) -> int:
    """Count the characters of text that are ASCII digits."""
    return sum(1 for char in text if char in DIGITS)


def truncate_digits(text: str, max_count: int) -> str:
    """
    Cut text just after its max_count-th digit.

    Signs, separators and decimal points before the cut are kept; nothing
    is rounded. Text with max_count digits or fewer is returned unchanged.

    Example:
        >>> truncate_digits("1,234.5", 3)
        '1,23'
        >>> truncate_digits("-1.234", 2)
        '-1.2'
    """
    count = 0
    for index, char in enumerate(text):
        if char in DIGITS:
            count += 1
            if count >= max_count:
                return text[: index + 1]
    return text
