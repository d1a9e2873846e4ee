"""Small text helpers for command handling and chat messages."""

from collections.abc import Sequence

TICKS_PER_SECOND = 20

# Commands hand numbers on to the server, which stores them as 32-bit ints.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def ticks_to_seconds(ticks: float) -> str:
    """Seconds with one decimal digit, always using ``.`` as the separator.

    >>> ticks_to_seconds(30)
    '1.5'
    """
    return f"{ticks / TICKS_PER_SECOND:.1f}"


def format_percent(value: float) -> str:
    """Ratio as a percentage with two decimal digits.

    >>> format_percent(0.1234)
    '12.34%'
    """
    return f"{value:.2%}"


def build_string_after_nth_element(args: Sequence[str], index: int) -> str:
    """Join the arguments from ``index`` onwards with single spaces."""
    if index < 0:
        raise ValueError(f"index must not be negative: {index}")
    return " ".join(args[index:])


def is_int(string: str | None) -> bool:
    if not string or "_" in string or string != string.strip():
        return False
    try:
        value = int(string)
    except (TypeError, ValueError):
        return False
    return INT_MIN <= value <= INT_MAX


def is_double(string: str | None) -> bool:
    if not string or "_" in string:
        return False
    try:
        float(string)
    except (TypeError, ValueError):
        return False
    return True
