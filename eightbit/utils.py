"""Miscellaneous helpers and constants shared by the emulator."""

DEBUG = 0
"""Debug log level: 0 = none, 1 = important, 2 = all."""

FOUR_BITS_MAX = 15
"""Largest value that fits in four bits."""

_TOLERANCE = 0.000001


def debug_l1() -> bool:
    """Return True when the most important debug logs are enabled."""
    return DEBUG >= 1


def debug_l2() -> bool:
    """Return True when all debug logs are enabled."""
    return DEBUG >= 2


def to_4bits(value: int) -> str:
    """Return the low four bits of ``value`` as a binary string."""
    return format(value & FOUR_BITS_MAX, "04b")


def starts_with(string_to_check: str, value_to_look_for: str) -> bool:
    """Check whether the first string starts with the second; an empty prefix never matches."""
    if not value_to_look_for:
        return False
    return string_to_check.startswith(value_to_look_for)


def is_less_than(x: float, y: float) -> bool:
    """Check whether x is less than y, tolerating floating point rounding errors."""
    if x >= y:
        return False
    return abs(x - y) > _TOLERANCE


def equals(x: float, y: float) -> bool:
    """Check whether x is more or less equal to y, tolerating floating point rounding errors."""
    if x == y:
        return True
    return abs(x - y) <= _TOLERANCE