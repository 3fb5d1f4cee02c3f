"""Range checks applied before anything is encoded for the hardware."""

from typing import Any

from linnlights.exceptions import InvalidArgumentError


def require_in_range(field: str, value: Any, low: int, high: int) -> int:
    """
    Return value as an int if it lies within [low, high].

    Booleans are rejected even though they are ints in Python.

    Raises:
        InvalidArgumentError: If value is not an integer in range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(field, value, f"an integer from {low} to {high}")
    if not low <= value <= high:
        raise InvalidArgumentError(field, value, f"an integer from {low} to {high}")
    return int(value)
