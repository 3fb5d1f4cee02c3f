"""Argument validation exceptions."""

from typing import Any

from .base import LinnLightsError


class InvalidArgumentError(LinnLightsError):
    """A pad address, color code or memory slot is outside its valid range."""

    def __init__(self, field: str, value: Any, valid: str):
        """
        Initialize invalid argument error.

        Args:
            field: Name of the argument (e.g. "row")
            value: The rejected value
            valid: Human-readable description of the valid range
        """
        super().__init__(
            user_message=f"Invalid {field}: {value!r}",
            technical_message=f"Rejected {field}={value!r}, expected {valid}",
            recoverable=True,
            recovery_hint=f"{field.capitalize()} must be {valid}",
        )
        self.field = field
        self.value = value
        self.valid = valid
