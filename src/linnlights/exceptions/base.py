"""Root of the linnlights error hierarchy.

Every error speaks to two audiences. `user_message` and `recovery_hint`
are what a notifier or the CLI prints, one per line. `technical_message`
goes to the log and may name ports, bytes and backend errors.
"""

from typing import ClassVar, Optional

from linnlights.notifications import Severity


class LinnLightsError(Exception):
    """
    Base exception for all linnlights errors.

    Attributes:
        user_message: Short text shown to the user
        technical_message: Detail for the log (defaults to user_message)
        recoverable: True if the user can fix the cause and retry
        recovery_hint: What the user should do next, if anything
        severity: Notification severity used when the error is reported
    """

    severity: ClassVar[Severity] = "error"

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.user_message!r})"

    def get_full_message(self) -> str:
        """The lines a notifier shows: user message, then the hint."""
        return "\n".join(line for line in (self.user_message, self.recovery_hint) if line)
