"""Device-related exceptions.

- DeviceError: Base class for MIDI device errors
- DeviceAccessUnavailableError: The MIDI backend could not be reached
- DeviceNotFoundError: No output port matches the expected device name
- SendFailureError: A message could not be handed to the output port
"""

from typing import Optional

from .base import LinnLightsError


class DeviceError(LinnLightsError):
    """MIDI device discovery or transmission failed."""

    def __init__(self, user_message: str, device_name: Optional[str] = None, **kwargs):
        """
        Initialize device error.

        Args:
            user_message: User-friendly error message
            device_name: The port name involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.device_name = device_name


class DeviceAccessUnavailableError(DeviceError):
    """MIDI access could not be obtained (missing backend, permission denied)."""

    def __init__(self, device_name: Optional[str] = None, original_error: Optional[str] = None):
        """
        Initialize access-unavailable error.

        Args:
            device_name: The device we were trying to reach
            original_error: The original error message from the MIDI backend
        """
        user_msg = "Could not find your LinnStrument"
        tech_msg = "MIDI access unavailable"
        if original_error:
            tech_msg += f": {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            device_name=device_name,
            recoverable=True,
            recovery_hint="Please restart the application and try again",
        )
        self.original_error = original_error


class DeviceNotFoundError(DeviceError):
    """MIDI access works but no output port has the expected name."""

    def __init__(self, device_name: str, available: Optional[list[str]] = None):
        """
        Initialize device-not-found error.

        Args:
            device_name: The exact port name that was searched for
            available: Output port names that were seen instead
        """
        available = available or []
        tech_msg = f"No MIDI output named {device_name!r} (available: {available})"

        super().__init__(
            user_message="Could not find your LinnStrument",
            technical_message=tech_msg,
            device_name=device_name,
            recoverable=True,
            recovery_hint="Please make sure it is connected and try again",
        )
        self.available = available


class SendFailureError(DeviceError):
    """The output port rejected a message."""

    def __init__(
        self,
        device_name: Optional[str],
        message: Optional[list[int]] = None,
        original_error: Optional[str] = None,
    ):
        """
        Initialize send failure.

        Args:
            device_name: Port the message was sent to
            message: Raw bytes of the message that failed
            original_error: The error raised by the port
        """
        user_msg = "Failed to send colors to your LinnStrument"
        tech_msg = f"Send to {device_name!r} failed"
        if message is not None:
            tech_msg += f" for {message}"
        if original_error:
            tech_msg += f": {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            device_name=device_name,
            recoverable=True,
            recovery_hint="Check the USB connection and run 'linnlights midi list'",
        )
        self.message = message
        self.original_error = original_error
