"""
Translation of library errors into linnlights errors.

Each layer translates errors to be more useful at the next level up:

```
USER LAYER (CLI, notifier)  shows user_message + recovery_hint
        ↑ LinnLightsError
WRAPPERS (this module)      classifies the error, adds hints
        ↑ pydantic.ValidationError, ImportError, OSError, ...
LOW LEVEL (pydantic, mido)  raises library exceptions
```
"""

from typing import Optional

from .base import LinnLightsError
from .config import ConfigFileInvalidError, ConfigValidationError
from .device import DeviceAccessUnavailableError, DeviceError

# Substrings that show up when the MIDI backend itself is unusable
_ACCESS_ERROR_MARKERS = (
    "no module named",
    "rtmidi",
    "backend",
    "permission denied",
    "alsa",
    "coremidi",
    "jack",
)


def wrap_pydantic_error(error: Exception, file_path: str) -> LinnLightsError:
    """
    Convert Pydantic validation errors to linnlights exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the file that failed validation

    Returns:
        A ConfigurationError subclass with a user-friendly message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg
        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input'),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path
            )

    return ConfigValidationError(field="unknown", value=None, error_msg=error_msg, file_path=file_path)


def wrap_midi_error(error: Exception, device_name: Optional[str] = None) -> DeviceError:
    """
    Convert low-level MIDI backend errors to linnlights exceptions.

    Errors that mean the backend cannot be used at all (missing python-rtmidi,
    no ALSA sequencer, permission denied) become DeviceAccessUnavailableError.

    Args:
        error: The original exception from mido or its backend
        device_name: The port name involved in the error

    Returns:
        A DeviceError with appropriate type and message
    """
    error_msg = str(error) or type(error).__name__

    if isinstance(error, (ImportError, PermissionError)):
        return DeviceAccessUnavailableError(device_name, original_error=error_msg)

    if any(marker in error_msg.lower() for marker in _ACCESS_ERROR_MARKERS):
        return DeviceAccessUnavailableError(device_name, original_error=error_msg)

    return DeviceError(
        user_message=f"MIDI error: {error_msg}",
        technical_message=f"MIDI error on {device_name!r}: {error_msg}",
        device_name=device_name,
        recoverable=True,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, LinnLightsError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
