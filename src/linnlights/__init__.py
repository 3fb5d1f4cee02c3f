"""linnlights: program LinnStrument pad lights over MIDI."""

__version__ = "0.1.0"

from .lights import clear_colors, fill, save_colors, send_color, send_pattern
from .midi import DeviceLocator, LocateResult, LocateStatus, MidoTransport, OutputDevice, SendResult
from .models import GridCoordinate, LightPattern, LinnColor, MemorySlot
from .notifications import ConsoleNotifier, LoggingNotifier, Notifier

__all__ = [
    # Discovery
    "DeviceLocator",
    "LocateResult",
    "LocateStatus",
    "MidoTransport",
    "OutputDevice",
    "SendResult",
    # Commands
    "clear_colors",
    "fill",
    "save_colors",
    "send_color",
    "send_pattern",
    # Models
    "GridCoordinate",
    "LightPattern",
    "LinnColor",
    "MemorySlot",
    # Notifications
    "ConsoleNotifier",
    "LoggingNotifier",
    "Notifier",
]
