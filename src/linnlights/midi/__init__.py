"""MIDI device access: transport, discovery and the output device handle."""

from .device import OutputDevice, SendResult
from .locator import DeviceLocator, LocateResult, LocateStatus
from .transport import MidiTransport, MidoTransport

__all__ = [
    "DeviceLocator",
    "LocateResult",
    "LocateStatus",
    "MidiTransport",
    "MidoTransport",
    "OutputDevice",
    "SendResult",
]
