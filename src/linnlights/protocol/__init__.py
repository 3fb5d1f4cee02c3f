"""LinnStrument light-control protocol: pure encoders, no I/O."""

from .constants import STATUS_CONTROL_CHANGE, LinnControl
from .encoder import ColorCommandEncoder
from .mapper import CoordinateMapper
from .memory import PersistenceCommands
from .messages import ControlChangeMessage

__all__ = [
    "ColorCommandEncoder",
    "ControlChangeMessage",
    "CoordinateMapper",
    "LinnControl",
    "PersistenceCommands",
    "STATUS_CONTROL_CHANGE",
]
