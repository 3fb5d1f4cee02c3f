"""CLI commands for linnlights."""

from .config import config
from .lights import clear_cmd, color_cmd, fill_cmd, save_cmd
from .midi import midi_group
from .pattern import pattern_group

__all__ = [
    "clear_cmd",
    "color_cmd",
    "config",
    "fill_cmd",
    "midi_group",
    "pattern_group",
    "save_cmd",
]
