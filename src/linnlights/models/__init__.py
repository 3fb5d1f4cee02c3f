"""Data models for linnlights."""

from .config import DEFAULT_DEVICE_NAME, AppConfig
from .coordinate import NUM_COLUMNS, NUM_ROWS, GridCoordinate
from .enums import MAX_COLOR_CODE, MAX_MEMORY_SLOT, LinnColor, MemorySlot
from .pattern import LightPattern

__all__ = [
    "AppConfig",
    "DEFAULT_DEVICE_NAME",
    # Models
    "GridCoordinate",
    "LightPattern",
    # Enums
    "LinnColor",
    "MemorySlot",
    "MAX_COLOR_CODE",
    "MAX_MEMORY_SLOT",
    # Grid size
    "NUM_COLUMNS",
    "NUM_ROWS",
]
