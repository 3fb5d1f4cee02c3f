"""Shared utilities."""

from .persistence import PydanticPersistence
from .validation import require_in_range

__all__ = ["PydanticPersistence", "require_in_range"]
