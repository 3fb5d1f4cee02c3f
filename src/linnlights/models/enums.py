"""Enumerations for LinnStrument lighting."""

from enum import IntEnum

from linnlights.exceptions import InvalidArgumentError


class LinnColor(IntEnum):
    """LinnStrument note pad colors, as sent with CC22."""

    DEFAULT = 0  # As set in Note Lights settings
    RED = 1
    YELLOW = 2
    GREEN = 3
    CYAN = 4
    BLUE = 5
    MAGENTA = 6
    OFF = 7
    WHITE = 8
    ORANGE = 9
    LIME = 10
    PINK = 11

    @classmethod
    def parse(cls, text: str) -> "LinnColor":
        """
        Parse a color name ("red", "Lime") or code ("3").

        Raises:
            InvalidArgumentError: If text is neither a known name nor 0-11
        """
        value = text.strip()
        if value.isdigit():
            try:
                return cls(int(value))
            except ValueError:
                raise InvalidArgumentError("color", text, "a color name or a number from 0 to 11") from None
        try:
            return cls[value.upper()]
        except KeyError:
            raise InvalidArgumentError("color", text, "a color name or a number from 0 to 11") from None


class MemorySlot(IntEnum):
    """Scale Select memories that can hold a custom light pattern."""

    A = 0
    A_SHARP = 1
    B = 2

    @property
    def label(self) -> str:
        """Name as printed on the LinnStrument ("A", "A#", "B")."""
        return self.name.replace("_SHARP", "#")

    @classmethod
    def parse(cls, text: str) -> "MemorySlot":
        """
        Parse a memory label ("A", "a#", "B") or number ("0"-"2").

        Raises:
            InvalidArgumentError: If text does not name a memory
        """
        value = text.strip().upper()
        for slot in cls:
            if value in (slot.label, slot.name, str(slot.value)):
                return slot
        raise InvalidArgumentError("memory", text, "A, A#, B or 0-2")


MAX_COLOR_CODE = max(color.value for color in LinnColor)
MAX_MEMORY_SLOT = max(slot.value for slot in MemorySlot)
