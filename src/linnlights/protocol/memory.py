"""Commands for the custom light pattern memories (Scale Select A, A#, B)."""

from linnlights.models import MAX_MEMORY_SLOT
from linnlights.utils.validation import require_in_range

from .constants import LinnControl
from .messages import ControlChangeMessage


class PersistenceCommands:
    """Build save/clear messages for a LinnStrument memory slot."""

    @staticmethod
    def encode_save(memory_slot: int) -> list[ControlChangeMessage]:
        """
        Save the light pattern currently loaded on the device to flash.

        Raises:
            InvalidArgumentError: If memory_slot is not 0, 1 or 2
        """
        slot = require_in_range("memory", memory_slot, 0, MAX_MEMORY_SLOT)
        return [ControlChangeMessage(control=LinnControl.SAVE_PATTERN, value=slot)]

    @staticmethod
    def encode_clear(memory_slot: int) -> list[ControlChangeMessage]:
        """
        Erase the custom light pattern stored in a memory slot.

        Raises:
            InvalidArgumentError: If memory_slot is not 0, 1 or 2
        """
        slot = require_in_range("memory", memory_slot, 0, MAX_MEMORY_SLOT)
        return [ControlChangeMessage(control=LinnControl.CLEAR_PATTERN, value=slot)]
