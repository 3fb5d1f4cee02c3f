"""Color and memory commands for a located LinnStrument.

Each function encodes its command, then transmits the whole sequence
through the device's exclusive lane. Argument errors are raised before
anything is sent; transmission failures come back in the SendResult.
"""

import logging
from typing import Optional

from linnlights.midi import OutputDevice, SendResult
from linnlights.models import GridCoordinate, LightPattern, MemorySlot
from linnlights.protocol import ColorCommandEncoder, PersistenceCommands

logger = logging.getLogger(__name__)

_encoder = ColorCommandEncoder()


def send_color(device: OutputDevice, row: int, col: int, color: int) -> SendResult:
    """
    Light one pad.

    Args:
        device: Located LinnStrument
        row: Row (0-7, bottom to top)
        col: Play column (0-24, left to right)
        color: LinnColor code (0-11)

    Raises:
        InvalidArgumentError: If any argument is out of range
    """
    messages = _encoder.encode_color_set(GridCoordinate.at(row, col), color)
    result = device.send_sequence(messages)
    if not result:
        logger.warning(f"Failed to set pad ({row}, {col}) on {device.name}")
    return result


def save_colors(device: OutputDevice, memory: int) -> SendResult:
    """
    Save the light pattern currently shown on the device to memory A, A# or B.

    Raises:
        InvalidArgumentError: If memory is not 0, 1 or 2
    """
    result = device.send_sequence(PersistenceCommands.encode_save(memory))
    if result:
        logger.info(f"Saved light pattern to memory {MemorySlot(memory).label}")
    return result


def clear_colors(device: OutputDevice, memory: int) -> SendResult:
    """
    Clear the custom light pattern stored in memory A, A# or B.

    Raises:
        InvalidArgumentError: If memory is not 0, 1 or 2
    """
    result = device.send_sequence(PersistenceCommands.encode_clear(memory))
    if result:
        logger.info(f"Cleared light pattern in memory {MemorySlot(memory).label}")
    return result


def send_pattern(
    device: OutputDevice,
    pattern: LightPattern,
    save_to: Optional[int] = None,
) -> SendResult:
    """
    Send every pad of a pattern, optionally saving it to a memory afterwards.

    Stops at the first failed pad; nothing is saved if any pad failed.

    Args:
        device: Located LinnStrument
        pattern: Pattern to display
        save_to: Memory slot (0-2) to save into once all pads are sent

    Raises:
        InvalidArgumentError: If save_to is not a valid memory slot
    """
    save_messages = PersistenceCommands.encode_save(save_to) if save_to is not None else []

    result = SendResult(total=0, sent=0)
    for coord, color in pattern.iter_cells():
        result = result.merge(device.send_sequence(_encoder.encode_color_set(coord, color)))
        if result.error:
            logger.warning(f"Stopped sending {pattern.name!r} at pad ({coord.row}, {coord.column})")
            return result

    logger.info(f"Sent pattern {pattern.name!r} ({result.sent} messages) to {device.name}")

    if save_messages:
        result = result.merge(device.send_sequence(save_messages))
        if result:
            logger.info(f"Saved pattern {pattern.name!r} to memory {MemorySlot(save_to).label}")
    return result


def fill(device: OutputDevice, color: int) -> SendResult:
    """Set every play pad to one color."""
    return send_pattern(device, LightPattern.filled(color, name=f"fill {color}"))
