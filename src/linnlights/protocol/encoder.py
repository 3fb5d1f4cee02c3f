"""Encoding of the three-message pad color sequence."""

import logging
from typing import Optional

from linnlights.models import MAX_COLOR_CODE, GridCoordinate
from linnlights.utils.validation import require_in_range

from .constants import LinnControl
from .mapper import CoordinateMapper
from .messages import ControlChangeMessage

logger = logging.getLogger(__name__)


class ColorCommandEncoder:
    """
    Build the Control Change sequence that colors one pad.

    The order is fixed: CC20 and CC21 select the pad, then CC22 applies
    the color to whatever pad is currently selected on the device.
    """

    def __init__(self, mapper: Optional[CoordinateMapper] = None):
        self.mapper = mapper or CoordinateMapper()

    def encode_color_set(self, coordinate: GridCoordinate, color_code: int) -> list[ControlChangeMessage]:
        """
        Encode a color change for one pad.

        Args:
            coordinate: Pad to color (user space)
            color_code: LinnColor code (0-11)

        Returns:
            [CC20 column, CC21 row, CC22 color]

        Raises:
            InvalidArgumentError: If the color code or coordinate is out of range
        """
        color_code = require_in_range("color", color_code, 0, MAX_COLOR_CODE)
        device_row, device_column = self.mapper.to_device(coordinate.row, coordinate.column)

        messages = [
            ControlChangeMessage(control=LinnControl.SELECT_COLUMN, value=device_column),
            ControlChangeMessage(control=LinnControl.SELECT_ROW, value=device_row),
            ControlChangeMessage(control=LinnControl.APPLY_COLOR, value=color_code),
        ]
        logger.debug(f"Encoded pad ({coordinate.row}, {coordinate.column}) color {color_code}")
        return messages
