"""Pad coordinate mapping between user space and LinnStrument device space."""

from linnlights.models import NUM_COLUMNS, NUM_ROWS
from linnlights.utils.validation import require_in_range

from .constants import DEVICE_TOP_ROW


class CoordinateMapper:
    """
    Convert pad addresses between user space and device space.

    User space numbers play columns from 0 and rows from 0 (bottom).
    The device reserves column 0 for the control keys, so play columns
    start at 1, and its row numbering runs the other way:

    - device_row = 7 - row
    - device_column = column + 1
    """

    def to_device(self, row: int, column: int) -> tuple[int, int]:
        """
        Convert a user-space pad address to device space.

        Args:
            row: User row (0-7)
            column: User play column (0-24)

        Returns:
            (device_row, device_column) tuple

        Raises:
            InvalidArgumentError: If row or column is outside the grid

        Example:
            (0, 0) → (7, 1)
            (7, 24) → (0, 25)
        """
        row = require_in_range("row", row, 0, NUM_ROWS - 1)
        column = require_in_range("column", column, 0, NUM_COLUMNS - 1)
        return DEVICE_TOP_ROW - row, column + 1

    def to_user(self, device_row: int, device_column: int) -> tuple[int, int]:
        """
        Convert a device-space play pad back to (row, column).

        Raises:
            InvalidArgumentError: If the address is the control key column or off the grid
        """
        device_row = require_in_range("device row", device_row, 0, DEVICE_TOP_ROW)
        device_column = require_in_range("device column", device_column, 1, NUM_COLUMNS)
        return DEVICE_TOP_ROW - device_row, device_column - 1
