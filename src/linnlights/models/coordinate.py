"""Pad addressing in user space."""

from pydantic import BaseModel, ConfigDict, Field

from linnlights.utils.validation import require_in_range

NUM_ROWS = 8
NUM_COLUMNS = 25


class GridCoordinate(BaseModel):
    """
    Address of one play pad.

    Row 0 is the bottom row and column 0 is the leftmost play column
    (the control-key column is not addressable here).
    """

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, le=NUM_ROWS - 1, description="Row (0-7, bottom to top)")
    column: int = Field(ge=0, le=NUM_COLUMNS - 1, description="Play column (0-24, left to right)")

    @classmethod
    def at(cls, row: int, column: int) -> "GridCoordinate":
        """
        Create a coordinate, rejecting anything off the grid.

        Raises:
            InvalidArgumentError: If row or column is out of range
        """
        row = require_in_range("row", row, 0, NUM_ROWS - 1)
        column = require_in_range("column", column, 0, NUM_COLUMNS - 1)
        return cls(row=row, column=column)

    @classmethod
    def all(cls) -> list["GridCoordinate"]:
        """Every play pad, bottom row first, left to right."""
        return [cls(row=r, column=c) for r in range(NUM_ROWS) for c in range(NUM_COLUMNS)]
