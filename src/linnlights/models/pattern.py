"""Light pattern model: one color code for every play pad."""

from collections.abc import Iterator
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from linnlights.utils.persistence import PydanticPersistence
from linnlights.utils.validation import require_in_range

from .coordinate import NUM_COLUMNS, NUM_ROWS, GridCoordinate
from .enums import MAX_COLOR_CODE, LinnColor


def _blank_cells() -> list[list[int]]:
    return [[int(LinnColor.DEFAULT)] * NUM_COLUMNS for _ in range(NUM_ROWS)]


class LightPattern(BaseModel):
    """
    A full LinnStrument light pattern.

    `cells[row][column]` holds the color code for that pad, with row 0
    at the bottom, matching GridCoordinate.
    """

    name: str = Field(default="Untitled", description="Pattern name")
    cells: list[list[int]] = Field(
        default_factory=_blank_cells,
        description="8 rows of 25 color codes (0-11), bottom row first",
    )

    @field_validator("cells")
    @classmethod
    def validate_cells(cls, cells: list[list[int]]) -> list[list[int]]:
        """Ensure the grid is exactly 8x25 and every color is 0-11."""
        if len(cells) != NUM_ROWS:
            raise ValueError(f"pattern must have {NUM_ROWS} rows, got {len(cells)}")
        for row_index, row in enumerate(cells):
            if len(row) != NUM_COLUMNS:
                raise ValueError(
                    f"row {row_index} must have {NUM_COLUMNS} columns, got {len(row)}"
                )
            for color in row:
                if not 0 <= color <= MAX_COLOR_CODE:
                    raise ValueError(f"color {color} in row {row_index} is not 0-11")
        return cells

    @classmethod
    def filled(cls, color: int, name: str = "Untitled") -> "LightPattern":
        """Create a pattern with every pad set to one color."""
        color = require_in_range("color", color, 0, MAX_COLOR_CODE)
        return cls(name=name, cells=[[color] * NUM_COLUMNS for _ in range(NUM_ROWS)])

    def get(self, row: int, column: int) -> int:
        """Get the color code at a pad."""
        coord = GridCoordinate.at(row, column)
        return self.cells[coord.row][coord.column]

    def set(self, row: int, column: int, color: int) -> None:
        """Set the color code at a pad."""
        coord = GridCoordinate.at(row, column)
        self.cells[coord.row][coord.column] = require_in_range("color", color, 0, MAX_COLOR_CODE)

    def iter_cells(self) -> Iterator[tuple[GridCoordinate, int]]:
        """Yield (coordinate, color) for every pad, bottom row first."""
        for coord in GridCoordinate.all():
            yield coord, self.cells[coord.row][coord.column]

    @classmethod
    def load(cls, path: Path) -> "LightPattern":
        """Load a pattern from a JSON file."""
        return PydanticPersistence.load_json(path, cls)

    def save(self, path: Path) -> None:
        """Save the pattern to a JSON file."""
        PydanticPersistence.save_json(self, path)
