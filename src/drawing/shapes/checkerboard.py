"""Alternating checkerboard of filled rectangles.

The bounds are split into a ``rows`` x ``columns`` grid and cell (r, c) is
filled when r + c is even, so the top-left cell is always filled. A grid
with no rows or no columns has nothing to draw and yields an empty path.
"""

from dataclasses import dataclass
from typing import List, Tuple
import logging

from ..errors import require_integer
from ..geometry import Path, PathBuilder, Rect
from .base import ShapeGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckerboardGenerator(ShapeGenerator):
    """Grid of alternating filled cells."""
    rows: int = 4
    columns: int = 4

    def __post_init__(self):
        object.__setattr__(self, "rows", require_integer("rows", self.rows, minimum=0))
        object.__setattr__(self, "columns", require_integer("columns", self.columns, minimum=0))

    def filled_cells(self) -> List[Tuple[int, int]]:
        """(row, column) of every filled cell, row-major."""
        return [
            (row, column)
            for row in range(self.rows)
            for column in range(self.columns)
            if (row + column) % 2 == 0
        ]

    @property
    def filled_count(self) -> int:
        """Number of filled cells: ceil(rows * columns / 2)."""
        return (self.rows * self.columns + 1) // 2

    def cell_rect(self, bounds: Rect, row: int, column: int) -> Rect:
        row_size = bounds.height / self.rows
        column_size = bounds.width / self.columns
        return Rect(
            column_size * column,
            row_size * row,
            column_size,
            row_size,
        )

    def path(self, bounds: Rect) -> Path:
        if self.rows == 0 or self.columns == 0:
            logger.debug("Checkerboard %dx%d is empty", self.rows, self.columns)
            return Path()

        builder = PathBuilder()
        for row, column in self.filled_cells():
            builder.add_rect(self.cell_rect(bounds, row, column))

        return builder.build()
