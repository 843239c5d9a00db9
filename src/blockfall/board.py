"""Board representation for the playfield.

The board is the immutable set of settled cells.  Every operation returns a new
``Board``; nothing mutates an existing instance.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, Iterable

import numpy as np
from numpy.typing import NDArray

from .geometry import GridCoordinate, GridSize
from .shapes import COLOR_VALUES, BlockColor


# Dimensions of a 200x400 px surface with 20 px cells.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]


def create_empty_grid(size: GridSize) -> Grid:
    """Return a new empty ``(height, width)`` grid filled with zeros."""

    return np.zeros((size.height, size.width), dtype=np.uint8)


@dataclass(frozen=True)
class StaticCell:
    """A settled cell that is no longer under player control."""

    position: GridCoordinate
    color: BlockColor


@dataclass(frozen=True)
class Board:
    """Set of settled cells on a playfield of ``size``."""

    size: GridSize = GridSize(WIDTH, HEIGHT)
    cells: FrozenSet[StaticCell] = field(default_factory=frozenset)

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def positions(self) -> FrozenSet[GridCoordinate]:
        """Return the occupied coordinates."""

        return frozenset(cell.position for cell in self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def complete_rows(self) -> FrozenSet[int]:
        """Return the indices of rows holding ``width`` settled cells."""

        counts = Counter(cell.position.y for cell in self.cells)
        return frozenset(row for row, count in counts.items() if count == self.width)

    def clear_rows(self, rows: AbstractSet[int]) -> "Board":
        """Remove ``rows`` and let the cells above them fall.

        Each surviving cell moves down by the number of cleared rows lying
        strictly below it, which keeps the vertical order of every column.
        """

        if not rows:
            return self
        ordered = sorted(rows)
        survivors = set()
        for cell in self.cells:
            y = cell.position.y
            if y in rows:
                continue
            drop = sum(1 for row in ordered if row > y)
            survivors.add(
                StaticCell(GridCoordinate(cell.position.x, y + drop), cell.color)
            )
        return Board(self.size, frozenset(survivors))

    def merge(self, cells: Iterable[StaticCell]) -> "Board":
        """Return a board with ``cells`` added.

        Raises:
            ValueError: If any of ``cells`` lands on an occupied position.
        """

        incoming = frozenset(cells)
        occupied = self.positions
        incoming_positions = [cell.position for cell in incoming]
        if len(set(incoming_positions)) != len(incoming_positions) or any(
            pos in occupied for pos in incoming_positions
        ):
            raise ValueError("Merged cells overlap settled cells")
        return Board(self.size, self.cells | incoming)

    def to_grid(self) -> Grid:
        """Return a ``(height, width)`` array of colour values (0 is empty)."""

        grid = create_empty_grid(self.size)
        for cell in self.cells:
            x, y = cell.position
            if 0 <= y < self.height and 0 <= x < self.width:
                grid[y, x] = COLOR_VALUES[cell.color]
        return grid


__all__ = ["Board", "StaticCell", "Grid", "WIDTH", "HEIGHT", "create_empty_grid"]
