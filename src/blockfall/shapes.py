"""Shape catalog for the falling pieces.

The game uses a reduced set of four tetrominoes: two S/Z-like shapes and two
J/L-like shapes.  Each template lists its cells in a fixed order together with
the cell it rotates about.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .geometry import GridCoordinate as C


class BlockColor(str, Enum):
    """Colour of a piece; the value doubles as a CSS/pygame colour name."""

    PINK = "pink"
    RED = "red"
    BLUE = "blue"
    GREEN = "green"


# Integer stored in grid snapshots for each colour.  ``0`` means empty.
COLOR_VALUES: Dict[BlockColor, int] = {color: i + 1 for i, color in enumerate(BlockColor)}


@dataclass(frozen=True)
class ShapeTemplate:
    """Canonical definition of a piece independent of where it is placed."""

    cells: Tuple[C, ...]
    center: C
    color: BlockColor

    def __post_init__(self) -> None:
        if len(self.cells) != 4:
            raise ValueError(f"A shape needs exactly 4 cells, got {len(self.cells)}")


SHAPE_TEMPLATES: Tuple[ShapeTemplate, ...] = (
    # .##
    # ##.
    ShapeTemplate(cells=(C(0, 1), C(1, 1), C(1, 0), C(2, 0)), center=C(1, 1), color=BlockColor.PINK),
    # ##.
    # .##
    ShapeTemplate(cells=(C(0, 0), C(1, 0), C(1, 1), C(2, 1)), center=C(1, 0), color=BlockColor.RED),
    # ##
    # .#
    # .#
    ShapeTemplate(cells=(C(0, 0), C(1, 0), C(1, 1), C(1, 2)), center=C(1, 1), color=BlockColor.BLUE),
    # ##
    # #.
    # #.
    ShapeTemplate(cells=(C(1, 0), C(0, 0), C(0, 1), C(0, 2)), center=C(1, 1), color=BlockColor.GREEN),
)


__all__ = ["BlockColor", "COLOR_VALUES", "ShapeTemplate", "SHAPE_TEMPLATES"]
