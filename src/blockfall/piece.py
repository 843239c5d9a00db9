"""The active, player-controlled piece."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, Tuple

from . import geometry
from .board import Board, StaticCell
from .geometry import ORIGIN, GridCoordinate
from .rotation import IDENTITY, Orientation, next_orientation
from .shapes import BlockColor, ShapeTemplate


@dataclass(frozen=True)
class ActivePiece:
    """Falling piece: a template placed at ``anchor`` in ``orientation``.

    Every transform returns a new piece; callers decide whether to keep it by
    checking :meth:`is_invalid` against the board.
    """

    template: ShapeTemplate
    anchor: GridCoordinate = ORIGIN
    orientation: Orientation = IDENTITY

    @property
    def color(self) -> BlockColor:
        return self.template.color

    def occupied_cells(self) -> Tuple[GridCoordinate, ...]:
        """Return the board cells covered by the piece, in template order."""

        center = self.template.center
        return tuple(
            geometry.translated(
                geometry.rotated_about(cell, self.orientation, center), self.anchor
            )
            for cell in self.template.cells
        )

    def static_cells(self) -> FrozenSet[StaticCell]:
        """Return the piece's cells as settled cells of its colour."""

        return frozenset(StaticCell(cell, self.color) for cell in self.occupied_cells())

    def dropped(self) -> "ActivePiece":
        return replace(self, anchor=geometry.down(self.anchor))

    def moved_up(self) -> "ActivePiece":
        return replace(self, anchor=geometry.up(self.anchor))

    def moved_left(self) -> "ActivePiece":
        return replace(self, anchor=geometry.left(self.anchor))

    def moved_right(self) -> "ActivePiece":
        return replace(self, anchor=geometry.right(self.anchor))

    def rotated(self) -> "ActivePiece":
        """Advance the orientation by one quarter turn."""

        return replace(self, orientation=next_orientation(self.orientation))

    def is_invalid(self, board: Board) -> bool:
        """Return ``True`` if any cell is off the board or already settled."""

        occupied = board.positions
        return any(
            geometry.is_out_of_bounds(cell, board.size)
            or geometry.is_occupied(cell, occupied)
            for cell in self.occupied_cells()
        )


__all__ = ["ActivePiece"]
