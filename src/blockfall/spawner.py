"""Spawn selection for new pieces.

Every template is tried in every orientation.  The rotated cells are pushed
down and right until none lies above or left of the board, which gives one
top/left-justified placement per orientation.  From there the shape is stepped
one column at a time to the right for as long as it stays on the board.  Any
placement overlapping settled cells is discarded and one of the remaining
placements is chosen uniformly at random.

Placements are deduplicated by colour and occupied cells, so orientations that
justify onto the same cells (shapes symmetric under a half turn) count once.
The chance of spawning a shape is therefore proportional to the number of
*distinct* positions it can take, not to the number of (orientation, column)
pairs tried.

Example usage
-------------

>>> from blockfall.board import Board
>>> from blockfall.spawner import Spawner
>>> spawner = Spawner(seed=0)
>>> piece = spawner.spawn(Board())
>>> piece is not None and not piece.is_invalid(Board())
True
"""

from __future__ import annotations

import logging
import random
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from . import geometry
from .board import Board
from .geometry import GridCoordinate, GridSize
from .piece import ActivePiece
from .rotation import ORIENTATIONS, Orientation
from .shapes import SHAPE_TEMPLATES, BlockColor, ShapeTemplate


LOGGER = logging.getLogger(__name__)

PlacementKey = Tuple[BlockColor, FrozenSet[GridCoordinate]]


def _rotated_template(template: ShapeTemplate, orientation: Orientation) -> ShapeTemplate:
    cells = tuple(
        geometry.rotated_about(cell, orientation, template.center) for cell in template.cells
    )
    return ShapeTemplate(cells, template.center, template.color)


def _shifted(template: ShapeTemplate, delta: GridCoordinate) -> ShapeTemplate:
    return ShapeTemplate(
        geometry.shifted_all(template.cells, delta),
        geometry.translated(template.center, delta),
        template.color,
    )


def justified(template: ShapeTemplate) -> ShapeTemplate:
    """Shift the cells of ``template`` down, then right, until none is above or left of the board.

    The rotation centre stays where the template declared it; only the
    rightward steps of :func:`horizontal_placements` move it.
    """

    cells = template.cells
    while True:
        if any(geometry.is_out_of_bounds_top(cell) for cell in cells):
            cells = geometry.shifted_all(cells, GridCoordinate(0, 1))
        elif any(geometry.is_out_of_bounds_left(cell) for cell in cells):
            cells = geometry.shifted_all(cells, GridCoordinate(1, 0))
        else:
            return ShapeTemplate(cells, template.center, template.color)


def horizontal_placements(template: ShapeTemplate, size: GridSize) -> List[ShapeTemplate]:
    """Return ``template`` and each rightward shift of it that stays in bounds."""

    placements: List[ShapeTemplate] = []
    while not any(geometry.is_out_of_bounds(cell, size) for cell in template.cells):
        placements.append(template)
        template = _shifted(template, GridCoordinate(1, 0))
    return placements


def enumerate_legal_placements(
    board: Board, templates: Sequence[ShapeTemplate] = SHAPE_TEMPLATES
) -> List[ShapeTemplate]:
    """Return every distinct collision-free spawn placement on ``board``.

    The returned templates hold board-relative cells, so a piece built from one
    with anchor ``(0, 0)`` and identity orientation sits exactly there.  The
    order is deterministic: templates in catalog order, then orientations in
    rotation order, then columns left to right.
    """

    occupied = board.positions
    found: Dict[PlacementKey, ShapeTemplate] = {}
    for template in templates:
        for orientation in ORIENTATIONS:
            base = justified(_rotated_template(template, orientation))
            for placement in horizontal_placements(base, board.size):
                if any(geometry.is_occupied(cell, occupied) for cell in placement.cells):
                    continue
                key = (placement.color, frozenset(placement.cells))
                found.setdefault(key, placement)
    return list(found.values())


class Spawner:
    """Pick a random legal placement for the next piece."""

    def __init__(
        self,
        templates: Sequence[ShapeTemplate] = SHAPE_TEMPLATES,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.templates = tuple(templates)
        self.rng = rng or random.Random(seed)

    def legal_placements(self, board: Board) -> List[ShapeTemplate]:
        return enumerate_legal_placements(board, self.templates)

    def spawn(self, board: Board) -> Optional[ActivePiece]:
        """Return a new piece for ``board`` or ``None`` when nothing fits."""

        placements = self.legal_placements(board)
        LOGGER.debug("Found %d legal placements", len(placements))
        if not placements:
            return None
        return ActivePiece(self.rng.choice(placements))


__all__ = [
    "Spawner",
    "enumerate_legal_placements",
    "horizontal_placements",
    "justified",
]
