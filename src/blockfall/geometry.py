"""Grid coordinates and the pure transforms applied to them.

Coordinates use screen orientation: ``x`` grows to the right, ``y`` grows
downward and the origin is the top-left cell of the playfield.
"""

from __future__ import annotations

from typing import AbstractSet, NamedTuple, Sequence, Tuple

# 2x2 integer matrix stored row-major.
Matrix = Tuple[Tuple[int, int], Tuple[int, int]]


class GridCoordinate(NamedTuple):
    """Address of a single cell on the grid."""

    x: int
    y: int


class GridSize(NamedTuple):
    """Playfield dimensions in cells."""

    width: int
    height: int


ORIGIN = GridCoordinate(0, 0)


def up(cell: GridCoordinate) -> GridCoordinate:
    return GridCoordinate(cell.x, cell.y - 1)


def down(cell: GridCoordinate) -> GridCoordinate:
    return GridCoordinate(cell.x, cell.y + 1)


def left(cell: GridCoordinate) -> GridCoordinate:
    return GridCoordinate(cell.x - 1, cell.y)


def right(cell: GridCoordinate) -> GridCoordinate:
    return GridCoordinate(cell.x + 1, cell.y)


def relative_to(cell: GridCoordinate, center: GridCoordinate) -> GridCoordinate:
    """Return ``cell`` expressed as an offset from ``center``."""

    return GridCoordinate(cell.x - center.x, cell.y - center.y)


def translated(cell: GridCoordinate, delta: GridCoordinate) -> GridCoordinate:
    """Return ``cell`` shifted by ``delta``."""

    return GridCoordinate(cell.x + delta.x, cell.y + delta.y)


def rotated_about(
    cell: GridCoordinate, matrix: Matrix, center: GridCoordinate
) -> GridCoordinate:
    """Rotate ``cell`` about ``center`` using ``matrix``.

    Computes ``M · (cell - center) + center`` with integer arithmetic so the
    result is exact for any number of successive rotations.
    """

    rel = relative_to(cell, center)
    (a, b), (c, d) = matrix
    return GridCoordinate(a * rel.x + b * rel.y + center.x, c * rel.x + d * rel.y + center.y)


def shifted_all(
    cells: Sequence[GridCoordinate], delta: GridCoordinate
) -> Tuple[GridCoordinate, ...]:
    """Translate every coordinate in ``cells`` by ``delta`` keeping order."""

    return tuple(translated(cell, delta) for cell in cells)


def is_out_of_bounds_top(cell: GridCoordinate) -> bool:
    return cell.y < 0


def is_out_of_bounds_left(cell: GridCoordinate) -> bool:
    return cell.x < 0


def is_out_of_bounds(cell: GridCoordinate, size: GridSize) -> bool:
    """Return ``True`` if ``cell`` lies outside a playfield of ``size``."""

    return (
        is_out_of_bounds_left(cell)
        or is_out_of_bounds_top(cell)
        or cell.x >= size.width
        or cell.y >= size.height
    )


def is_occupied(cell: GridCoordinate, occupied: AbstractSet[GridCoordinate]) -> bool:
    return cell in occupied


__all__ = [
    "GridCoordinate",
    "GridSize",
    "Matrix",
    "ORIGIN",
    "up",
    "down",
    "left",
    "right",
    "relative_to",
    "translated",
    "rotated_about",
    "shifted_all",
    "is_out_of_bounds_top",
    "is_out_of_bounds_left",
    "is_out_of_bounds",
    "is_occupied",
]
