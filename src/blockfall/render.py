"""Rendering boundary.

The core never draws.  A renderer implements :class:`RenderSink` and
:func:`render_frame` drives it once per frame with every settled and active
cell.  :func:`render_grid` offers the same frame as a numpy array for
renderers that prefer a single 2D grid.
"""

from __future__ import annotations

from typing import List, Protocol

from .board import Grid, StaticCell
from .game_state import GameState
from .geometry import GridCoordinate
from .shapes import COLOR_VALUES, BlockColor


class RenderSink(Protocol):
    def clear_surface(self) -> None:
        ...

    def draw_cell(self, position: GridCoordinate, color: BlockColor) -> None:
        ...


def frame_cells(state: GameState) -> List[StaticCell]:
    """Return the cells to draw for ``state`` ordered top to bottom, left to right."""

    return sorted(state.cells(), key=lambda cell: (cell.position.y, cell.position.x))


def render_frame(state: GameState, sink: RenderSink) -> None:
    """Clear ``sink`` and draw every cell of ``state`` onto it."""

    sink.clear_surface()
    for cell in frame_cells(state):
        sink.draw_cell(cell.position, cell.color)


def render_grid(state: GameState) -> Grid:
    """Return a copy of the board grid with the active piece overlaid.

    The board itself is left untouched.  Active cells outside the playfield are
    skipped.
    """

    grid = state.board.to_grid()
    if state.active is not None:
        value = COLOR_VALUES[state.active.color]
        for x, y in state.active.occupied_cells():
            if 0 <= y < state.board.height and 0 <= x < state.board.width:
                grid[y, x] = value
    return grid


def format_grid(grid: Grid) -> str:
    """Return an ASCII picture of ``grid`` with ``#`` for filled cells."""

    return "\n".join("".join("#" if cell else "." for cell in row) for row in grid)


__all__ = ["RenderSink", "frame_cells", "render_frame", "render_grid", "format_grid"]
