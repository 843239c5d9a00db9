import numpy as np
import pytest

from blockfall.board import Board, StaticCell
from blockfall.geometry import GridCoordinate as C, GridSize
from blockfall.shapes import COLOR_VALUES, BlockColor


def cells(*positions, color=BlockColor.RED):
    return frozenset(StaticCell(C(x, y), color) for x, y in positions)


def test_complete_rows_counts_full_width_only():
    size = GridSize(3, 4)
    board = Board(size, cells((0, 3), (1, 3), (2, 3), (0, 2), (1, 2)))
    assert board.complete_rows() == {3}
    assert Board(size).complete_rows() == frozenset()


def test_clear_rows_applies_gravity():
    size = GridSize(3, 4)
    full_rows = [(x, y) for y in (1, 3) for x in range(3)]
    board = Board(size, cells(*full_rows, (0, 0), (1, 2)))
    rows = board.complete_rows()
    assert rows == {1, 3}

    cleared = board.clear_rows(rows)

    assert cleared.positions == {C(0, 2), C(1, 3)}
    assert len(cleared) == len(board) - size.width * len(rows)


def test_clear_rows_preserves_column_order_and_colours():
    size = GridSize(2, 5)
    board = Board(
        size,
        cells((0, 1), color=BlockColor.PINK)
        | cells((0, 2), color=BlockColor.BLUE)
        | cells((0, 4), (1, 4)),
    )
    cleared = board.clear_rows(board.complete_rows())
    assert StaticCell(C(0, 2), BlockColor.PINK) in cleared.cells
    assert StaticCell(C(0, 3), BlockColor.BLUE) in cleared.cells
    assert len(cleared) == 2


def test_clear_rows_without_rows_returns_same_board():
    board = Board(GridSize(3, 3), cells((0, 0)))
    assert board.clear_rows(frozenset()) is board


def test_merge_adds_cells_and_rejects_overlap():
    board = Board(GridSize(3, 3), cells((0, 0)))
    merged = board.merge(cells((1, 0), (2, 0)))
    assert merged.positions == {C(0, 0), C(1, 0), C(2, 0)}
    # The original board is not modified
    assert board.positions == {C(0, 0)}
    with pytest.raises(ValueError):
        merged.merge(cells((0, 0), color=BlockColor.GREEN))


def test_to_grid_uses_colour_values():
    board = Board(GridSize(3, 2), cells((2, 1), color=BlockColor.BLUE))
    grid = board.to_grid()
    assert grid.shape == (2, 3)
    assert grid.dtype == np.uint8
    assert grid[1, 2] == COLOR_VALUES[BlockColor.BLUE]
    assert int(grid.sum()) == COLOR_VALUES[BlockColor.BLUE]
