import random

from blockfall.board import Board, StaticCell
from blockfall.geometry import GridCoordinate as C, GridSize
from blockfall.piece import ActivePiece
from blockfall.rotation import IDENTITY, ORIENTATIONS
from blockfall.shapes import SHAPE_TEMPLATES, BlockColor, ShapeTemplate
from blockfall.spawner import (
    Spawner,
    enumerate_legal_placements,
    horizontal_placements,
    justified,
)

PINK = SHAPE_TEMPLATES[0]
SIZE = GridSize(10, 20)


def test_justified_moves_cells_down_then_right_keeping_center():
    template = ShapeTemplate(
        cells=(C(-2, -1), C(-1, -1), C(-1, 0), C(0, 0)), center=C(-1, 0), color=BlockColor.RED
    )
    result = justified(template)
    assert result.cells == (C(0, 0), C(1, 0), C(1, 1), C(2, 1))
    assert result.center == C(-1, 0)


def test_red_quarter_turn_keeps_declared_pivot():
    red = SHAPE_TEMPLATES[1]
    placements = enumerate_legal_placements(Board(SIZE), [red])
    wall = next(p for p in placements if set(p.cells) == {C(1, 0), C(1, 1), C(0, 1), C(0, 2)})
    assert wall.center == C(1, 0)
    # Rightward steps carry the pivot along
    shifted = next(p for p in placements if set(p.cells) == {C(2, 0), C(2, 1), C(1, 1), C(1, 2)})
    assert shifted.center == C(2, 0)


def test_justified_leaves_in_bounds_shape_alone():
    assert justified(PINK) == PINK


def test_horizontal_placements_step_right_until_out_of_bounds():
    placements = horizontal_placements(PINK, SIZE)
    assert len(placements) == 8
    assert placements[0] == PINK
    assert max(cell.x for cell in placements[-1].cells) == SIZE.width - 1
    assert placements[-1].center == C(8, 1)


def test_enumeration_is_deterministic_and_deduplicated():
    board = Board(SIZE)
    first = enumerate_legal_placements(board, [PINK])
    second = enumerate_legal_placements(board, [PINK])
    assert first == second
    # 8 + 8 + 8 + 9 (orientation, shift) pairs; the quarter and three-quarter
    # turns overlap on 8 cell sets.
    assert len(first) == 25
    keys = {frozenset(p.cells) for p in first}
    assert len(keys) == len(first)
    assert first[0] == PINK


def test_every_placement_is_a_valid_spawn():
    board = Board(SIZE)
    placements = enumerate_legal_placements(board)
    assert {p.color for p in placements} == set(BlockColor)
    for placement in placements:
        piece = ActivePiece(placement)
        assert piece.orientation == IDENTITY
        assert piece.occupied_cells() == placement.cells
        assert not piece.is_invalid(board)


def test_placements_avoid_settled_cells():
    blocked = frozenset(StaticCell(C(x, 0), BlockColor.RED) for x in range(0, 10, 3))
    board = Board(SIZE, blocked)
    placements = enumerate_legal_placements(board)
    assert placements
    for placement in placements:
        assert not set(placement.cells) & board.positions


def test_spawn_returns_none_when_nothing_fits():
    size = GridSize(4, 4)
    # Free cells in columns 1 and 3 never touch horizontally
    board = Board(
        size,
        frozenset(StaticCell(C(x, y), BlockColor.RED) for x in (0, 2) for y in range(4)),
    )
    assert enumerate_legal_placements(board) == []
    assert Spawner(seed=1).spawn(board) is None


def test_spawn_on_tiny_grid_is_exhausted():
    assert Spawner(seed=0).spawn(Board(GridSize(2, 2))) is None


def test_spawn_is_reproducible_with_seed():
    board = Board(SIZE)
    a = [Spawner(seed=7).spawn(board) for _ in range(3)]
    b = [Spawner(seed=7).spawn(board) for _ in range(3)]
    assert a == b


def test_spawner_uses_given_rng():
    class FirstPlacement(random.Random):
        def choice(self, seq):
            return seq[0]

    piece = Spawner(rng=FirstPlacement()).spawn(Board(SIZE))
    assert piece == ActivePiece(PINK)


def test_orientation_table_has_four_entries():
    assert len(ORIENTATIONS) == 4
