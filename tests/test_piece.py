from blockfall.board import Board, StaticCell
from blockfall.geometry import GridCoordinate as C, GridSize
from blockfall.piece import ActivePiece
from blockfall.rotation import IDENTITY
from blockfall.shapes import SHAPE_TEMPLATES, BlockColor

PINK = SHAPE_TEMPLATES[0]


def test_occupied_cells_follow_template_order():
    piece = ActivePiece(PINK)
    assert piece.occupied_cells() == PINK.cells
    moved = ActivePiece(PINK, anchor=C(3, 5))
    assert moved.occupied_cells() == (C(3, 6), C(4, 6), C(4, 5), C(5, 5))


def test_rotation_is_about_template_center():
    piece = ActivePiece(PINK).rotated()
    assert piece.anchor == C(0, 0)
    assert piece.occupied_cells() == (C(1, 0), C(1, 1), C(2, 1), C(2, 2))


def test_four_rotations_restore_piece():
    piece = ActivePiece(PINK, anchor=C(2, 3))
    rotated = piece
    for _ in range(4):
        rotated = rotated.rotated()
    assert rotated == piece
    assert rotated.orientation == IDENTITY


def test_moves_shift_anchor_only():
    piece = ActivePiece(PINK, anchor=C(2, 2))
    assert piece.dropped().anchor == C(2, 3)
    assert piece.moved_up().anchor == C(2, 1)
    assert piece.moved_left().anchor == C(1, 2)
    assert piece.moved_right().anchor == C(3, 2)
    assert piece.anchor == C(2, 2)


def test_is_invalid_out_of_bounds():
    board = Board(GridSize(10, 20))
    assert not ActivePiece(PINK).is_invalid(board)
    assert ActivePiece(PINK, anchor=C(-1, 0)).is_invalid(board)
    assert ActivePiece(PINK, anchor=C(0, -1)).is_invalid(board)
    assert ActivePiece(PINK, anchor=C(8, 0)).is_invalid(board)
    assert ActivePiece(PINK, anchor=C(0, 19)).is_invalid(board)
    assert not ActivePiece(PINK, anchor=C(7, 18)).is_invalid(board)


def test_is_invalid_on_overlap():
    board = Board(GridSize(10, 20), frozenset({StaticCell(C(1, 1), BlockColor.RED)}))
    assert ActivePiece(PINK).is_invalid(board)
    assert not ActivePiece(PINK, anchor=C(2, 0)).is_invalid(board)


def test_static_cells_carry_piece_colour():
    cells = ActivePiece(PINK).static_cells()
    assert len(cells) == 4
    assert {cell.color for cell in cells} == {BlockColor.PINK}
