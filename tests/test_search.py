import pytest

from mobagen.chess.board import PieceColor, PieceData, PieceType, WorldState
from mobagen.chess.king import list_moves
from mobagen.chess.search import next_move
from mobagen.point2d import Point2D


def _board(*pieces):
    state = WorldState()
    for color, kind, (x, y) in pieces:
        state.set_piece(PieceData(color, kind), Point2D(x, y))
    return state


def test_only_move_is_chosen():
    state = _board(
        (PieceColor.WHITE, PieceType.PAWN, (0, 2)),
        (PieceColor.BLACK, PieceType.KING, (7, 7)),
    )
    move = next_move(state)
    assert move.origin == Point2D(0, 2)
    assert move.target == Point2D(0, 3)
    assert move.piece is PieceType.PAWN


def test_chosen_move_is_legal_for_side_to_move():
    state = _board(
        (PieceColor.WHITE, PieceType.KING, (0, 0)),
        (PieceColor.WHITE, PieceType.PAWN, (7, 1)),
        (PieceColor.BLACK, PieceType.KING, (7, 7)),
    )
    move = next_move(state)
    assert move.color is PieceColor.WHITE
    assert move in list_moves(state, PieceColor.WHITE)


def test_search_leaves_the_board_untouched():
    state = _board(
        (PieceColor.WHITE, PieceType.KING, (0, 0)),
        (PieceColor.BLACK, PieceType.KING, (7, 7)),
        (PieceColor.BLACK, PieceType.PAWN, (3, 6)),
    )
    state.end_turn()
    before = state.copy()
    move = next_move(state)
    assert state == before
    assert move.color is PieceColor.BLACK


def test_no_moves_raises():
    with pytest.raises(ValueError):
        next_move(WorldState())