from mobagen.chess.board import PieceColor, PieceData, PieceType, WorldState
from mobagen.chess.pawn import (
    count_doubles,
    is_isolated,
    pawn_attack_moves,
    pawn_cover_moves,
    pawn_possible_moves,
)
from mobagen.point2d import Point2D


def _board(*pieces):
    state = WorldState()
    for color, kind, (x, y) in pieces:
        state.set_piece(PieceData(color, kind), Point2D(x, y))
    return state


def _start():
    state = WorldState()
    state.reset()
    return state


def test_white_pawn_on_start_rank_pushes_one_or_two():
    assert pawn_possible_moves(_start(), Point2D(0, 1)) == {Point2D(0, 2), Point2D(0, 3)}


def test_black_pawn_on_start_rank_pushes_down():
    assert pawn_possible_moves(_start(), Point2D(5, 6)) == {Point2D(5, 5), Point2D(5, 4)}


def test_pawn_off_start_rank_pushes_one():
    state = _board((PieceColor.WHITE, PieceType.PAWN, (2, 2)))
    assert pawn_possible_moves(state, Point2D(2, 2)) == {Point2D(2, 3)}


def test_blocked_pawn_cannot_move():
    state = _board(
        (PieceColor.WHITE, PieceType.PAWN, (2, 1)),
        (PieceColor.BLACK, PieceType.PAWN, (2, 2)),
    )
    assert pawn_possible_moves(state, Point2D(2, 1)) == set()


def test_pawn_captures_enemy_diagonally_but_not_friend():
    state = _board(
        (PieceColor.WHITE, PieceType.PAWN, (3, 3)),
        (PieceColor.BLACK, PieceType.KNIGHT, (4, 4)),
        (PieceColor.WHITE, PieceType.KNIGHT, (2, 4)),
    )
    moves = pawn_possible_moves(state, Point2D(3, 3))
    assert Point2D(4, 4) in moves
    assert Point2D(2, 4) not in moves
    assert Point2D(3, 4) in moves


def test_attack_and_cover_split_on_color():
    state = _board(
        (PieceColor.BLACK, PieceType.PAWN, (3, 4)),
        (PieceColor.WHITE, PieceType.BISHOP, (4, 3)),
        (PieceColor.BLACK, PieceType.BISHOP, (2, 3)),
    )
    origin = Point2D(3, 4)
    assert pawn_attack_moves(state, origin) == {Point2D(4, 3)}
    assert pawn_cover_moves(state, origin) == {Point2D(2, 3)}


def test_attack_and_cover_include_empty_diagonals():
    state = _board((PieceColor.WHITE, PieceType.PAWN, (3, 3)))
    expected = {Point2D(4, 4), Point2D(2, 4)}
    assert pawn_attack_moves(state, Point2D(3, 3)) == expected
    assert pawn_cover_moves(state, Point2D(3, 3)) == expected


def test_edge_pawn_has_one_diagonal():
    state = _board((PieceColor.WHITE, PieceType.PAWN, (0, 3)))
    assert pawn_attack_moves(state, Point2D(0, 3)) == {Point2D(1, 4)}


def test_count_doubles():
    state = _board(
        (PieceColor.WHITE, PieceType.PAWN, (2, 1)),
        (PieceColor.WHITE, PieceType.PAWN, (2, 3)),
        (PieceColor.BLACK, PieceType.PAWN, (2, 6)),
    )
    assert count_doubles(state, Point2D(2, 1)) == 1
    assert count_doubles(state, Point2D(2, 6)) == 0
    assert count_doubles(_start(), Point2D(4, 1)) == 0


def test_isolation():
    state = _board(
        (PieceColor.WHITE, PieceType.PAWN, (0, 1)),
        (PieceColor.WHITE, PieceType.PAWN, (1, 2)),
        (PieceColor.WHITE, PieceType.PAWN, (5, 1)),
        (PieceColor.BLACK, PieceType.PAWN, (6, 2)),
    )
    assert is_isolated(state, Point2D(0, 1)) is False
    assert is_isolated(state, Point2D(1, 2)) is False
    assert is_isolated(state, Point2D(5, 1)) is True


def test_non_pawn_queries():
    state = _board((PieceColor.WHITE, PieceType.ROOK, (3, 3)))
    origin = Point2D(3, 3)
    assert pawn_possible_moves(state, origin) == set()
    assert pawn_attack_moves(state, origin) == set()
    assert pawn_cover_moves(state, origin) == set()
    assert count_doubles(state, origin) == 0
    assert is_isolated(state, origin) is True