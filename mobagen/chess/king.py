"""King moves, check detection and move listing for a side."""

from __future__ import annotations

from typing import Callable, Optional

from mobagen.chess.board import Move, PieceColor, PieceType, WorldState
from mobagen.chess.knight import knight_attack_moves, knight_cover_moves
from mobagen.chess.pawn import pawn_cover_moves, pawn_possible_moves
from mobagen.chess.sliders import (
    bishop_attack_moves,
    bishop_cover_moves,
    queen_attack_moves,
    queen_cover_moves,
    rook_attack_moves,
    rook_cover_moves,
)
from mobagen.point2d import Point2D

_BOARD_SIDE = 8
_KING_STEPS = tuple(
    Point2D(x, y) for x, y in ((0, 1), (0, -1), (1, 0), (-1, 0), (1, 1), (-1, 1), (1, -1), (-1, -1))
)

_Generator = Callable[[WorldState, Point2D], "set[Point2D]"]


def _squares() -> list[Point2D]:
    return [Point2D(column, line) for line in range(_BOARD_SIDE) for column in range(_BOARD_SIDE)]


def king_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Neighbouring squares the king can move to without stepping onto a guarded square."""
    piece = world.piece_at(origin)
    attacked = list_places_king_cannot_go(world, piece.color)
    if piece.piece is not PieceType.KING:
        return set()
    moves: set[Point2D] = set()
    for step in _KING_STEPS:
        target = origin + step
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if (other.piece is PieceType.NONE or other.color is not piece.color) and target not in attacked:
            moves.add(target)
    return moves


def king_cover_moves_naive(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Neighbouring squares the king guards: empty or holding a friend."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KING:
        return set()
    moves: set[Point2D] = set()
    for step in _KING_STEPS:
        target = origin + step
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if other.piece is PieceType.NONE or other.color is piece.color:
            moves.add(target)
    return moves


def find_king(state: WorldState, color: PieceColor) -> Optional[Point2D]:
    """Square of the king of ``color``; None when it is not on the board."""
    for location in _squares():
        piece = state.piece_at(location)
        if piece.color is color and piece.piece is PieceType.KING:
            return location
    return None


def is_in_check(state: WorldState, color: PieceColor) -> int:
    """Number of opposing moves that land on the king of ``color``."""
    king = find_king(state, color)
    if king is None:
        return 0
    return sum(1 for move in list_moves(state, color.opponent) if move.target == king)


_MOVE_GENERATORS: dict[PieceType, _Generator] = {
    PieceType.ROOK: rook_attack_moves,
    PieceType.BISHOP: bishop_attack_moves,
    PieceType.PAWN: pawn_possible_moves,
    PieceType.QUEEN: queen_attack_moves,
    PieceType.KNIGHT: knight_attack_moves,
    PieceType.KING: king_attack_moves,
}

_COVER_GENERATORS: dict[PieceType, _Generator] = {
    PieceType.ROOK: rook_cover_moves,
    PieceType.BISHOP: bishop_cover_moves,
    PieceType.PAWN: pawn_cover_moves,
    PieceType.QUEEN: queen_cover_moves,
    PieceType.KNIGHT: knight_cover_moves,
    PieceType.KING: king_cover_moves_naive,
}


def list_moves(state: WorldState, turn: PieceColor) -> list[Move]:
    """Every move of the pieces of ``turn``, scanning rank by rank from a1."""
    moves: list[Move] = []
    for location in _squares():
        piece = state.piece_at(location)
        if piece.piece is PieceType.NONE or piece.color is not turn:
            continue
        generator = _MOVE_GENERATORS.get(piece.piece)
        if generator is not None:
            moves.extend(Move.generate_list(piece, location, generator(state, location)))
    return moves


def list_places_king_cannot_go(state: WorldState, turn: PieceColor) -> set[Point2D]:
    """Squares guarded by the side opposing ``turn``."""
    covered: set[Point2D] = set()
    for location in _squares():
        piece = state.piece_at(location)
        if piece.piece in (PieceType.NONE, PieceType.WRONG) or piece.color is turn:
            continue
        generator = _COVER_GENERATORS.get(piece.piece)
        if generator is not None:
            covered |= generator(state, location)
    return covered