"""Static evaluation of a chess position."""

from __future__ import annotations

from mobagen.chess.board import PieceColor, PieceType, WorldState
from mobagen.chess.king import is_in_check, king_attack_moves
from mobagen.chess.knight import knight_attack_moves
from mobagen.chess.pawn import (
    count_doubles,
    is_isolated,
    pawn_attack_moves,
    pawn_cover_moves,
    pawn_possible_moves,
)
from mobagen.chess.sliders import bishop_attack_moves, queen_attack_moves, rook_attack_moves
from mobagen.point2d import Point2D

_BOARD_SIDE = 8


def distance_to_center(location: Point2D) -> int:
    """Closeness to the centre: 3 on the middle squares down to 0 on the edge ring."""
    dx = abs(location.x * 2 - 7)
    dy = abs(location.y * 2 - 7)
    return 3 - (min(dx, dy) - 1) // 2


def _piece_score(state: WorldState, location: Point2D, kind: PieceType, color: PieceColor) -> int:
    if kind is PieceType.KING:
        return (
            1000
            + len(king_attack_moves(state, location))
            + distance_to_center(location)
            - is_in_check(state, color) * 10
        )
    if kind is PieceType.QUEEN:
        return 90 + len(queen_attack_moves(state, location)) + distance_to_center(location)
    if kind is PieceType.ROOK:
        return 50 + len(rook_attack_moves(state, location)) + distance_to_center(location)
    if kind is PieceType.KNIGHT:
        return 35 + len(knight_attack_moves(state, location)) + distance_to_center(location)
    if kind is PieceType.BISHOP:
        return 30 + len(bishop_attack_moves(state, location)) + distance_to_center(location)
    # pawn
    moves = len(pawn_possible_moves(state, location))
    score = 10 + moves + distance_to_center(location)
    score += len(pawn_attack_moves(state, location))
    score += len(pawn_cover_moves(state, location))
    if moves == 0:
        score -= 2
    score -= 2 * count_doubles(state, location)
    if is_isolated(state, location):
        score -= 1
    return score


def material_score(state: WorldState) -> int:
    """Material, mobility and placement; positive favours white."""
    score = 0
    for line in range(_BOARD_SIDE):
        for column in range(_BOARD_SIDE):
            location = Point2D(column, line)
            piece = state.piece_at(location)
            if piece.piece in (PieceType.NONE, PieceType.WRONG):
                continue
            value = _piece_score(state, location, piece.piece, piece.color)
            score += -value if piece.color is PieceColor.BLACK else value
    return score