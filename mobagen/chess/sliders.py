"""Moves of the sliding pieces: bishop, rook and queen."""

from __future__ import annotations

from typing import Sequence

from mobagen.chess.board import PieceType, WorldState
from mobagen.point2d import Point2D

_DIAGONALS = (Point2D(1, 1), Point2D(-1, 1), Point2D(1, -1), Point2D(-1, -1))
_STRAIGHTS = (Point2D(0, 1), Point2D(0, -1), Point2D(1, 0), Point2D(-1, 0))
_ALL_DIRECTIONS = _STRAIGHTS + _DIAGONALS


def _slide(
    world: WorldState,
    origin: Point2D,
    kind: PieceType,
    directions: Sequence[Point2D],
    attack: bool,
) -> set[Point2D]:
    """Squares reached along each direction until the first piece.

    The stopping piece is included when it is an enemy (attack) or a friend
    (cover); nothing is returned when ``origin`` does not hold ``kind``.
    """
    piece = world.piece_at(origin)
    if piece.piece is not kind:
        return set()
    moves: set[Point2D] = set()
    for direction in directions:
        current = origin + direction
        other = world.piece_at(current)
        while other.piece is not PieceType.WRONG:
            if other.piece is PieceType.NONE:
                moves.add(current)
            else:
                if (other.color is not piece.color) == attack:
                    moves.add(current)
                break
            current = current + direction
            other = world.piece_at(current)
    return moves


def bishop_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.BISHOP, _DIAGONALS, attack=True)


def bishop_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.BISHOP, _DIAGONALS, attack=False)


def rook_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.ROOK, _STRAIGHTS, attack=True)


def rook_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.ROOK, _STRAIGHTS, attack=False)


def queen_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.QUEEN, _ALL_DIRECTIONS, attack=True)


def queen_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.QUEEN, _ALL_DIRECTIONS, attack=False)