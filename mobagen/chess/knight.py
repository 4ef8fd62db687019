"""Moves of the knight."""

from __future__ import annotations

from typing import Sequence

from mobagen.chess.board import PieceType, WorldState
from mobagen.point2d import Point2D

_ATTACK_DELTAS = tuple(
    Point2D(x, y) for x, y in ((-1, 2), (1, 2), (-2, 1), (2, 1), (-2, -1), (2, -1), (-1, -2), (1, -2))
)
# The covered squares leave out the two jumps two files to the right.
_COVER_DELTAS = tuple(
    Point2D(x, y) for x, y in ((-1, 2), (1, 2), (-2, 1), (-2, 1), (-2, -1), (-2, -1), (-1, -2), (1, -2))
)


def _jumps(world: WorldState, origin: Point2D, deltas: Sequence[Point2D], attack: bool) -> set[Point2D]:
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KNIGHT:
        return set()
    moves: set[Point2D] = set()
    for delta in deltas:
        target = origin + delta
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if other.piece is not PieceType.NONE:
            same_side = other.color is piece.color
            if same_side == attack:
                continue
        moves.add(target)
    return moves


def knight_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Squares the knight on ``origin`` can move to: empty or holding an enemy."""
    return _jumps(world, origin, _ATTACK_DELTAS, attack=True)


def knight_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Squares the knight on ``origin`` guards: empty or holding a friend."""
    return _jumps(world, origin, _COVER_DELTAS, attack=False)