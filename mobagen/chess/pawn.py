"""Moves and structure of pawns."""

from __future__ import annotations

from mobagen.chess.board import PieceColor, PieceData, PieceType, WorldState
from mobagen.point2d import Point2D

_BOARD_SIDE = 8


def _pawn(world: WorldState, origin: Point2D) -> PieceData | None:
    piece = world.piece_at(origin)
    return piece if piece.piece is PieceType.PAWN else None


def _forward(color: PieceColor) -> int:
    return 1 if color is PieceColor.WHITE else -1


def _diagonals(origin: Point2D, color: PieceColor) -> tuple[Point2D, Point2D]:
    step = _forward(color)
    return Point2D(origin.x + 1, origin.y + step), Point2D(origin.x - 1, origin.y + step)


def pawn_possible_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Pushes of one or, from the start rank, two squares, and diagonal captures."""
    piece = _pawn(world, origin)
    if piece is None:
        return set()
    step = _forward(piece.color)
    start_rank = 1 if piece.color is PieceColor.WHITE else 6
    points: set[Point2D] = set()

    one = Point2D(origin.x, origin.y + step)
    if world.piece_at(one).piece is PieceType.NONE:
        points.add(one)
        if origin.y == start_rank:
            two = Point2D(origin.x, origin.y + 2 * step)
            if world.piece_at(two).piece is PieceType.NONE:
                points.add(two)

    enemy = piece.color.opponent
    for target in _diagonals(origin, piece.color):
        other = world.piece_at(target)
        if other.piece not in (PieceType.WRONG, PieceType.NONE) and other.color is enemy:
            points.add(target)
    return points


def _diagonal_squares(world: WorldState, origin: Point2D, wanted: str) -> set[Point2D]:
    piece = _pawn(world, origin)
    if piece is None:
        return set()
    color = piece.color.opponent if wanted == "enemy" else piece.color
    points: set[Point2D] = set()
    for target in _diagonals(origin, piece.color):
        other = world.piece_at(target)
        if other.piece is PieceType.NONE or (other.piece is not PieceType.WRONG and other.color is color):
            points.add(target)
    return points


def pawn_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Forward diagonals that are empty or hold an enemy."""
    return _diagonal_squares(world, origin, "enemy")


def pawn_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Forward diagonals that are empty or hold a friend."""
    return _diagonal_squares(world, origin, "friend")


def count_doubles(world: WorldState, origin: Point2D) -> int:
    """Other pawns of the same side on the file of ``origin``; 0 for a non-pawn."""
    piece = _pawn(world, origin)
    if piece is None:
        return 0
    same = sum(1 for y in range(_BOARD_SIDE) if world.piece_at(Point2D(origin.x, y)) == piece)
    return same - 1


def is_isolated(world: WorldState, origin: Point2D) -> bool:
    """True when no pawn of the same side touches ``origin``; also True for a non-pawn."""
    piece = _pawn(world, origin)
    if piece is None:
        return True
    adjacency = (
        origin.right(),
        origin.left(),
        origin.up().left(),
        origin.up().right(),
        origin.down().left(),
        origin.down().right(),
        origin.up(),
        origin.down(),
    )
    return not any(world.piece_at(pos) == piece for pos in adjacency)