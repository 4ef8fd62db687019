"""Choice of the next move by a three-ply look-ahead."""

from __future__ import annotations

from typing import Iterable

from mobagen.chess.board import Move, MoveState, PieceColor, WorldState
from mobagen.chess.heuristics import material_score
from mobagen.chess.king import list_moves


def _expand(states: Iterable[MoveState]) -> list[MoveState]:
    """Every state reached by one more move of the side to move."""
    expanded: list[MoveState] = []
    for current in states:
        for move in list_moves(current.state, current.state.turn):
            board = current.state.copy()
            board.move(move.origin, move.target)
            expanded.append(MoveState(board, [*current.moves, move], material_score(board)))
    return expanded


def _ordered(states: list[MoveState], ascending_when: PieceColor) -> list[MoveState]:
    if not states:
        raise ValueError("no moves to search")
    ascending = states[0].state.turn is ascending_when
    return sorted(states, key=lambda s: s.score, reverse=not ascending)


def next_move(state: WorldState) -> Move:
    """The first move of the best line found three moves deep.

    Raises ValueError when a line runs out of moves before the third ply.
    """
    root = MoveState(state.copy(), [], material_score(state))
    first = _ordered(_expand([root]), PieceColor.WHITE)
    second = _ordered(_expand(first), PieceColor.BLACK)
    third = _ordered(_expand(second), PieceColor.WHITE)
    return third[0].first_move