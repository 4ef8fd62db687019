"""Chess board state packed into half-bytes, pieces and moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable

from mobagen.point2d import Point2D

_BOARD_SIDE = 8
_FILES = "A B C D E F G H"


class IllegalMoveError(ValueError):
    """A move that the board refuses to make."""


class MoveType(IntEnum):
    NORMAL = 0b000
    CAPTURE = 0b001
    EN_PASSANT = 0b010
    CASTLING = 0b011
    PROMOTE_TO_BISHOP = 0b100
    PROMOTE_TO_KNIGHT = 0b101
    PROMOTE_TO_ROOK = 0b110
    PROMOTE_TO_QUEEN = 0b111


class PieceType(IntEnum):
    NONE = 0b000
    KING = 0b001
    QUEEN = 0b010
    BISHOP = 0b011
    KNIGHT = 0b100
    ROOK = 0b101
    PAWN = 0b110
    WRONG = 0b111


class PieceColor(IntEnum):
    BLACK = 0
    WHITE = 1

    @property
    def opponent(self) -> PieceColor:
        return PieceColor.BLACK if self is PieceColor.WHITE else PieceColor.WHITE


_PIECE_CHARS = {
    PieceType.PAWN: "p",
    PieceType.ROOK: "r",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}


@dataclass(frozen=True)
class PieceData:
    """A piece: its colour and type. Packs into four bits, colour in the lowest."""

    color: PieceColor = PieceColor.WHITE
    piece: PieceType = PieceType.NONE

    def pack(self) -> int:
        return int(self.color) | (int(self.piece) << 1)

    @staticmethod
    def unpack(data: int) -> PieceData:
        return PieceData(PieceColor(data & 0b1), PieceType((data >> 1) & 0b111))

    def to_char(self) -> str:
        """Letter of the piece, upper case for white; '.' for no piece."""
        char = _PIECE_CHARS.get(self.piece, ".")
        return char.upper() if self.color is PieceColor.WHITE else char

    @staticmethod
    def empty() -> PieceData:
        return PieceData(PieceColor.WHITE, PieceType.NONE)

    @staticmethod
    def wrong() -> PieceData:
        """Marker for squares outside the board."""
        return PieceData(PieceColor.WHITE, PieceType.WRONG)


@dataclass(frozen=True)
class Move:
    """A piece moving from ``origin`` to ``target``."""

    origin: Point2D
    target: Point2D
    color: PieceColor
    piece: PieceType
    move_type: MoveType = MoveType.NORMAL

    @property
    def piece_data(self) -> PieceData:
        return PieceData(self.color, self.piece)

    @staticmethod
    def generate_list(piece: PieceData, origin: Point2D, targets: Iterable[Point2D]) -> list[Move]:
        """Normal moves of ``piece`` from ``origin`` to each target."""
        return [Move(origin, target, piece.color, piece.piece, MoveType.NORMAL) for target in targets]


class WorldState:
    """An 8x8 board, two squares per byte, and the side to move."""

    def __init__(self) -> None:
        self.turn = PieceColor.WHITE
        self._cells = bytearray(_BOARD_SIDE * _BOARD_SIDE // 2)

    @staticmethod
    def _on_board(pos: Point2D) -> bool:
        return 0 <= pos.x < _BOARD_SIDE and 0 <= pos.y < _BOARD_SIDE

    def piece_at(self, pos: Point2D) -> PieceData:
        """The piece on ``pos``; PieceData.wrong() outside the board."""
        if not self._on_board(pos):
            return PieceData.wrong()
        value = self._cells[(pos.y * _BOARD_SIDE + pos.x) // 2]
        nibble = value & 0x0F if pos.x % 2 == 0 else value >> 4
        return PieceData.unpack(nibble)

    def set_piece(self, piece: PieceData, pos: Point2D) -> None:
        """Put ``piece`` on ``pos``; IndexError outside the board."""
        if not self._on_board(pos):
            raise IndexError(f"{pos} is outside the board")
        index = (pos.y * _BOARD_SIDE + pos.x) // 2
        packed = piece.pack()
        value = self._cells[index]
        if pos.x % 2 == 0:
            value = (value & 0xF0) | packed
        else:
            value = (value & 0x0F) | (packed << 4)
        self._cells[index] = value

    def move(self, origin: Point2D, target: Point2D) -> None:
        """Move the piece on ``origin`` to ``target`` and pass the turn.

        Raises IllegalMoveError when the origin is off the board, holds a piece
        of the side not to move, or the target holds a piece of the same side.
        """
        moving = self.piece_at(origin)
        captured = self.piece_at(target)
        if moving.piece is PieceType.WRONG:
            raise IllegalMoveError(f"Wrong FROM piece at position: {origin}")
        if moving.color is not self.turn:
            raise IllegalMoveError(f"Piece color does not match the turn at position: {origin}")
        if captured.piece is PieceType.NONE or moving.color is not captured.color:
            self.set_piece(moving, target)
            self.set_piece(PieceData.empty(), origin)
            self.end_turn()
            return
        raise IllegalMoveError(f"WRONG piece at position: {origin}")

    def reset(self) -> None:
        """Set up the starting position with white to move."""
        self.turn = PieceColor.WHITE
        self._cells = bytearray(len(self._cells))
        back_rank = (
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        )
        for column, kind in enumerate(back_rank):
            self.set_piece(PieceData(PieceColor.WHITE, kind), Point2D(column, 0))
            self.set_piece(PieceData(PieceColor.WHITE, PieceType.PAWN), Point2D(column, 1))
            self.set_piece(PieceData(PieceColor.BLACK, PieceType.PAWN), Point2D(column, 6))
            self.set_piece(PieceData(PieceColor.BLACK, kind), Point2D(column, 7))

    def end_turn(self) -> None:
        self.turn = self.turn.opponent

    def copy(self) -> WorldState:
        clone = WorldState()
        clone.turn = self.turn
        clone._cells = bytearray(self._cells)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorldState):
            return NotImplemented
        return self.turn is other.turn and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        lines = []
        for line in range(_BOARD_SIDE - 1, -1, -1):
            row = " ".join(self.piece_at(Point2D(col, line)).to_char() for col in range(_BOARD_SIDE))
            lines.append(f"{line + 1} {row}\n")
        lines.append(f"  {_FILES}\n")
        return "".join(lines)


@dataclass(order=True)
class MoveState:
    """A board reached by a sequence of moves, ordered by its score."""

    state: WorldState = field(compare=False)
    moves: list[Move] = field(compare=False, default_factory=list)
    score: int = 0

    @property
    def current_move(self) -> Move:
        return self.moves[-1]

    @property
    def first_move(self) -> Move:
        return self.moves[0]