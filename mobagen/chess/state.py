"""Board state of the chess game, packed four bits per square."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable

from mobagen.point2d import Point2D


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
    NONE = 0b0000
    KING = 0b0001
    QUEEN = 0b0010
    BISHOP = 0b0011
    KNIGHT = 0b0100
    ROOK = 0b0101
    PAWN = 0b0110
    WRONG = 0b0111


class PieceColor(IntEnum):
    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> PieceColor:
        return PieceColor.WHITE if self is PieceColor.BLACK else PieceColor.BLACK


_CHARS = {
    PieceType.PAWN: "p",
    PieceType.ROOK: "r",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}


@dataclass(frozen=True)
class PieceData:
    """A coloured piece; packs into a nibble with the colour in bit 0."""

    color: PieceColor = PieceColor.WHITE
    piece: PieceType = PieceType.NONE

    def pack(self) -> int:
        return int(self.color) | int(self.piece) << 1

    @classmethod
    def unpack(cls, data: int) -> PieceData:
        return cls(PieceColor(data & 0b1), PieceType((data >> 1) & 0b111))

    @classmethod
    def empty(cls) -> PieceData:
        return cls(PieceColor.WHITE, PieceType.NONE)

    @classmethod
    def wrong(cls) -> PieceData:
        """Marker returned for squares off the board."""
        return cls(PieceColor.WHITE, PieceType.WRONG)

    def to_char(self) -> str:
        """Letter of the piece, upper case for white, ``.`` for none."""
        c = _CHARS.get(self.piece, ".")
        return c.upper() if self.color is PieceColor.WHITE else c


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

    @classmethod
    def generate_list_of_moves(
        cls, piece: PieceData, origin: Point2D, targets: Iterable[Point2D]
    ) -> list[Move]:
        """Normal moves of ``piece`` from ``origin`` to each target."""
        return [cls(origin, t, piece.color, piece.piece, MoveType.NORMAL) for t in targets]


class IllegalMoveError(ValueError):
    """Raised when a move cannot be made on the current board."""


_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class WorldState:
    """An 8x8 board and whose turn it is; rank 0 is white's back rank."""

    def __init__(self, turn: PieceColor = PieceColor.WHITE) -> None:
        self.turn = turn
        self._cells = bytearray(32)

    def end_turn(self) -> None:
        self.turn = self.turn.opposite

    @staticmethod
    def _on_board(pos: Point2D) -> bool:
        return 0 <= pos.x <= 7 and 0 <= pos.y <= 7

    def piece_at(self, pos: Point2D) -> PieceData:
        """The piece on ``pos``, or the wrong marker off the board."""
        if not self._on_board(pos):
            return PieceData.wrong()
        value = self._cells[(pos.y * 8 + pos.x) // 2]
        nibble = value & 0x0F if pos.x % 2 == 0 else value >> 4
        return PieceData.unpack(nibble)

    def set_piece_at(self, piece: PieceData, pos: Point2D) -> None:
        if not self._on_board(pos):
            raise IndexError(f"{pos} is off the board")
        index = (pos.y * 8 + pos.x) // 2
        value = self._cells[index]
        packed = piece.pack()
        if pos.x % 2 == 0:
            value = (value & 0xF0) | packed
        else:
            value = (value & 0x0F) | (packed << 4)
        self._cells[index] = value

    def move(self, origin: Point2D, target: Point2D) -> None:
        """Move the piece on ``origin`` to ``target`` and pass the turn.

        The piece must belong to the side to move and the target must be
        empty or hold an opposing piece.
        """
        piece_from = self.piece_at(origin)
        piece_to = self.piece_at(target)

        if piece_from.piece is PieceType.WRONG:
            raise IllegalMoveError(f"Wrong FROM piece at position: {origin}")
        if piece_from.color is not self.turn:
            raise IllegalMoveError(f"Piece color does not match the turn at position: {origin}")
        if piece_to.piece is PieceType.WRONG:
            raise IllegalMoveError(f"Wrong TO position: {target}")
        if piece_to.piece is PieceType.NONE or piece_from.color is not piece_to.color:
            self.set_piece_at(piece_from, target)
            self.set_piece_at(PieceData.empty(), origin)
            self.end_turn()
            return
        raise IllegalMoveError(f"WRONG piece at position: {origin}")

    def reset(self) -> None:
        """Set up the standard opening position with white to move."""
        self.turn = PieceColor.WHITE
        self._cells = bytearray(32)
        for column, kind in enumerate(_BACK_RANK):
            self.set_piece_at(PieceData(PieceColor.WHITE, kind), Point2D(column, 0))
            self.set_piece_at(PieceData(PieceColor.WHITE, PieceType.PAWN), Point2D(column, 1))
            self.set_piece_at(PieceData(PieceColor.BLACK, PieceType.PAWN), Point2D(column, 6))
            self.set_piece_at(PieceData(PieceColor.BLACK, kind), Point2D(column, 7))

    def copy(self) -> WorldState:
        clone = WorldState(self.turn)
        clone._cells = bytearray(self._cells)
        return clone

    def __eq__(self, other) -> bool:
        if not isinstance(other, WorldState):
            return NotImplemented
        return self.turn is other.turn and self._cells == other._cells

    __hash__ = None

    def __str__(self) -> str:
        rows = []
        for line in range(7, -1, -1):
            cells = " ".join(self.piece_at(Point2D(col, line)).to_char() for col in range(8))
            rows.append(f"{line + 1} {cells}\n")
        rows.append("  A B C D E F G H\n")
        return "".join(rows)


@dataclass
class MoveState:
    """A board reached by a sequence of moves, with its score."""

    state: WorldState
    moves: list[Move] = field(default_factory=list)
    score: int = 0

    def __lt__(self, other: MoveState) -> bool:
        if not isinstance(other, MoveState):
            return NotImplemented
        return self.score < other.score

    def current_move(self) -> Move:
        return self.moves[-1]

    def first_move(self) -> Move:
        return self.moves[0]