"""King moves and move listing for a whole side."""

from __future__ import annotations

from typing import Callable

from mobagen.chess.pieces import (
    bishop_attack_moves,
    bishop_cover_moves,
    knight_attack_moves,
    knight_cover_moves,
    pawn_cover_moves,
    pawn_possible_moves,
    queen_attack_moves,
    queen_cover_moves,
    rook_attack_moves,
    rook_cover_moves,
)
from mobagen.chess.state import Move, PieceColor, PieceType, WorldState
from mobagen.point2d import Point2D

_KING_DIRECTIONS = (
    Point2D(0, 1), Point2D(0, -1), Point2D(1, 0), Point2D(-1, 0),
    Point2D(1, 1), Point2D(-1, 1), Point2D(1, -1), Point2D(-1, -1),
)

MoveGenerator = Callable[[WorldState, Point2D], "set[Point2D]"]


def _squares() -> list[Point2D]:
    """Every board square, rank by rank from rank 0."""
    return [Point2D(column, line) for line in range(8) for column in range(8)]


def king_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Adjacent squares the king may move to without stepping into cover."""
    piece = world.piece_at(origin)
    attacked = list_places_king_cannot_go(world, piece.color)
    if piece.piece is not PieceType.KING:
        return set()
    moves: set[Point2D] = set()
    for direction in _KING_DIRECTIONS:
        target = origin + direction
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if (other.piece is PieceType.NONE or other.color is not piece.color) and target not in attacked:
            moves.add(target)
    return moves


def king_cover_moves_naive(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Adjacent squares that are empty or hold a friendly piece."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KING:
        return set()
    moves: set[Point2D] = set()
    for direction in _KING_DIRECTIONS:
        target = origin + direction
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if other.piece is PieceType.NONE or other.color is piece.color:
            moves.add(target)
    return moves


def find_king(world: WorldState, color: PieceColor) -> Point2D:
    """Square of the king of ``color``; ``Point2D(0, 0)`` when there is none."""
    for location in _squares():
        p = world.piece_at(location)
        if p.color is color and p.piece is PieceType.KING:
            return location
    return Point2D()


def is_in_check(world: WorldState, color: PieceColor) -> int:
    """How many opposing moves end on the king of ``color``."""
    king_location = find_king(world, color)
    return sum(1 for move in list_moves(world, color.opposite) if move.target == king_location)


_ATTACKS: dict[PieceType, MoveGenerator] = {
    PieceType.ROOK: rook_attack_moves,
    PieceType.BISHOP: bishop_attack_moves,
    PieceType.PAWN: pawn_possible_moves,
    PieceType.QUEEN: queen_attack_moves,
    PieceType.KNIGHT: knight_attack_moves,
    PieceType.KING: king_attack_moves,
}

_COVERS: dict[PieceType, MoveGenerator] = {
    PieceType.ROOK: rook_cover_moves,
    PieceType.BISHOP: bishop_cover_moves,
    PieceType.PAWN: pawn_cover_moves,
    PieceType.QUEEN: queen_cover_moves,
    PieceType.KNIGHT: knight_cover_moves,
    PieceType.KING: king_cover_moves_naive,
}


def list_moves(world: WorldState, turn: PieceColor) -> list[Move]:
    """All moves of the pieces of ``turn``, square by square."""
    moves: list[Move] = []
    for location in _squares():
        p = world.piece_at(location)
        if p.piece is PieceType.NONE or p.color is not turn:
            continue
        generator = _ATTACKS.get(p.piece)
        if generator is None:
            continue
        targets = sorted(generator(world, location), key=lambda t: (t.y, t.x))
        moves.extend(Move.generate_list_of_moves(p, location, targets))
    return moves


def list_places_king_cannot_go(world: WorldState, turn: PieceColor) -> set[Point2D]:
    """Squares covered by the pieces opposing ``turn``."""
    covered: set[Point2D] = set()
    for location in _squares():
        p = world.piece_at(location)
        if p.piece in (PieceType.NONE, PieceType.WRONG) or p.color is turn:
            continue
        generator = _COVERS.get(p.piece)
        if generator is not None:
            covered |= generator(world, location)
    return covered