"""Move generation for every chess piece except the king.

Each function returns the set of squares a piece on ``origin`` reaches. It
returns an empty set when the square does not hold the expected kind of piece.
"Attack" squares are those the piece may move to. "Cover" squares are those
it protects: empty squares and squares held by its own side.
"""

from __future__ import annotations

from typing import Iterable

from mobagen.chess.state import PieceColor, PieceData, PieceType, WorldState
from mobagen.point2d import Point2D

_ORTHOGONAL = (Point2D(0, 1), Point2D(0, -1), Point2D(1, 0), Point2D(-1, 0))
_DIAGONAL = (Point2D(1, 1), Point2D(-1, 1), Point2D(1, -1), Point2D(-1, -1))
_ALL_DIRECTIONS = _ORTHOGONAL + _DIAGONAL

_KNIGHT_ATTACK_DELTAS = (
    Point2D(-1, 2), Point2D(1, 2), Point2D(-2, 1), Point2D(2, 1),
    Point2D(-2, -1), Point2D(2, -1), Point2D(-1, -2), Point2D(1, -2),
)
# The cover pattern repeats two left-hand jumps in place of the right-hand
# ones, so a knight covers fewer squares to its right than it attacks.
_KNIGHT_COVER_DELTAS = (
    Point2D(-1, 2), Point2D(1, 2), Point2D(-2, 1), Point2D(-2, 1),
    Point2D(-2, -1), Point2D(-2, -1), Point2D(-1, -2), Point2D(1, -2),
)

# Rank direction a pawn of each colour advances in.
_FORWARD = {PieceColor.WHITE: 1, PieceColor.BLACK: -1}


def _slide(
    world: WorldState,
    origin: Point2D,
    kind: PieceType,
    directions: Iterable[Point2D],
    cover: bool,
) -> set[Point2D]:
    """Squares along rays until the edge or the first piece.

    The blocking piece's square is included when it is an opponent (attack)
    or a friend (cover).
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
                if (other.color is piece.color) == cover:
                    moves.add(current)
                break
            current = current + direction
            other = world.piece_at(current)
    return moves


def bishop_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.BISHOP, _DIAGONAL, cover=False)


def bishop_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.BISHOP, _DIAGONAL, cover=True)


def rook_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.ROOK, _ORTHOGONAL, cover=False)


def rook_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.ROOK, _ORTHOGONAL, cover=True)


def queen_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.QUEEN, _ALL_DIRECTIONS, cover=False)


def queen_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.QUEEN, _ALL_DIRECTIONS, cover=True)


def _jumps(
    world: WorldState, origin: Point2D, deltas: Iterable[Point2D], skip_same_color: bool
) -> set[Point2D]:
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KNIGHT:
        return set()
    moves: set[Point2D] = set()
    for delta in deltas:
        target = origin + delta
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if other.piece is not PieceType.NONE and (other.color is piece.color) == skip_same_color:
            continue
        moves.add(target)
    return moves


def knight_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Knight jumps onto empty or opposing squares."""
    return _jumps(world, origin, _KNIGHT_ATTACK_DELTAS, skip_same_color=True)


def knight_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Knight jumps onto empty or friendly squares."""
    return _jumps(world, origin, _KNIGHT_COVER_DELTAS, skip_same_color=False)


def pawn_possible_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Forward steps (two from the start rank) and diagonal captures."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.PAWN:
        return set()
    dy = _FORWARD[piece.color]
    start_rank = 1 if piece.color is PieceColor.WHITE else 6
    enemy = piece.color.opposite
    points: set[Point2D] = set()

    ahead = Point2D(origin.x, origin.y + dy)
    if world.piece_at(ahead).piece is PieceType.NONE:
        points.add(ahead)
        if origin.y == start_rank:
            two_ahead = Point2D(origin.x, origin.y + 2 * dy)
            if world.piece_at(two_ahead).piece is PieceType.NONE:
                points.add(two_ahead)

    for dx in (1, -1):
        target = Point2D(origin.x + dx, origin.y + dy)
        other = world.piece_at(target)
        if other.piece not in (PieceType.WRONG, PieceType.NONE) and other.color is enemy:
            points.add(target)
    return points


def _pawn_diagonals(world: WorldState, origin: Point2D, cover: bool) -> set[Point2D]:
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.PAWN:
        return set()
    dy = _FORWARD[piece.color]
    wanted = piece.color if cover else piece.color.opposite
    points: set[Point2D] = set()
    for dx in (1, -1):
        target = Point2D(origin.x + dx, origin.y + dy)
        other = world.piece_at(target)
        if other.piece is PieceType.NONE or (
            other.piece is not PieceType.WRONG and other.color is wanted
        ):
            points.add(target)
    return points


def pawn_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Diagonal squares ahead that are empty or hold an opponent."""
    return _pawn_diagonals(world, origin, cover=False)


def pawn_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Diagonal squares ahead that are empty or hold a friendly piece."""
    return _pawn_diagonals(world, origin, cover=True)


def pawn_count_doubles(world: WorldState, origin: Point2D) -> int:
    """How many other friendly pawns share the pawn's file; 0 for non-pawns."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.PAWN:
        return 0
    same = sum(
        1
        for y in range(8)
        if world.piece_at(Point2D(origin.x, y)) == PieceData(piece.color, PieceType.PAWN)
    )
    return same - 1


def pawn_is_isolated(world: WorldState, origin: Point2D) -> bool:
    """Whether no friendly pawn stands on any of the eight adjacent squares.

    A square without a pawn counts as isolated.
    """
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.PAWN:
        return True
    adjacency = (
        origin.right(), origin.left(), origin.up().left(), origin.up().right(),
        origin.down().left(), origin.down().right(), origin.up(), origin.down(),
    )
    return not any(world.piece_at(pos) == piece for pos in adjacency)