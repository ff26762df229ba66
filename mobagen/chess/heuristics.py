"""Static evaluation of chess positions; positive favours white."""

from __future__ import annotations

from mobagen.chess.moves import is_in_check, king_attack_moves
from mobagen.chess.pieces import (
    bishop_attack_moves,
    knight_attack_moves,
    pawn_attack_moves,
    pawn_count_doubles,
    pawn_cover_moves,
    pawn_is_isolated,
    pawn_possible_moves,
    queen_attack_moves,
    rook_attack_moves,
)
from mobagen.chess.state import PieceColor, PieceType, WorldState
from mobagen.point2d import Point2D

_SLIDERS_AND_JUMPERS = {
    PieceType.QUEEN: (90, queen_attack_moves),
    PieceType.ROOK: (50, rook_attack_moves),
    PieceType.KNIGHT: (35, knight_attack_moves),
    PieceType.BISHOP: (30, bishop_attack_moves),
}


def distance_to_center(location: Point2D) -> int:
    """Closeness to the centre from 0 (edge) to 3, by the nearer axis."""
    dx = abs(location.x * 2 - 7)
    dy = abs(location.y * 2 - 7)
    return 3 - (min(dx, dy) - 1) // 2


def _piece_score(world: WorldState, location: Point2D, kind: PieceType, color: PieceColor) -> int:
    if kind is PieceType.KING:
        return (
            1000
            + len(king_attack_moves(world, location))
            + distance_to_center(location)
            - is_in_check(world, color) * 10
        )
    if kind is PieceType.PAWN:
        moves = len(pawn_possible_moves(world, location))
        score = 10 + moves + distance_to_center(location)
        score += len(pawn_attack_moves(world, location))
        score += len(pawn_cover_moves(world, location))
        if moves == 0:
            score -= 2
        score -= 2 * pawn_count_doubles(world, location)
        if pawn_is_isolated(world, location):
            score -= 1
        return score
    value, generator = _SLIDERS_AND_JUMPERS[kind]
    return value + len(generator(world, location)) + distance_to_center(location)


def material_score(world: WorldState) -> int:
    """Material, mobility and structure of white minus that of black."""
    score = 0
    for line in range(8):
        for column in range(8):
            location = Point2D(column, line)
            piece = world.piece_at(location)
            if piece.piece in (PieceType.NONE, PieceType.WRONG):
                continue
            value = _piece_score(world, location, piece.piece, piece.color)
            score += -value if piece.color is PieceColor.BLACK else value
    return score