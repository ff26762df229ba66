import pytest

from mobagen.chess.pieces import (
    bishop_attack_moves,
    bishop_cover_moves,
    knight_attack_moves,
    knight_cover_moves,
    pawn_attack_moves,
    pawn_count_doubles,
    pawn_cover_moves,
    pawn_is_isolated,
    pawn_possible_moves,
    queen_attack_moves,
    queen_cover_moves,
    rook_attack_moves,
    rook_cover_moves,
)
from mobagen.chess.state import PieceColor, PieceData, PieceType, WorldState
from mobagen.point2d import Point2D as P

W = PieceColor.WHITE
B = PieceColor.BLACK


def board(*pieces):
    state = WorldState()
    for color, kind, x, y in pieces:
        state.set_piece_at(PieceData(color, kind), P(x, y))
    return state


@pytest.fixture
def opening():
    state = WorldState()
    state.reset()
    return state


def test_knight_opening_attack(opening):
    assert knight_attack_moves(opening, P(1, 0)) == {P(0, 2), P(2, 2)}


def test_knight_cover_uses_left_biased_pattern(opening):
    assert knight_cover_moves(opening, P(6, 0)) == {P(5, 2), P(7, 2), P(4, 1)}


def test_knight_attack_skips_friends_includes_enemies():
    state = board((W, PieceType.KNIGHT, 3, 3), (W, PieceType.PAWN, 4, 5), (B, PieceType.PAWN, 2, 5))
    moves = knight_attack_moves(state, P(3, 3))
    assert P(2, 5) in moves
    assert P(4, 5) not in moves
    assert len(moves) == 7


def test_bishop_blocked_at_opening(opening):
    assert bishop_attack_moves(opening, P(2, 0)) == set()
    assert bishop_cover_moves(opening, P(2, 0)) == {P(1, 1), P(3, 1)}


def test_rook_empty_board():
    state = board((W, PieceType.ROOK, 0, 0))
    moves = rook_attack_moves(state, P(0, 0))
    assert len(moves) == 14
    assert all(p.x == 0 or p.y == 0 for p in moves)
    assert rook_cover_moves(state, P(0, 0)) == moves


def test_rook_capture_versus_cover():
    state = board((W, PieceType.ROOK, 0, 0), (B, PieceType.PAWN, 0, 2), (W, PieceType.PAWN, 2, 0))
    assert rook_attack_moves(state, P(0, 0)) == {P(0, 1), P(0, 2), P(1, 0)}
    assert rook_cover_moves(state, P(0, 0)) == {P(0, 1), P(1, 0), P(2, 0)}


def test_queen_empty_board_center():
    state = board((B, PieceType.QUEEN, 3, 3))
    moves = queen_attack_moves(state, P(3, 3))
    assert len(moves) == 27
    assert P(3, 3) not in moves
    assert queen_cover_moves(state, P(3, 3)) == moves


def test_wrong_piece_gives_nothing(opening):
    assert queen_attack_moves(opening, P(0, 0)) == set()
    assert knight_attack_moves(opening, P(0, 0)) == set()
    assert pawn_possible_moves(opening, P(0, 0)) == set()
    assert bishop_attack_moves(opening, P(9, 9)) == set()


def test_pawn_opening_double_step(opening):
    assert pawn_possible_moves(opening, P(0, 1)) == {P(0, 2), P(0, 3)}
    assert pawn_possible_moves(opening, P(4, 6)) == {P(4, 5), P(4, 4)}


def test_pawn_capture_and_block():
    state = board((W, PieceType.PAWN, 3, 3), (B, PieceType.PAWN, 4, 4))
    assert pawn_possible_moves(state, P(3, 3)) == {P(3, 4), P(4, 4)}
    state.set_piece_at(PieceData(B, PieceType.ROOK), P(3, 4))
    assert pawn_possible_moves(state, P(3, 3)) == {P(4, 4)}


def test_pawn_attack_and_cover():
    state = board((W, PieceType.PAWN, 3, 3))
    assert pawn_attack_moves(state, P(3, 3)) == {P(2, 4), P(4, 4)}
    state.set_piece_at(PieceData(B, PieceType.PAWN), P(4, 4))
    assert pawn_cover_moves(state, P(3, 3)) == {P(2, 4)}
    state.set_piece_at(PieceData(W, PieceType.PAWN), P(4, 4))
    assert pawn_cover_moves(state, P(3, 3)) == {P(2, 4), P(4, 4)}
    assert pawn_attack_moves(state, P(3, 3)) == {P(2, 4)}


def test_black_pawn_attacks_downwards():
    state = board((B, PieceType.PAWN, 0, 5))
    assert pawn_attack_moves(state, P(0, 5)) == {P(1, 4)}


def test_pawn_doubles(opening):
    assert pawn_count_doubles(opening, P(0, 1)) == 0
    state = board((W, PieceType.PAWN, 2, 2), (W, PieceType.PAWN, 2, 4), (B, PieceType.PAWN, 2, 6))
    assert pawn_count_doubles(state, P(2, 2)) == 1
    assert pawn_count_doubles(state, P(2, 6)) == 0
    assert pawn_count_doubles(state, P(5, 5)) == 0


def test_pawn_isolation(opening):
    assert pawn_is_isolated(opening, P(0, 1)) is False
    state = board((W, PieceType.PAWN, 3, 3), (B, PieceType.PAWN, 4, 4))
    assert pawn_is_isolated(state, P(3, 3)) is True
    assert pawn_is_isolated(state, P(0, 0)) is True
    state.set_piece_at(PieceData(W, PieceType.PAWN), P(2, 2))
    assert pawn_is_isolated(state, P(3, 3)) is False