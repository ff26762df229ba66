"""Three-ply look-ahead choosing the next move."""

from __future__ import annotations

from mobagen.chess.heuristics import material_score
from mobagen.chess.moves import list_moves
from mobagen.chess.state import Move, MoveState, PieceColor, WorldState


def _expand(states: list[MoveState]) -> list[MoveState]:
    expanded: list[MoveState] = []
    for state in states:
        for move in list_moves(state.state, state.state.turn):
            board = state.state.copy()
            board.move(move.origin, move.target)
            expanded.append(MoveState(board, state.moves + [move], material_score(board)))
    return expanded


def _order(states: list[MoveState], ascending_when: PieceColor) -> list[MoveState]:
    if not states:
        raise ValueError("search ran out of moves")
    ascending = states[0].state.turn is ascending_when
    return sorted(states, key=lambda s: s.score, reverse=not ascending)


def next_move(world: WorldState) -> Move:
    """First move of the best line found three plies deep.

    ``world`` is left unchanged. Raises ``ValueError`` when some ply has no
    moves to explore.
    """
    root = MoveState(world.copy(), [], material_score(world))
    level1 = _order(_expand([root]), PieceColor.WHITE)
    level2 = _order(_expand(level1), PieceColor.BLACK)
    level3 = _order(_expand(level2), PieceColor.WHITE)
    return level3[0].first_move()