"""The board of the cat game: a hexagonal grid, the cat and its catcher."""

from __future__ import annotations

import math
import time
from typing import Iterable, Optional

from mobagen.catchthecat.cat import Cat
from mobagen.catchthecat.catcher import Catcher
from mobagen.catchthecat.hexgrid import is_neighbor, neighbors
from mobagen.point2d import Point2D
from mobagen.randomness import random_range

_BLOCKED_FRACTION = 0.05


class World:
    """Square hex map centred on ``(0, 0)``; ``True`` cells are blocked.

    Coordinates run from ``-side_size // 2`` to ``side_size // 2`` on both axes.
    The cat and the catcher take turns; ``step`` plays one turn.
    """

    def __init__(
        self,
        side_size: int = 11,
        cat_turn: bool = True,
        cat_position: Optional[Point2D] = None,
        state: Optional[Iterable[bool]] = None,
    ) -> None:
        if side_size <= 0:
            raise ValueError("side size must be positive")
        self.side_size = side_size
        self.cat_turn = cat_turn
        self.cat_position = cat_position if cat_position is not None else Point2D(0, 0)
        cells = side_size * side_size
        self.state: list[bool] = [False] * cells if state is None else [bool(c) for c in state]
        if len(self.state) != cells:
            raise ValueError(f"expected {cells} cells, got {len(self.state)}")
        self.time_between_ai_ticks = 1.0
        self.time_for_next_tick = 1.0
        self.is_simulating = False
        self.move_duration = 0
        self.cat_won = False
        self.catcher_won = False
        self.cat = Cat()
        self.catcher = Catcher()

    @classmethod
    def random(cls, side_size: int = 11) -> World:
        """A fresh world with a few random blocked cells; the side must be odd."""
        if side_size % 2 == 0:
            raise ValueError("side size must be odd")
        world = cls(side_size)
        world.clear_world()
        return world

    def _index(self, point: Point2D) -> int:
        if not self.is_valid_position(point):
            raise IndexError(f"{point} is outside the world")
        half = self.side_size // 2
        return (point.y + half) * self.side_size + point.x + half

    def get_content(self, point: Point2D) -> bool:
        """Whether the cell at ``point`` is blocked."""
        return self.state[self._index(point)]

    def is_valid_position(self, point: Point2D) -> bool:
        half = self.side_size // 2
        return -half <= point.x <= half and -half <= point.y <= half

    def cat_can_move_to_position(self, point: Point2D) -> bool:
        """The cat may step onto a free cell next to it."""
        return (
            is_neighbor(self.cat_position, point)
            and self.is_valid_position(point)
            and not self.get_content(point)
        )

    def catcher_can_move_to_position(self, point: Point2D) -> bool:
        """The catcher may block any cell in the world except the cat's."""
        half = self.side_size // 2
        return point != self.cat_position and abs(point.x) <= half and abs(point.y) <= half

    def cat_wins_on_space(self, point: Point2D) -> bool:
        """Whether ``point`` lies on the border of the world."""
        half = self.side_size // 2
        return abs(point.x) == half or abs(point.y) == half

    def _cat_win_verification(self) -> bool:
        return self.cat_wins_on_space(self.cat_position)

    def _catcher_win_verification(self) -> bool:
        return all(
            self.is_valid_position(n) and self.get_content(n) for n in neighbors(self.cat_position)
        )

    def clear_world(self) -> None:
        """Start a new round on a freshly randomised map."""
        cells = self.side_size * self.side_size
        self.state = [False] * cells
        for _ in range(math.ceil(cells * _BLOCKED_FRACTION)):
            self.state[random_range(0, cells - 1)] = True
        self.cat_position = Point2D(0, 0)
        self.state[cells // 2] = False
        self.is_simulating = False
        self.cat_turn = True
        self.time_for_next_tick = self.time_between_ai_ticks
        self.cat_won = False
        self.catcher_won = False

    def step(self) -> None:
        """Play one turn; after a win the next step starts a new round.

        An illegal move loses the game for whoever made it.
        """
        if self.cat_won or self.catcher_won:
            self.clear_world()
            return

        start = time.perf_counter_ns()
        if self.cat_turn:
            move = self.cat.move(self)
            if self.cat_can_move_to_position(move):
                self.cat_position = move
                self.cat_won = self._cat_win_verification()
            else:
                self.is_simulating = False
                self.catcher_won = True
        else:
            move = self.catcher.move(self)
            if self.catcher_can_move_to_position(move):
                self.state[self._index(move)] = True
                self.catcher_won = self._catcher_win_verification()
            else:
                self.is_simulating = False
                self.cat_won = True
        self.move_duration = (time.perf_counter_ns() - start) // 1000
        self.cat_turn = not self.cat_turn

    def update(self, delta_time: float) -> None:
        """Advance the turn timer while simulating and step when it runs out."""
        if not self.is_simulating:
            return
        self.time_for_next_tick -= delta_time
        if self.time_for_next_tick < 0:
            self.step()
            self.time_for_next_tick = self.time_between_ai_ticks

    def render(self) -> str:
        """Text picture of the map: ``C`` cat, ``#`` blocked, ``.`` free.

        Every second row is indented by one space to show the hex offset.
        """
        cat_index = self._index(self.cat_position) if self.is_valid_position(self.cat_position) else -1
        side = self.side_size
        parts: list[str] = []
        for i, blocked in enumerate(self.state, start=1):
            parts.append("C" if i - 1 == cat_index else ("#" if blocked else "."))
            if (i + side) % (2 * side) == 0:
                parts.append("\n ")
            elif i % side == 0:
                parts.append("\n")
            else:
                parts.append(" ")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()