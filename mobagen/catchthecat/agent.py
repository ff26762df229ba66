"""Players of the cat game and the path search they share.

An agent looks at a world exposing ``side_size``, ``cat_position``,
``get_content``, ``is_valid_position``, ``cat_can_move_to_position`` and
``cat_wins_on_space``.
"""

from __future__ import annotations

import heapq
from abc import ABC, abstractmethod
from typing import Optional

from mobagen.catchthecat.hexgrid import neighbors
from mobagen.point2d import Point2D

TilePath = dict[Point2D, tuple[int, Point2D]]


class Agent(ABC):
    """A player that picks a cell each turn."""

    @abstractmethod
    def move(self, world) -> Point2D:
        """Return the cell chosen for this turn."""


class _PathfindingAgent(Agent):
    """Agent that weighs routes by how hemmed in each cell is."""

    def visitable_neighbors(self, world, p: Point2D) -> list[Point2D]:
        return [n for n in neighbors(p) if world.is_valid_position(n) and not world.get_content(n)]

    def unvisitable_neighbors(self, world, p: Point2D) -> list[Point2D]:
        """Blocked cells inside the world around ``p``."""
        return [n for n in neighbors(p) if world.is_valid_position(n) and world.get_content(n)]

    def all_paths(self, world, p: Point2D) -> TilePath:
        """Cheapest known route to each reachable cell as ``cell -> (cost, parent)``.

        Stepping onto a cell costs one plus the number of its blocked
        neighbours. When a neighbour of ``p`` already wins, only that
        neighbour is recorded and the search stops.
        """
        queue: list[tuple[int, Point2D]] = [(0, p)]
        tile_path: TilePath = {Point2D(): (0, p)}

        for neighbor in self.visitable_neighbors(world, p):
            if world.cat_wins_on_space(neighbor):
                tile_path.setdefault(neighbor, (0, p))
                return tile_path

        while queue:
            tile_cost, tile = heapq.heappop(queue)
            for neighbor in self.visitable_neighbors(world, tile):
                cost = len(self.unvisitable_neighbors(world, neighbor)) + tile_cost + 1
                known = tile_path.get(neighbor)
                if known is None:
                    heapq.heappush(queue, (cost, neighbor))
                    tile_path[neighbor] = (cost, tile)
                elif known[0] > cost:
                    tile_path[neighbor] = (cost, tile)
        return tile_path

    @staticmethod
    def _best_border_tile(tile_path: TilePath, side_size: int) -> Optional[Point2D]:
        """The cheapest border cell in ``tile_path``, first found on ties."""
        half = side_size // 2
        best: Optional[Point2D] = None
        best_cost: Optional[int] = None
        for i in range(-half, half):
            for candidate in (Point2D(-half, i), Point2D(half, i), Point2D(i, -half), Point2D(i, half)):
                entry = tile_path.get(candidate)
                if entry is not None and (best_cost is None or best_cost > entry[0]):
                    best_cost = entry[0]
                    best = candidate
        return best