"""The cat: runs for the border along the least hemmed-in route."""

from __future__ import annotations

import heapq
from itertools import count

from mobagen.catchthecat.agent import TilePath, _PathfindingAgent
from mobagen.catchthecat.hexgrid import neighbors
from mobagen.point2d import Point2D
from mobagen.randomness import random_range


class Cat(_PathfindingAgent):
    """Agent that moves the cat one cell towards the cheapest border cell."""

    def move(self, world) -> Point2D:
        position = world.cat_position
        return self.best_tile(self.all_paths(world, position), world, position)

    def visitable_neighbors(self, world, p: Point2D) -> list[Point2D]:
        """Free cells inside the world around ``p``."""
        return super().visitable_neighbors(world, p)

    def unvisitable_neighbors(self, world, p: Point2D) -> list[Point2D]:
        """Blocked cells inside the world around ``p``."""
        return [n for n in neighbors(p) if world.is_valid_position(n) and world.get_content(n)]

    def all_paths(self, world, p: Point2D) -> TilePath:
        """Cheapest known cost and parent of every cell reachable from ``p``.

        Each step costs one plus the number of blocked cells around the
        cell entered. If a neighbour of ``p`` is already a winning cell,
        only that cell is recorded.
        """
        tile_path: TilePath = {Point2D(0, 0): (0, p)}
        for neighbor in self.visitable_neighbors(world, p):
            if world.cat_wins_on_space(neighbor):
                tile_path.setdefault(neighbor, (0, p))
                return tile_path

        order = count()
        queue = [(0, p.x + p.y, next(order), p)]
        while queue:
            tile_cost, _, _, tile = heapq.heappop(queue)
            for neighbor in self.visitable_neighbors(world, tile):
                cost = len(self.unvisitable_neighbors(world, neighbor)) + tile_cost + 1
                known = tile_path.get(neighbor)
                if known is None:
                    heapq.heappush(queue, (cost, neighbor.x + neighbor.y, next(order), neighbor))
                    tile_path[neighbor] = (cost, tile)
                elif known[0] > cost:
                    tile_path[neighbor] = (cost, tile)
        return tile_path

    def best_tile(self, tile_path: TilePath, world, p: Point2D) -> Point2D:
        """First step from ``p`` towards the cheapest reachable border cell.

        With no border in reach a random legal neighbour is chosen; if there
        is none at all, any neighbour is returned.
        """
        best = self._best_border_tile(tile_path, world.side_size)
        if best is None:
            options = [n for n in neighbors(p) if world.cat_can_move_to_position(n)] or neighbors(p)
            return options[random_range(0, len(options) - 1)]
        while tile_path[best][1] != p:
            best = tile_path[best][1]
        return best