"""The catcher: blocks cells on the cat's likely escape route."""

from __future__ import annotations

import heapq
from itertools import count

from mobagen.catchthecat.agent import TilePath, _PathfindingAgent
from mobagen.catchthecat.hexgrid import e, ne, neighbors, nw, se, sw, w
from mobagen.point2d import Point2D
from mobagen.randomness import random_range


def cat_direction(current: Point2D, last: Point2D) -> int:
    """Direction the cat moved: 0 NE, 1 NW, 2 W, 3 SW, 4 SE, 5 E, or -1."""
    for index, step in enumerate((ne, nw, w, sw, se, e)):
        if current == step(last):
            return index
    return -1


class Catcher(_PathfindingAgent):
    """Agent that picks a cell to block each turn."""

    def __init__(self) -> None:
        self.last_cat_position = Point2D(0, 0)

    def move(self, world) -> Point2D:
        cat = world.cat_position
        tile = self.best_tile(self.all_paths(world, cat), world, self.last_cat_position)
        self.last_cat_position = cat
        return tile

    def visitable_neighbors(self, world, p: Point2D) -> list[Point2D]:
        """Free cells inside the world around ``p``, excluding the cat's cell."""
        cat = world.cat_position
        return [n for n in super().visitable_neighbors(world, p) if n != cat]

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

    def best_tile(self, tile_path: TilePath, world, last_cat_position: Point2D) -> Point2D:
        """Cell to block: the end of the cat's cheapest route to the border.

        When the cat is completely free the cell one step before the border is
        taken instead, falling back to a random free cell next to the cat.
        Raises ``LookupError`` when no cell next to the cat is free.
        """
        best = self._best_border_tile(tile_path, world.side_size)
        cat = world.cat_position
        if best is not None and len(self.visitable_neighbors(world, cat)) == 6:
            parent = tile_path[best][1]
            best = parent if parent in tile_path else None
        if best is None:
            free = [n for n in self.visitable_neighbors(world, cat) if not world.get_content(n)]
            if not free:
                raise LookupError("no free cell next to the cat")
            return free[random_range(0, len(free) - 1)]
        return best