"""Neighbourhood on the offset hexagonal grid of the cat game.

Rows with an odd ``y`` are shifted half a cell relative to even rows, so the
diagonal neighbours depend on the parity of the row.
"""

from __future__ import annotations

from mobagen.point2d import Point2D


def e(p: Point2D) -> Point2D:
    """The cell to the east."""
    return Point2D(p.x + 1, p.y)


def w(p: Point2D) -> Point2D:
    """The cell to the west."""
    return Point2D(p.x - 1, p.y)


def ne(p: Point2D) -> Point2D:
    """The cell to the north-east."""
    if p.y % 2:
        return Point2D(p.x + 1, p.y - 1)
    return Point2D(p.x, p.y - 1)


def nw(p: Point2D) -> Point2D:
    """The cell to the north-west."""
    if p.y % 2:
        return Point2D(p.x, p.y - 1)
    return Point2D(p.x - 1, p.y - 1)


def se(p: Point2D) -> Point2D:
    """The lower diagonal cell on the side of ``nw``."""
    if p.y % 2:
        return Point2D(p.x, p.y + 1)
    return Point2D(p.x - 1, p.y + 1)


def sw(p: Point2D) -> Point2D:
    """The lower diagonal cell on the side of ``ne``."""
    if p.y % 2:
        return Point2D(p.x + 1, p.y + 1)
    return Point2D(p.x, p.y + 1)


def neighbors(p: Point2D) -> list[Point2D]:
    """The six neighbours in the order NE, NW, E, W, SW, SE."""
    return [ne(p), nw(p), e(p), w(p), sw(p), se(p)]


def is_neighbor(p1: Point2D, p2: Point2D) -> bool:
    """Whether ``p2`` is one of the six cells around ``p1``."""
    return p2 in neighbors(p1)