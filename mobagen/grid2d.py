"""A fixed-width two-dimensional grid stored row by row."""

from __future__ import annotations

from typing import Any

from mobagen.point2d import Point2D


class Grid2D:
    """Cells addressed by ``(x, y)`` tuples or points, stored in one flat list."""

    def __init__(self, width: int = 0, height: int = 0, fill: Any = None) -> None:
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must not be negative")
        self.width = width
        self.height = height
        self.fill = fill
        self._data = [fill] * (width * height)

    def _index(self, key) -> int:
        if isinstance(key, Point2D):
            x, y = key.x, key.y
        else:
            x, y = key
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return x + y * self.width

    def __getitem__(self, key):
        return self._data[self._index(key)]

    def __setitem__(self, key, value) -> None:
        self._data[self._index(key)] = value

    def __len__(self) -> int:
        return len(self._data)

    def resize(self, width: int, height: int) -> None:
        """Change dimensions; the flat storage is truncated or padded with the fill value."""
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must not be negative")
        size = width * height
        self._data = self._data[:size] + [self.fill] * (size - len(self._data))
        self.width = width
        self.height = height