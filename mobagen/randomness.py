"""Inclusive random ranges."""

from __future__ import annotations

import random

_rng = random.Random()


def random_range(start, end):
    """Return a random value between ``start`` and ``end``, both inclusive.

    Integer bounds give an integer; any float bound gives a float.
    """
    if start == end:
        return start
    if isinstance(start, int) and isinstance(end, int):
        if start > end:
            raise ValueError(f"empty integer range [{start}, {end}]")
        return _rng.randint(start, end)
    return _rng.uniform(float(start), float(end))