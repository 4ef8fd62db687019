"""Uniform random numbers over inclusive ranges."""

from __future__ import annotations

import random

_rng = random.Random()


def random_range(start: int | float, end: int | float) -> int | float:
    """Return a random number between ``start`` and ``end``, both inclusive.

    Two integers give an integer; anything else gives a float.
    Raises ValueError when two integers are given with ``start > end``.
    """
    if start == end:
        return start
    if isinstance(start, int) and isinstance(end, int):
        if start > end:
            raise ValueError(f"empty integer range: {start} > {end}")
        return _rng.randint(start, end)
    return _rng.uniform(float(start), float(end))