"""Coordinate type aliases and delta helpers.

Coordinates are ``(x, y)`` integer pairs. Deltas are relative offsets of the
same shape; ``y`` grows "forward" for the side the atom belongs to.
"""

from __future__ import annotations

from functools import lru_cache
from math import gcd
from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]
Delta: TypeAlias = tuple[int, int]
DeltaSet: TypeAlias = tuple[Delta, ...]


def sign(value: int) -> int:
    """-1, 0 or 1."""
    return (value > 0) - (value < 0)


def symmetric_deltas(*offsets: Delta) -> DeltaSet:
    """All sign / axis permutations of *offsets*, sorted and de-duplicated.

    ``symmetric_deltas((1, 2))`` gives the eight knight offsets.
    """
    seen: set[Delta] = set()
    for a, b in offsets:
        for p, q in ((a, b), (b, a)):
            for sp in (-1, 1):
                for sq in (-1, 1):
                    seen.add((p * sp, q * sq))
    return tuple(sorted(seen))


def is_straight(dx: int, dy: int) -> bool:
    """Orthogonal or diagonal delta."""
    return dx == 0 or dy == 0 or abs(dx) == abs(dy)


@lru_cache(maxsize=256)
def path_offsets(dx: int, dy: int) -> DeltaSet:
    """Intermediate squares a non-jumping leap of ``(dx, dy)`` passes over.

    Straight leaps pass every multiple of their unit step. Oblique leaps pass
    a single leg square, one orthogonal step along the longer axis, like the
    xiangqi horse.
    """
    if dx == 0 and dy == 0:
        return ()
    if is_straight(dx, dy):
        n = gcd(abs(dx), abs(dy))
        ux, uy = dx // n, dy // n
        return tuple((ux * k, uy * k) for k in range(1, n))
    if abs(dx) > abs(dy):
        return ((sign(dx), 0),)
    return ((0, sign(dy)),)
