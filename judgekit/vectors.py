"""Pairings of points in the plane."""

from __future__ import annotations

import math
from collections.abc import Iterable
from functools import lru_cache
from itertools import combinations


def _as_points(points: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    pts = [(int(x), int(y)) for x, y in points]
    if not pts or len(pts) % 2:
        raise ValueError("an even, non-zero number of points is required")
    return pts


def min_vector_matching(points: Iterable[tuple[int, int]]) -> float:
    """Shortest length of the sum of vectors joining the points in pairs."""
    pts = _as_points(points)
    total_x = sum(x for x, _ in pts)
    total_y = sum(y for _, y in pts)
    half = len(pts) // 2

    def squared(plus: tuple[int, ...]) -> int:
        dx = 2 * sum(pts[i][0] for i in plus) - total_x
        dy = 2 * sum(pts[i][1] for i in plus) - total_y
        return dx * dx + dy * dy

    # Negating every vector keeps the length, so the first point can be fixed as a head.
    best = min(squared((0, *chosen)) for chosen in combinations(range(1, len(pts)), half - 1))
    return math.sqrt(best)


def min_pairing_distance_sum(points: Iterable[tuple[int, int]]) -> int:
    """Least total squared distance over all ways to split the points into pairs."""
    pts = _as_points(points)
    count = len(pts)
    full = (1 << count) - 1

    def distance(i: int, j: int) -> int:
        dx = pts[i][0] - pts[j][0]
        dy = pts[i][1] - pts[j][1]
        return dx * dx + dy * dy

    @lru_cache(maxsize=None)
    def solve(mask: int) -> int:
        if mask == full:
            return 0
        free = ~mask & full
        first = (free & -free).bit_length() - 1
        taken = mask | (1 << first)
        return min(
            distance(first, j) + solve(taken | (1 << j))
            for j in range(first + 1, count)
            if not taken & (1 << j)
        )

    return solve(0)