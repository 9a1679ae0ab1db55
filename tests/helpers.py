"""Shared geometry helpers for the test suite."""

from __future__ import annotations

import math
import random

from core.geometry import cross

Point = tuple[float, float]


def _segments_cross(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True when segments ab and cd properly intersect (touching excluded)."""
    d1 = cross(c, d, a)
    d2 = cross(c, d, b)
    d3 = cross(a, b, c)
    d4 = cross(a, b, d)
    eps = 1e-9
    return (
        ((d1 > eps and d2 < -eps) or (d1 < -eps and d2 > eps))
        and ((d3 > eps and d4 < -eps) or (d3 < -eps and d4 > eps))
    )


def polygon_is_simple(points: list[Point]) -> bool:
    n = len(points)
    edges = [(points[i], points[(i + 1) % n]) for i in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            # Neighbouring edges share a vertex
            if j == i + 1 or (i == 0 and j == n - 1):
                continue
            if _segments_cross(*edges[i], *edges[j]):
                return False
    return True


def random_convex_wall(
    rng: random.Random, center: Point, radius: float
) -> list[Point]:
    """Convex polygon inscribed in a circle, random vertex count and winding."""
    count = rng.randint(3, 8)
    angles = sorted(rng.uniform(0, 2 * math.pi) for _ in range(count))
    # Keep vertices apart so the polygon never collapses onto an edge
    min_gap = 0.2
    spaced = [angles[0]]
    for angle in angles[1:]:
        if angle - spaced[-1] >= min_gap:
            spaced.append(angle)
    if 2 * math.pi - (spaced[-1] - spaced[0]) < min_gap:
        spaced.pop()
    while len(spaced) < 3:
        spaced = [0.0, 2.1, 4.2]

    points = [
        (center[0] + radius * math.cos(a), center[1] + radius * math.sin(a))
        for a in spaced
    ]
    if rng.random() < 0.5:
        points.reverse()
    return points
