"""
Module: akl_toussaint
Description: Akl-Toussaint heuristic.
The points with minimum x, minimum y, maximum x and maximum y span a quadrilateral
(CCW in that order) lying inside the hull. Points strictly inside it cannot be hull
vertices and are dropped before the real hull algorithm runs.
"""

from typing import Callable, Iterable, List, Sequence
import logging

import numpy as np

from hull_geometry import DEFAULT_TOLERANCE, Point, as_points, check_finite, distance


logger = logging.getLogger(__name__)

# same shape as hull_generator.HullStrategy, which imports this module
Strategy = Callable[[Sequence[Point], float, bool], List[Point]]


def quadrilateral(pts: Sequence[Point], tolerance: float) -> List[Point]:
    """Extreme points in CCW order with coincident corners collapsed."""
    corners = [
        min(pts, key=lambda p: (p.x, p.y)),
        min(pts, key=lambda p: (p.y, -p.x)),
        max(pts, key=lambda p: (p.x, p.y)),
        max(pts, key=lambda p: (p.y, -p.x)),
    ]
    quad: List[Point] = []
    for c in corners:
        if not quad or distance(quad[-1], c) > tolerance:
            quad.append(c)
    while len(quad) > 1 and distance(quad[-1], quad[0]) <= tolerance:
        quad.pop()
    return quad


def reduce_points(points: Iterable[Sequence[float]],
                  tolerance: float = DEFAULT_TOLERANCE) -> List[Point]:
    """
    Drop points more than tolerance inside the extreme quadrilateral.
    The input is returned as a list unchanged when fewer than 3 distinct corners exist.
    Non-finite coordinates raise DegenerateHullError.
    """
    pts = as_points(points)
    check_finite(pts)
    if len(pts) < 4:
        return pts
    quad = quadrilateral(pts, tolerance)
    if len(quad) < 3:
        return pts

    arr = np.asarray(pts, dtype=float)
    inside = np.ones(len(pts), dtype=bool)
    for a, b in zip(quad, quad[1:] + quad[:1]):
        edge = np.array([b.x - a.x, b.y - a.y])
        rel = arr - np.array([a.x, a.y])
        # signed distance to the edge line, positive on the left (inside)
        offset = (edge[0] * rel[:, 1] - edge[1] * rel[:, 0]) / np.hypot(edge[0], edge[1])
        inside &= offset > tolerance

    reduced = [pts[i] for i in np.flatnonzero(~inside)]
    logger.debug("akl-toussaint: kept %d of %d points", len(reduced), len(pts))
    return reduced


def akl_toussaint(strategy: Strategy) -> Strategy:
    """Wrap a hull strategy so it runs on the reduced point set."""
    def reduced_strategy(points: Iterable[Sequence[float]], tolerance: float = DEFAULT_TOLERANCE,
                         include_collinear_points: bool = False) -> List[Point]:
        return strategy(reduce_points(points, tolerance), tolerance, include_collinear_points)
    reduced_strategy.__name__ = f"akl_toussaint_{getattr(strategy, '__name__', 'strategy')}"
    return reduced_strategy
