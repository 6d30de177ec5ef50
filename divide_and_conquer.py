"""
Module: divide_and_conquer
Description: Divide-and-conquer convex hull.
             - Sort points by (x, y) once, merging points within tolerance.
             - Divide: split the sorted run into halves.
             - Conquer: recursive hull on each half (CCW hulls).
             - Combine: the hull of the union is the hull of both sub-hulls' vertices,
               so merge them back into (x, y) order in linear time and run one chain pass.
"""

from typing import Iterable, List, Sequence
import heapq
import logging

from hull_geometry import DEFAULT_TOLERANCE, Point, as_points, check_finite, merge_coincident
from monotone_chain import hull_from_sorted


logger = logging.getLogger(__name__)

# Below this size a single chain pass is cheaper than another split.
BASE_CASE_SIZE = 8


def sorted_vertices(H: Sequence[Point]) -> List[Point]:
    """
    Vertices of a CCW hull produced by hull_from_sorted, in (x, y) order.
    Such a hull starts at its lowest (x, y) vertex, runs the lower chain up to the
    highest vertex, then returns along the upper chain; both runs are monotone.
    A near-collinear hull need not split that way and is sorted outright.
    """
    if len(H) <= 2:
        return sorted(H)
    k = max(range(len(H)), key=H.__getitem__)
    lower = H[:k + 1]
    upper = list(reversed(H[k + 1:]))
    if not (is_sorted(lower) and is_sorted(upper)):
        return sorted(H)
    return list(heapq.merge(lower, upper))


def is_sorted(run: Sequence[Point]) -> bool:
    return all(a <= b for a, b in zip(run, run[1:]))


def hull_rec(sorted_pts: Sequence[Point], tolerance: float,
             include_collinear_points: bool) -> List[Point]:
    n = len(sorted_pts)
    if n <= BASE_CASE_SIZE:
        return hull_from_sorted(sorted_pts, tolerance, include_collinear_points)

    mid = n // 2
    HL = hull_rec(sorted_pts[:mid], tolerance, include_collinear_points)   # left half hull (CCW)
    HR = hull_rec(sorted_pts[mid:], tolerance, include_collinear_points)   # right half hull (CCW)

    # Every left vertex sorts before every right vertex, so the runs just concatenate
    merged = sorted_vertices(HL) + sorted_vertices(HR)
    return hull_from_sorted(merged, tolerance, include_collinear_points)


def divide_and_conquer(points: Iterable[Sequence[float]], tolerance: float = DEFAULT_TOLERANCE,
                       include_collinear_points: bool = False) -> List[Point]:
    """
    Entry point:
      - Sort and merge coincident points once (O(n log n)).
      - Recurse and merge hulls in linear time per level.
    Returns a CCW list of hull vertices.
    """
    pts = as_points(points)
    check_finite(pts)
    if not pts:
        return []
    hull = hull_rec(merge_coincident(pts, tolerance), tolerance, include_collinear_points)
    logger.debug("divide and conquer: %d points -> %d vertices", len(pts), len(hull))
    return hull
