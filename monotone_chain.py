"""
Module: monotone_chain
Description: Andrew's monotone chain convex hull with a distance tolerance.
             - Sort points by (x, y) and merge points within tolerance of each other.
             - Points all within tolerance of one line give the segment directly.
             - Build the lower chain left to right, the upper chain right to left.
             - Points within tolerance of the supporting line are either dropped
               or kept in order, depending on include_collinear_points.
Returns vertices in CCW order starting at the lowest (x, y) point.
"""

from typing import Iterable, List, Sequence
import logging

from hull_geometry import (DEFAULT_TOLERANCE, Point, as_points, check_finite, collinear_hull,
                           distance, drop_repeats, line_offset, merge_coincident)


logger = logging.getLogger(__name__)


def update_chain(chain: List[Point], point: Point,
                 tolerance: float, include_collinear_points: bool) -> None:
    """
    Push one point onto a partial chain, popping vertices that make a right turn.
    A point within tolerance of the line through the last two vertices, and ahead of
    the first of them, is collinear: inserted in order if collinear points are kept,
    otherwise it replaces the last vertex when it lies further out.
    Points must be pairwise more than tolerance apart (see merge_coincident).
    """
    while len(chain) >= 2:
        p1, p2 = chain[-2], chain[-1]
        offset = line_offset(p1, p2, point)
        ahead = (p2.x - p1.x) * (point.x - p1.x) + (p2.y - p1.y) * (point.y - p1.y) > 0
        if abs(offset) <= tolerance and ahead:
            to_new = distance(p1, point)
            to_last = distance(p1, p2)
            if include_collinear_points:
                if to_new < to_last:
                    chain.insert(len(chain) - 1, point)
                else:
                    chain.append(point)
            elif to_new > to_last:
                chain[-1] = point
            return
        if offset < 0:
            # right turn: the last vertex is not on the hull
            chain.pop()
        else:
            break
    chain.append(point)


def build_chain(ordered: Sequence[Point], tolerance: float,
                include_collinear_points: bool) -> List[Point]:
    chain: List[Point] = []
    for p in ordered:
        update_chain(chain, p, tolerance, include_collinear_points)
    return chain


def hull_from_sorted(sorted_pts: Sequence[Point], tolerance: float = DEFAULT_TOLERANCE,
                     include_collinear_points: bool = False) -> List[Point]:
    """Hull of points sorted by (x, y) and pairwise more than tolerance apart."""
    segment = collinear_hull(sorted_pts, tolerance, include_collinear_points)
    if segment is not None:
        return segment
    lower = build_chain(sorted_pts, tolerance, include_collinear_points)
    upper = build_chain(list(reversed(sorted_pts)), tolerance, include_collinear_points)

    # lower runs first to last point, upper runs back; each end appears on both,
    # and a near-collinear point may sit on both chains
    return drop_repeats(lower + upper)


def monotone_chain(points: Iterable[Sequence[float]], tolerance: float = DEFAULT_TOLERANCE,
                   include_collinear_points: bool = False) -> List[Point]:
    """
    Entry point:
      - Coerce and check the points (non-finite coordinates raise DegenerateHullError).
      - Sort and merge coincident points once (O(n log n)), then two linear chain passes.
    """
    pts = as_points(points)
    check_finite(pts)
    hull = hull_from_sorted(merge_coincident(pts, tolerance), tolerance, include_collinear_points)
    logger.debug("monotone chain: %d points -> %d vertices", len(pts), len(hull))
    return hull
