"""
Module: gift_wrapping
Description: Jarvis march (gift wrapping) with a distance tolerance.
Points within tolerance of each other are merged first. Starting from the lowest (x, y) point, repeatedly pick the point that leaves every
other point on the left of the current edge; O(n h) for h hull vertices.
Collinear boundary points are added back onto the edges afterwards when requested.
"""

from typing import Iterable, List, Optional, Sequence
import logging

from hull_geometry import (DEFAULT_TOLERANCE, Point, as_points, check_finite, collinear_hull,
                           distance, drop_repeats, line_offset, merge_coincident)


logger = logging.getLogger(__name__)


def next_vertex(current: Point, pts: Sequence[Point], tolerance: float) -> Optional[Point]:
    """
    The most clockwise point as seen from current; among points collinear (within
    tolerance) with the best edge, the farthest one. None if all points coincide with current.
    """
    candidate = None
    for p in pts:
        if distance(current, p) <= tolerance:
            continue
        if candidate is None:
            candidate = p
            continue
        offset = line_offset(current, candidate, p)
        if offset < -tolerance:
            candidate = p
        elif offset <= tolerance and distance(current, p) > distance(current, candidate):
            candidate = p
    return candidate


def points_on_edge(a: Point, b: Point, pts: Sequence[Point], tolerance: float) -> List[Point]:
    """Points strictly between a and b and within tolerance of segment ab, ordered from a to b."""
    length = distance(a, b)
    dx, dy = (b.x - a.x) / length, (b.y - a.y) / length
    between = []
    for p in pts:
        if abs(line_offset(a, b, p)) > tolerance:
            continue
        if distance(a, p) <= tolerance or distance(b, p) <= tolerance:
            continue
        t = (p.x - a.x) * dx + (p.y - a.y) * dy
        if 0.0 < t < length:
            between.append((t, p))
    between.sort()
    return [p for _, p in between]


def insert_collinear(hull: List[Point], pts: Sequence[Point], tolerance: float) -> List[Point]:
    """Re-insert every input point lying on a hull edge, keeping CCW order and no duplicates."""
    if len(hull) < 2:
        return hull
    if len(hull) == 2:
        edges = [(hull[0], hull[1])]
    else:
        edges = list(zip(hull, hull[1:] + hull[:1]))

    result: List[Point] = []
    for a, b in edges:
        result.append(a)
        for p in points_on_edge(a, b, pts, tolerance):
            if distance(result[-1], p) > tolerance:
                result.append(p)
    if len(hull) == 2:
        result.append(hull[1])
    return result


def gift_wrapping(points: Iterable[Sequence[float]], tolerance: float = DEFAULT_TOLERANCE,
                  include_collinear_points: bool = False) -> List[Point]:
    pts = as_points(points)
    check_finite(pts)
    if not pts:
        return []
    n = len(pts)
    pts = merge_coincident(pts, tolerance)
    segment = collinear_hull(pts, tolerance, include_collinear_points)
    if segment is not None:
        logger.debug("gift wrapping: %d collinear points -> %d vertices", n, len(segment))
        return segment

    start = pts[0]  # lowest (x, y) point is always an extreme vertex
    hull = [start]
    visited = {start}
    current = start
    while True:
        nxt = next_vertex(current, pts, tolerance)
        # the walk closes on start, or on a later vertex when start sits on the last edge
        if nxt is None or nxt in visited:
            break
        hull.append(nxt)
        visited.add(nxt)
        current = nxt

    if include_collinear_points:
        hull = drop_repeats(insert_collinear(hull, pts, tolerance))
    logger.debug("gift wrapping: %d points -> %d vertices", n, len(hull))
    return hull
