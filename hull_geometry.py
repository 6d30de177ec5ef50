"""
Module: hull_geometry
Description: 2-D primitives shared by every hull strategy.
             - Point value type with Euclidean distance.
             - Orientation (cross product) and signed distance of a point to a line.
             - Merging of coincident points, ring de-duplication, the all-collinear hull.
             - Finite-coordinate check for strategy inputs.
"""

from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple
import math

from hull_errors import DegenerateHullError


DEFAULT_TOLERANCE = 1e-10


class Point(NamedTuple):
    """Immutable (x, y) pair. Compares equal to a plain tuple with the same coordinates."""
    x: float
    y: float

    def distance(self, other: Sequence[float]) -> float:
        return math.hypot(other[0] - self.x, other[1] - self.y)


def as_point(p: Sequence[float]) -> Point:
    """Coerce an (x, y) pair (tuple, list, numpy row, Point) into a Point."""
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))


def as_points(points: Iterable[Sequence[float]]) -> List[Point]:
    return [as_point(p) for p in points]


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def orient(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> float:
    """
    area (2x) of triangle abc = cross((b-a), (c-a)).
    > 0  => a->b->c is a left turn (counterclockwise)
    < 0  => right turn (clockwise)
    == 0 => collinear
    """
    return (b[0]-a[0])*(c[1]-a[1]) - (b[1]-a[1])*(c[0]-a[0])


def line_offset(a: Sequence[float], b: Sequence[float], p: Sequence[float]) -> float:
    """
    Signed perpendicular distance from p to the line through a and b.
    Positive on the left of a->b, negative on the right.
    a and b must be distinct.
    """
    return orient(a, b, p) / distance(a, b)


def merge_coincident(points: Iterable[Point], tolerance: float) -> List[Point]:
    """
    Sort by (x, y) and drop every point within tolerance of a point already kept.
    The survivors are pairwise more than tolerance apart; a dropped point lies within
    tolerance of a survivor.
    """
    ordered = sorted(points)
    if tolerance == 0:
        return [p for i, p in enumerate(ordered) if i == 0 or p != ordered[i - 1]]

    # bucket survivors on a tolerance-sized grid; only the 3x3 neighbourhood can match
    cells: Dict[Tuple[int, int], List[Point]] = {}
    kept: List[Point] = []
    for p in ordered:
        try:
            cx, cy = math.floor(p.x / tolerance), math.floor(p.y / tolerance)
        except OverflowError:
            raise DegenerateHullError(
                f"point {tuple(p)!r} is too large to resolve at tolerance {tolerance}") from None
        if any(distance(p, q) <= tolerance
               for i in (cx - 1, cx, cx + 1) for j in (cy - 1, cy, cy + 1)
               for q in cells.get((i, j), ())):
            continue
        cells.setdefault((cx, cy), []).append(p)
        kept.append(p)
    return kept


def drop_repeats(ring: Iterable[Point]) -> List[Point]:
    """Keep the first occurrence of every vertex, preserving order."""
    seen = set()
    out = []
    for p in ring:
        if p not in seen:
            seen.add(p)
            out.append(p)
    return out


def collinear_hull(sorted_pts: Sequence[Point], tolerance: float,
                   include_collinear_points: bool) -> Optional[List[Point]]:
    """
    Hull of points that all lie within tolerance of one line: the segment's two ends,
    or every point ordered along it when collinear points are kept. None when some
    point is farther off the line through the ends.
    Points must be pairwise more than tolerance apart.
    """
    if len(sorted_pts) <= 2:
        return list(sorted_pts)
    a, b = sorted_pts[0], sorted_pts[-1]
    dx, dy = b.x - a.x, b.y - a.y
    ordered = sorted(sorted_pts, key=lambda p: (p.x - a.x) * dx + (p.y - a.y) * dy)
    if any(abs(line_offset(ordered[0], ordered[-1], p)) > tolerance for p in ordered):
        return None
    if include_collinear_points:
        return ordered
    return [ordered[0], ordered[-1]]


def check_finite(points: Iterable[Sequence[float]]) -> None:
    """Raise DegenerateHullError if any coordinate is NaN or infinite."""
    for p in points:
        if not (math.isfinite(p[0]) and math.isfinite(p[1])):
            raise DegenerateHullError(f"non-finite coordinate in point {tuple(p)!r}")
