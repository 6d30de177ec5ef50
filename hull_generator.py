"""
Module: hull_generator
Description: Convex hull generation in the plane.
             - HullGenerator validates the input, answers the degenerate sizes
               (0, 1, 2 points) directly and hands 3+ points to a hull strategy.
             - ConvexHull is the immutable result: CCW vertices plus the tolerance used.
             - Strategies are plain callables, registered by name.

Usage:
      generator = HullGenerator(include_collinear_points=True)
      hull = generator.generate([(0, 0), (1, 0), (1, 1), (0, 1), (0.5, 0)])
      hull.vertices  # (Point(0,0), Point(0.5,0), Point(1,0), Point(1,1), Point(0,1))
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union
import logging
import math

import numpy as np

from akl_toussaint import akl_toussaint
from divide_and_conquer import divide_and_conquer
from gift_wrapping import gift_wrapping
from hull_errors import InvalidToleranceError, NullArgumentError
from hull_geometry import DEFAULT_TOLERANCE, Point, as_points
from monotone_chain import monotone_chain


logger = logging.getLogger(__name__)

# strategy(points, tolerance, include_collinear_points) -> CCW hull vertices
HullStrategy = Callable[[Sequence[Point], float, bool], List[Point]]

STRATEGIES: Dict[str, HullStrategy] = {
    "monotone_chain": monotone_chain,
    "divide_and_conquer": divide_and_conquer,
    "gift_wrapping": gift_wrapping,
    "akl_toussaint": akl_toussaint(monotone_chain),
}


def register_strategy(name: str, strategy: HullStrategy) -> None:
    if not callable(strategy):
        raise TypeError(f"strategy {name!r} is not callable")
    STRATEGIES[name] = strategy


def get_strategy(name: str) -> HullStrategy:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"unknown hull strategy {name!r}, expected one of {sorted(STRATEGIES)}") from None


@dataclass(frozen=True)
class ConvexHull:
    """
    Hull boundary in CCW winding (no repeated closing vertex) and the tolerance
    it was built with. Stores what it is given; no validation.
    """
    vertices: Tuple[Point, ...]
    tolerance: float

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def to_array(self) -> np.ndarray:
        """Vertices as an N x 2 float array (0 x 2 when empty)."""
        if not self.vertices:
            return np.empty((0, 2))
        return np.array(self.vertices, dtype=float)


@dataclass(frozen=True)
class HullGenerator:
    """
    Fixed orchestration around a pluggable hull strategy.

    include_collinear_points: keep points lying on hull edges (within tolerance) as vertices.
    tolerance: distance below which points are identical, and the collinearity threshold.
    strategy: a HullStrategy callable or the name of a registered one.
    """
    include_collinear_points: bool = False
    tolerance: float = DEFAULT_TOLERANCE
    strategy: Union[str, HullStrategy] = monotone_chain

    def __post_init__(self):
        if isinstance(self.tolerance, bool) or not isinstance(self.tolerance, (int, float)):
            raise InvalidToleranceError(f"tolerance must be a real number, got {self.tolerance!r}")
        if math.isnan(self.tolerance) or self.tolerance < 0:
            raise InvalidToleranceError(f"tolerance must be >= 0, got {self.tolerance!r}")
        if isinstance(self.strategy, str):
            # frozen: bypass __setattr__ to store the resolved callable
            object.__setattr__(self, "strategy", get_strategy(self.strategy))
        elif not callable(self.strategy):
            raise TypeError(f"strategy must be callable or a registered name, got {self.strategy!r}")

    def generate(self, points: Optional[Iterable[Sequence[float]]]) -> ConvexHull:
        """
        Convex hull of points.
          - None raises NullArgumentError; an empty collection is a valid input.
          - 0 or 1 point: returned unchanged.
          - 2 points: both if farther apart than tolerance, otherwise only the first.
          - 3+ points: delegated to the strategy; its errors propagate unchanged.
        """
        if points is None:
            raise NullArgumentError("points must not be None")

        pts = as_points(points)
        size = len(pts)
        if size == 2:
            first, second = pts
            if first.distance(second) > self.tolerance:
                return ConvexHull((first, second), self.tolerance)
            return ConvexHull((first,), self.tolerance)
        elif size < 2:
            return ConvexHull(tuple(pts), self.tolerance)

        vertices = self.strategy(pts, self.tolerance, self.include_collinear_points)
        logger.debug("%s: %d points -> %d hull vertices",
                     getattr(self.strategy, "__name__", "strategy"), size, len(vertices))
        return ConvexHull(tuple(vertices), self.tolerance)
