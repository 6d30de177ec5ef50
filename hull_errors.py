"""
Errors raised while generating a convex hull.

- NullArgumentError: the point collection is None (checked before any work).
- InvalidToleranceError: a generator was built with a negative or non-numeric tolerance.
- DegenerateHullError: a strategy could not resolve the hull within tolerance.
"""


class HullError(Exception):
    """Base class for every hull generation error."""


class NullArgumentError(HullError, ValueError):
    pass


class InvalidToleranceError(HullError, ValueError):
    pass


class DegenerateHullError(HullError, ArithmeticError):
    pass
