"""Error taxonomy of the conics kernel.

Out-of-domain queries are not errors: they return ``inf`` or an empty list.
The types below cover caller-correctable precondition violations.
"""
from __future__ import annotations


class DegenerateGeometryError(ValueError):
    """Raised when an operation is undefined for degenerate input, such as the slope of a single point."""
    pass


class UnsupportedCurveOperation(NotImplementedError):
    """Raised when a curve lacks the capability an operation requires."""
    pass


class LimitOutOfRangeError(ValueError):
    """Raised when a limit, rotation or relative position lies outside the allowed range."""
    pass


class OverlappingCurvesException(Exception):
    """Raised when two curves overlap, so their intersection is not a finite set of points."""
    pass


class IntersectingCurveException(Exception):
    """Raised when a curve is intersected with itself or an intersection-only quantity is requested of disjoint curves."""
    pass


__all__ = [
    'DegenerateGeometryError',
    'UnsupportedCurveOperation',
    'LimitOutOfRangeError',
    'OverlappingCurvesException',
    'IntersectingCurveException',
]
