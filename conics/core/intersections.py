"""Pairwise intersection and tangency between curves.

Each supported pair of curve kinds has an intersection class that
classifies the pair as :class:`Incidence` ``NONE``, ``TANGENT`` or
``INTERSECTING`` and computes the shared coordinates: ``[]`` for none, one
coordinate for tangency, two for a full crossing. Pairs are looked up in an
explicit dispatch table, in either argument order.

Supported pairs:

* line / line
* line / circle (closed form on the circle translated to the origin)
* circle / circle (center separation, then the common chord about the radical line foot)
* line / ellipse, line / hyperbola, line / parabola (quadratic along the line
  on the conic's implicit form)

Overlapping curves raise :class:`OverlappingCurvesException`; intersecting a
curve with itself raises :class:`IntersectingCurveException`.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Tuple, Type

import numpy as np

from .circular import CircularCurve
from .constants import EPS_QUADRATIC
from .coordinates import CartesianCoordinate, Vector
from .elliptical import EllipticalCurve
from .exceptions import (
    DegenerateGeometryError,
    IntersectingCurveException,
    OverlappingCurvesException,
    UnsupportedCurveOperation,
)
from .hyperbolic import HyperbolicCurve
from .linear import LinearCurve
from .logging_utils import get_logger
from .numerics import governing_tolerance, is_equal, is_zero, sign, solve_quadratic
from .parabolic import ParabolicCurve

logger = get_logger('conics.intersections')


class Incidence(Enum):
    NONE = 'none'
    TANGENT = 'tangent'
    INTERSECTING = 'intersecting'


class CurveIntersection(ABC):
    """Intersection query between two fixed curves."""

    def __init__(self, curve_1, curve_2):
        if curve_1 is curve_2:
            raise IntersectingCurveException('a curve cannot be intersected with itself')
        self.curve_1 = curve_1
        self.curve_2 = curve_2

    @property
    def tolerance(self) -> float:
        return governing_tolerance(self.curve_1, self.curve_2)

    @abstractmethod
    def incidence(self) -> Incidence:
        ...

    @abstractmethod
    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        ...

    def are_tangent(self) -> bool:
        return self.incidence() is Incidence.TANGENT

    def are_intersecting(self) -> bool:
        """True for any shared point, tangency included."""
        return self.incidence() is not Incidence.NONE


class LinearLinearIntersection(CurveIntersection):

    def incidence(self) -> Incidence:
        line_1, line_2 = self.curve_1, self.curve_2
        if line_1.is_parallel(line_2):
            if line_1.is_collinear(line_2):
                raise OverlappingCurvesException('lines are coincident')
            return Incidence.NONE
        return Incidence.INTERSECTING

    def are_tangent(self) -> bool:
        # Straight lines cross or miss; they never touch
        return False

    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        if self.incidence() is Incidence.NONE:
            return []
        return [LinearCurve.line_intersect(self.curve_1, self.curve_2)]


class LinearCircularIntersection(CurveIntersection):
    """Line against circle, solved with the circle moved to the origin."""

    def __init__(self, line: LinearCurve, circle: CircularCurve):
        super().__init__(line, circle)

    def _translated(self) -> Tuple[float, float, float, float]:
        """(dx, dy, dr^2, D) of the line in the circle-centered frame."""
        center = self.curve_2.center
        i = self.curve_1.control_point_i - center
        j = self.curve_1.control_point_j - center
        dx, dy = j.x - i.x, j.y - i.y
        dr2 = dx * dx + dy * dy
        if is_zero(math.sqrt(dr2), self.tolerance):
            raise DegenerateGeometryError('line control points coincide')
        return dx, dy, dr2, i.x * j.y - j.x * i.y

    def center_distance(self) -> float:
        """Perpendicular distance from the circle center to the line."""
        _, _, dr2, determinant = self._translated()
        return abs(determinant) / math.sqrt(dr2)

    def incidence(self) -> Incidence:
        distance = self.center_distance()
        radius = self.curve_2.radius
        if is_equal(distance, radius, self.tolerance):
            return Incidence.TANGENT
        return Incidence.INTERSECTING if distance < radius else Incidence.NONE

    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        incidence = self.incidence()
        if incidence is Incidence.NONE:
            return []
        center = self.curve_2.center
        tol = self.tolerance
        dx, dy, dr2, determinant = self._translated()
        if incidence is Incidence.TANGENT:
            return [CartesianCoordinate(center.x + determinant * dy / dr2,
                                        center.y - determinant * dx / dr2, tol)]
        root = math.sqrt(max(self.curve_2.radius ** 2 * dr2 - determinant ** 2, 0.0))
        sign_dy = sign(dy, tol)
        points = []
        for branch in (1.0, -1.0):
            x = (determinant * dy + branch * sign_dy * dx * root) / dr2
            y = (-determinant * dx + branch * abs(dy) * root) / dr2
            points.append(CartesianCoordinate(center.x + x, center.y + y, tol))
        return points


class CircularCircularIntersection(CurveIntersection):
    """Circle against circle.

    Two-point results list first the point to the left of the direction from
    center 1 to center 2.
    """

    def __init__(self, circle_1: CircularCurve, circle_2: CircularCurve):
        super().__init__(circle_1, circle_2)

    def center_separation(self) -> float:
        return self.curve_1.center.distance_to(self.curve_2.center)

    def _is_concentric(self) -> bool:
        return is_zero(self.center_separation(), self.tolerance)

    def incidence(self) -> Incidence:
        r1, r2 = self.curve_1.radius, self.curve_2.radius
        tol = self.tolerance
        d = self.center_separation()
        if self._is_concentric():
            if is_equal(r1, r2, tol):
                raise OverlappingCurvesException('circles are identical')
            return Incidence.NONE
        if is_equal(d, r1 + r2, tol) or is_equal(d, abs(r1 - r2), tol):
            return Incidence.TANGENT
        if abs(r1 - r2) < d < r1 + r2:
            return Incidence.INTERSECTING
        return Incidence.NONE

    def _foot_distance(self) -> float:
        """Distance from center 1 to the radical line along the center line."""
        d = self.center_separation()
        r1, r2 = self.curve_1.radius, self.curve_2.radius
        return (d * d - r2 * r2 + r1 * r1) / (2.0 * d)

    def radical_line_length(self) -> float:
        """Length of the common chord."""
        if self._is_concentric():
            raise OverlappingCurvesException('concentric circles have no radical line')
        incidence = self.incidence()
        if incidence is Incidence.NONE:
            raise IntersectingCurveException('circles do not intersect')
        if incidence is Incidence.TANGENT:
            return 0.0
        x = self._foot_distance()
        return 2.0 * math.sqrt(max(self.curve_1.radius ** 2 - x * x, 0.0))

    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        incidence = self.incidence()
        if incidence is Incidence.NONE:
            return []
        c1, c2 = self.curve_1.center, self.curve_2.center
        r1, r2 = self.curve_1.radius, self.curve_2.radius
        tol = self.tolerance
        axis = Vector.from_points(c1, c2).normalized()
        if incidence is Incidence.TANGENT:
            external = is_equal(self.center_separation(), r1 + r2, tol)
            reach = r1 if (external or r1 > r2) else -r1
            return [CartesianCoordinate(c1.x + reach * axis.dx, c1.y + reach * axis.dy, tol)]
        x = self._foot_distance()
        h = math.sqrt(max(r1 * r1 - x * x, 0.0))
        foot_x, foot_y = c1.x + x * axis.dx, c1.y + x * axis.dy
        # Left of the center line first
        return [CartesianCoordinate(foot_x - h * axis.dy, foot_y + h * axis.dx, tol),
                CartesianCoordinate(foot_x + h * axis.dy, foot_y - h * axis.dx, tol)]


class LinearConicIntersection(CurveIntersection):
    """Line against a non-circular conic, on the conic's implicit form.

    With the line written as ``P(t) = I + t u`` for unit ``u``, the implicit
    equation becomes a quadratic in ``t``. The line touches the conic when the
    line point at the quadratic's vertex lies within tolerance of the curve,
    measured as ``|f| / |grad f|``. A line parallel to an asymptote or to a
    parabola's axis crosses once; that single point is reported as an
    intersection, not a tangency.
    """

    def __init__(self, line: LinearCurve, conic):
        super().__init__(line, conic)

    def _quadratic(self) -> Tuple[float, float, float]:
        line = self.curve_1
        direction = line.tangent_vector()
        m = self.curve_2.implicit_matrix()
        p = np.array([line.control_point_i.x, line.control_point_i.y, 1.0])
        q = np.array([direction.dx, direction.dy, 0.0])
        a, b, c = float(q @ m @ q), 2.0 * float(p @ m @ q), float(p @ m @ p)
        scale = max(abs(a), abs(b), abs(c))
        if scale == 0.0:
            return 0.0, 0.0, 0.0
        return a / scale, b / scale, c / scale

    def _point_at(self, t: float) -> CartesianCoordinate:
        line = self.curve_1
        direction = line.tangent_vector()
        origin = line.control_point_i
        return CartesianCoordinate(origin.x + t * direction.dx, origin.y + t * direction.dy, self.tolerance)

    def contact_gap(self, t: float) -> float:
        """First-order distance from the line point at ``t`` to the conic."""
        point = self._point_at(t)
        m = self.curve_2.implicit_matrix()
        v = np.array([point.x, point.y, 1.0])
        gradient = 2.0 * (m @ v)[:2]
        norm = float(np.hypot(gradient[0], gradient[1]))
        if norm == 0.0:
            return math.inf
        return abs(float(v @ m @ v)) / norm

    def incidence(self) -> Incidence:
        a, b, c = self._quadratic()
        if abs(a) <= EPS_QUADRATIC:
            return Incidence.INTERSECTING if abs(b) > EPS_QUADRATIC else Incidence.NONE
        if self.contact_gap(-b / (2.0 * a)) <= self.tolerance:
            return Incidence.TANGENT
        return Incidence.INTERSECTING if b * b - 4.0 * a * c > 0.0 else Incidence.NONE

    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        incidence = self.incidence()
        if incidence is Incidence.NONE:
            return []
        a, b, c = self._quadratic()
        if incidence is Incidence.TANGENT:
            return [self._point_at(-b / (2.0 * a))]
        return [self._point_at(t) for t in solve_quadratic(a, b, c, 0.0, EPS_QUADRATIC)]


_DISPATCH: Dict[Tuple[type, type], Type[CurveIntersection]] = {
    (LinearCurve, LinearCurve): LinearLinearIntersection,
    (LinearCurve, CircularCurve): LinearCircularIntersection,
    (CircularCurve, CircularCurve): CircularCircularIntersection,
    (LinearCurve, EllipticalCurve): LinearConicIntersection,
    (LinearCurve, HyperbolicCurve): LinearConicIntersection,
    (LinearCurve, ParabolicCurve): LinearConicIntersection,
}


def _lookup(type_1: type, type_2: type):
    for t1 in type_1.__mro__:
        for t2 in type_2.__mro__:
            handler = _DISPATCH.get((t1, t2))
            if handler is not None:
                return handler
    return None


def intersection_for(curve_1, curve_2) -> CurveIntersection:
    """Intersection query object for a pair of curves, in either order."""
    if curve_1 is curve_2:
        raise IntersectingCurveException('a curve cannot be intersected with itself')
    handler = _lookup(type(curve_1), type(curve_2))
    if handler is not None:
        return handler(curve_1, curve_2)
    handler = _lookup(type(curve_2), type(curve_1))
    if handler is not None:
        return handler(curve_2, curve_1)
    logger.debug('no intersection handler for %s / %s', type(curve_1).__name__, type(curve_2).__name__)
    raise UnsupportedCurveOperation(
        f'intersection of {type(curve_1).__name__} and {type(curve_2).__name__} is not supported')


def incidence(curve_1, curve_2) -> Incidence:
    result = intersection_for(curve_1, curve_2).incidence()
    logger.debug('%s / %s: %s', type(curve_1).__name__, type(curve_2).__name__, result.value)
    return result


def are_tangent(curve_1, curve_2) -> bool:
    return intersection_for(curve_1, curve_2).are_tangent()


def are_intersecting(curve_1, curve_2) -> bool:
    return intersection_for(curve_1, curve_2).are_intersecting()


def intersection_coordinates(curve_1, curve_2) -> List[CartesianCoordinate]:
    return intersection_for(curve_1, curve_2).intersection_coordinates()


def supported_pairs() -> List[Tuple[str, str]]:
    return [(t1.__name__, t2.__name__) for t1, t2 in _DISPATCH]


__all__ = [
    'Incidence',
    'CurveIntersection',
    'LinearLinearIntersection',
    'LinearCircularIntersection',
    'CircularCircularIntersection',
    'LinearConicIntersection',
    'intersection_for',
    'incidence',
    'are_tangent',
    'are_intersecting',
    'intersection_coordinates',
    'supported_pairs',
]
