"""Straight line through two control points.

``LinearCurve`` is both a curve in its own right and the scaffolding other
operations build on (rays from a center, normal lines for projections).
Most instance operations have a static dual working on raw slopes,
intercepts or coordinate pairs.

Sentinels: a horizontal line has ``intercept_x() == inf`` and
``x_at_y() == inf``; a vertical line has ``intercept_y() == inf`` and
``y_at_x() == inf``. Only the slope of a single point is an error.
"""
from __future__ import annotations

import copy
import math
from typing import List, Tuple, Union

from .constants import DEFAULT_TOLERANCE
from .coordinates import Angle, CartesianCoordinate, Vector, _fmt
from .exceptions import DegenerateGeometryError
from .logging_utils import get_logger
from .numerics import governing_tolerance, is_equal, is_zero
from .range import CurveRange

logger = get_logger('conics.linear')

INF = float('inf')


class LinearCurve:
    """Infinite line through ``point_i`` and ``point_j``.

    The curve's range defaults to the segment from ``point_i`` to
    ``point_j``. Input coordinates are copied.
    """

    def __init__(self, point_i: CartesianCoordinate, point_j: CartesianCoordinate,
                 tolerance: float = DEFAULT_TOLERANCE):
        if not tolerance > 0:
            raise ValueError(f'tolerance must be positive, got {tolerance!r}')
        self._tolerance = tolerance
        self._i = point_i.copy(tolerance)
        self._j = point_j.copy(tolerance)
        self.range = CurveRange(self, self._i, self._j)

    # ---------------------------------------------------------------------------------
    # State
    # ---------------------------------------------------------------------------------

    @property
    def control_point_i(self) -> CartesianCoordinate:
        return self._i

    @property
    def control_point_j(self) -> CartesianCoordinate:
        return self._j

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        """Cascade ``value`` to the control points and range limits.

        Not thread-safe; use :meth:`with_tolerance` to get an independent copy.
        """
        if not value > 0:
            raise ValueError(f'tolerance must be positive, got {value!r}')
        self._tolerance = value
        self._i.tolerance = value
        self._j.tolerance = value
        self.range.tolerance = value

    def with_tolerance(self, tolerance: float) -> 'LinearCurve':
        other = self.clone()
        other.tolerance = tolerance
        return other

    def clone(self) -> 'LinearCurve':
        return copy.deepcopy(self)

    clone_curve = clone

    # ---------------------------------------------------------------------------------
    # Slope and intercepts
    # ---------------------------------------------------------------------------------

    @staticmethod
    def slope_of(rise: float, run: float, tolerance: float = DEFAULT_TOLERANCE) -> float:
        """``rise / run`` with signed infinity for a vertical run."""
        if is_zero(run, tolerance):
            if is_zero(rise, tolerance):
                raise DegenerateGeometryError('slope is undefined for coincident points')
            return INF if rise > 0 else -INF
        return rise / run

    @staticmethod
    def slope_between(point_i: CartesianCoordinate, point_j: CartesianCoordinate,
                      tolerance: float = DEFAULT_TOLERANCE) -> float:
        return LinearCurve.slope_of(point_j.y - point_i.y, point_j.x - point_i.x, tolerance)

    def slope(self) -> float:
        return self.slope_between(self._i, self._j, self._tolerance)

    @staticmethod
    def intercept_y_of(slope: float, x_intercept: float) -> float:
        if math.isinf(slope):
            return INF
        return -slope * x_intercept

    @staticmethod
    def intercept_x_of(slope: float, y_intercept: float, tolerance: float = DEFAULT_TOLERANCE) -> float:
        if is_zero(slope, tolerance):
            return INF
        return -y_intercept / slope

    def intercept_x(self) -> float:
        if self.is_horizontal():
            return INF
        if self.is_vertical():
            return self._i.x
        return self._i.x - self._i.y / self.slope()

    def intercept_y(self) -> float:
        if self.is_vertical():
            return INF
        if self.is_horizontal():
            return self._i.y
        return self._i.y - self.slope() * self._i.x

    # ---------------------------------------------------------------------------------
    # Classification
    # ---------------------------------------------------------------------------------

    @staticmethod
    def is_horizontal_between(point_i: CartesianCoordinate, point_j: CartesianCoordinate,
                              tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return is_equal(point_i.y, point_j.y, tolerance)

    @staticmethod
    def is_vertical_between(point_i: CartesianCoordinate, point_j: CartesianCoordinate,
                            tolerance: float = DEFAULT_TOLERANCE) -> bool:
        return is_equal(point_i.x, point_j.x, tolerance)

    def is_horizontal(self) -> bool:
        return self.is_horizontal_between(self._i, self._j, self._tolerance)

    def is_vertical(self) -> bool:
        return self.is_vertical_between(self._i, self._j, self._tolerance)

    @staticmethod
    def slopes_are_parallel(slope_1: float, slope_2: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        # Vertical lines are parallel whatever the sign of their infinite slopes
        if math.isinf(slope_1) or math.isinf(slope_2):
            return math.isinf(slope_1) and math.isinf(slope_2)
        return is_equal(slope_1, slope_2, tolerance)

    @staticmethod
    def slopes_are_perpendicular(slope_1: float, slope_2: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        if math.isinf(slope_1):
            return is_zero(slope_2, tolerance)
        if math.isinf(slope_2):
            return is_zero(slope_1, tolerance)
        return is_equal(slope_1 * slope_2, -1.0, tolerance)

    def is_parallel(self, other: 'LinearCurve') -> bool:
        tol = governing_tolerance(self, other)
        return self.slopes_are_parallel(self.slope(), other.slope(), tol)

    def is_perpendicular(self, other: 'LinearCurve') -> bool:
        tol = governing_tolerance(self, other)
        return self.slopes_are_perpendicular(self.slope(), other.slope(), tol)

    def is_collinear(self, other: 'LinearCurve') -> bool:
        return self.is_parallel(other) and self.is_intersecting_coordinate(other.control_point_i)

    def is_intersecting_curve(self, other: 'LinearCurve') -> bool:
        return not self.is_parallel(other)

    def is_intersecting_coordinate(self, coordinate: CartesianCoordinate) -> bool:
        tol = governing_tolerance(self, coordinate)
        if self.is_vertical():
            return is_equal(coordinate.x, self._i.x, tol)
        if self.is_horizontal():
            return is_equal(coordinate.y, self._i.y, tol)
        return is_equal(self.y_at_x(coordinate.x), coordinate.y, tol)

    # ---------------------------------------------------------------------------------
    # Cartesian position
    # ---------------------------------------------------------------------------------

    def x_at_y(self, y: float) -> float:
        if self.is_horizontal():
            return INF
        if self.is_vertical():
            return self._i.x
        return self._i.x + (y - self._i.y) / self.slope()

    def y_at_x(self, x: float) -> float:
        if self.is_vertical():
            return INF
        if self.is_horizontal():
            return self._i.y
        return self._i.y + self.slope() * (x - self._i.x)

    def xs_at_y(self, y: float) -> List[float]:
        x = self.x_at_y(y)
        return [] if math.isinf(x) else [x]

    def ys_at_x(self, x: float) -> List[float]:
        y = self.y_at_x(x)
        return [] if math.isinf(y) else [y]

    # ---------------------------------------------------------------------------------
    # Polar position (about the global origin)
    # ---------------------------------------------------------------------------------

    def radius_about_origin(self, angle: Union[float, Angle]) -> float:
        """Distance from the origin to the line along the ray at ``angle``.

        ``inf`` when the ray is parallel to the line or points away from it.
        """
        theta = float(angle)
        direction = Vector.from_points(self._i, self._j)
        ray = Vector(math.cos(theta), math.sin(theta))
        denominator = ray.cross(direction)
        if is_zero(denominator, self._tolerance):
            return INF
        radius = Vector(self._i.x, self._i.y).cross(direction) / denominator
        if radius < 0 and not is_zero(radius, self._tolerance):
            return INF
        return max(radius, 0.0)

    def radii_about_origin(self, angle: Union[float, Angle]) -> List[float]:
        radius = self.radius_about_origin(angle)
        return [] if math.isinf(radius) else [radius]

    def coordinate_by_angle(self, angle: Union[float, Angle]) -> CartesianCoordinate:
        radius = self.radius_about_origin(angle)
        if math.isinf(radius):
            return CartesianCoordinate(INF, INF, self._tolerance)
        theta = float(angle)
        return CartesianCoordinate(radius * math.cos(theta), radius * math.sin(theta), self._tolerance)

    # ---------------------------------------------------------------------------------
    # Vectors and measures
    # ---------------------------------------------------------------------------------

    def tangent_vector(self) -> Vector:
        return Vector.unit_tangent(self._j.x - self._i.x, self._j.y - self._i.y, self._tolerance)

    def normal_vector(self) -> Vector:
        return Vector.unit_normal(self._j.x - self._i.x, self._j.y - self._i.y, self._tolerance)

    def curvature(self) -> float:
        return 0.0

    @staticmethod
    def distance_between(point_i: CartesianCoordinate, point_j: CartesianCoordinate) -> float:
        return point_i.distance_to(point_j)

    def length(self) -> float:
        """Length of the segment between the range limits."""
        return self.range.length_linear()

    def chord(self) -> 'LinearCurve':
        return LinearCurve(self.range.start.limit, self.range.end.limit, self._tolerance)

    # ---------------------------------------------------------------------------------
    # Intersections
    # ---------------------------------------------------------------------------------

    @staticmethod
    def line_intersect_x(slope_1: float, y_intercept_1: float,
                         slope_2: float, y_intercept_2: float) -> float:
        """x of the intersection of two non-vertical lines in slope-intercept form."""
        if slope_1 == slope_2:
            return INF
        return (y_intercept_2 - y_intercept_1) / (slope_1 - slope_2)

    @staticmethod
    def line_intersect_y(slope_1: float, y_intercept_1: float,
                         slope_2: float, y_intercept_2: float) -> float:
        x = LinearCurve.line_intersect_x(slope_1, y_intercept_1, slope_2, y_intercept_2)
        if math.isinf(x):
            return INF
        return slope_1 * x + y_intercept_1

    @staticmethod
    def line_intersect(line_1: 'LinearCurve', line_2: 'LinearCurve') -> CartesianCoordinate:
        """Intersection of two lines; ``(inf, inf)`` when they are parallel."""
        tol = governing_tolerance(line_1, line_2)
        if line_1.is_parallel(line_2):
            logger.debug('parallel lines have no single intersection')
            return CartesianCoordinate(INF, INF, tol)
        if line_1.is_vertical():
            x = line_1.control_point_i.x
            return CartesianCoordinate(x, line_2.y_at_x(x), tol)
        if line_2.is_vertical():
            x = line_2.control_point_i.x
            return CartesianCoordinate(x, line_1.y_at_x(x), tol)
        if line_1.is_horizontal():
            y = line_1.control_point_i.y
            return CartesianCoordinate(line_2.x_at_y(y), y, tol)
        if line_2.is_horizontal():
            y = line_2.control_point_i.y
            return CartesianCoordinate(line_1.x_at_y(y), y, tol)
        m1, b1 = line_1.slope(), line_1.intercept_y()
        m2, b2 = line_2.slope(), line_2.intercept_y()
        return CartesianCoordinate(LinearCurve.line_intersect_x(m1, b1, m2, b2),
                                   LinearCurve.line_intersect_y(m1, b1, m2, b2), tol)

    @staticmethod
    def are_lines_intersecting(line_1: 'LinearCurve', line_2: 'LinearCurve') -> bool:
        return not line_1.is_parallel(line_2)

    def intersection_coordinate(self, other: 'LinearCurve') -> CartesianCoordinate:
        return self.line_intersect(self, other)

    def coordinate_of_perpendicular_projection(self, point: CartesianCoordinate) -> CartesianCoordinate:
        """Foot of the perpendicular dropped from ``point`` onto the line."""
        normal = self.normal_vector()
        normal_line = LinearCurve(point, point + normal, governing_tolerance(self, point))
        return self.intersection_coordinate(normal_line)

    # ---------------------------------------------------------------------------------
    # Factories
    # ---------------------------------------------------------------------------------

    @classmethod
    def curve_by_y_intercept(cls, slope: float, y_intercept: float,
                             tolerance: float = DEFAULT_TOLERANCE) -> 'LinearCurve':
        if math.isinf(slope):
            raise DegenerateGeometryError('a vertical line has no y-intercept form')
        return cls(CartesianCoordinate(0.0, y_intercept), CartesianCoordinate(1.0, y_intercept + slope), tolerance)

    @classmethod
    def curve_by_x_intercept(cls, slope: float, x_intercept: float,
                             tolerance: float = DEFAULT_TOLERANCE) -> 'LinearCurve':
        if is_zero(slope, tolerance):
            raise DegenerateGeometryError('a horizontal line has no x-intercept form')
        if math.isinf(slope):
            return cls(CartesianCoordinate(x_intercept, 0.0), CartesianCoordinate(x_intercept, 1.0), tolerance)
        return cls(CartesianCoordinate(x_intercept, 0.0), CartesianCoordinate(x_intercept + 1.0, slope), tolerance)

    # ---------------------------------------------------------------------------------

    def control_points(self) -> Tuple[CartesianCoordinate, CartesianCoordinate]:
        return self._i, self._j

    def __eq__(self, other):
        if not isinstance(other, LinearCurve):
            return NotImplemented
        return self._i == other._i and self._j == other._j

    __hash__ = None

    def __str__(self) -> str:
        slope = self.slope() if not (self._i == self._j) else float('nan')
        return (f'LinearCurve - X-Intercept: {_fmt(self.intercept_x())}, '
                f'Y-Intercept: {_fmt(self.intercept_y())}, Slope: {_fmt(slope)}')

    def __repr__(self) -> str:
        return f'LinearCurve({self._i!r}, {self._j!r})'


__all__ = ['LinearCurve']
