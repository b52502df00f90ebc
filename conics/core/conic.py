"""Shared model for conic-section curves.

A conic is defined by four stored values: the rotation of its local +x axis,
its focus, its major vertex and the distance ``a`` from that vertex to the
local origin. Everything else (eccentricity, semi-minor axis, semi-latus
rectum, directrix, vertices) is derived on access from a per-kind invariant
strategy, so the values stay consistent however the curve was constructed.

Frames
------
* Local frame: origin at the ellipse/hyperbola center or parabola vertex,
  +x along the major axis towards the major vertex (ellipse, circle) or
  towards the focus (hyperbola, parabola).
* Angle-indexed queries (``*_by_angle``, ``radius_about_*``,
  ``x_by_rotation_*``) take the curve parameter or a focal/vertex angle and
  answer in the local frame. ``coordinate_by_angle`` returns a global point.
* Cartesian queries (``x_at_y``, ``ys_at_x``, ...) take and return global
  coordinates; they solve the implicit equation of the rotated, translated
  curve.

Mutating ``tolerance`` is not thread-safe. ``with_tolerance`` returns an
independent copy instead.
"""
from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np

from . import arc_length as _arc
from .config import ArcLengthConfig
from .constants import DEFAULT_TOLERANCE, EPS_DENOMINATOR, EPS_QUADRATIC, TWO_PI
from .coordinates import Angle, CartesianCoordinate, Vector
from .exceptions import DegenerateGeometryError
from .linear import LinearCurve
from .logging_utils import get_logger
from .numerics import governing_tolerance, is_equal, is_zero, solve_quadratic
from .range import CurveRange

logger = get_logger('conics.conic')

INF = float('inf')
AngleLike = Union[float, Angle]


# ---------------------------------------------------------------------------------------
# Invariant strategies
# ---------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ConicInvariants:
    """Derived shape values of a conic.

    ``a``: vertex to local origin, ``c``: focus to local origin, ``b``: minor
    vertex to major axis, ``e``: eccentricity, ``p``: semi-latus rectum,
    ``directrix_x``: signed local x of the directrix,
    ``focus_to_directrix``: distance from focus to directrix.
    """
    a: float
    c: float
    b: float
    e: float
    p: float
    directrix_x: float
    focus_to_directrix: float


def circular_invariants(a: float, focal_distance: float) -> ConicInvariants:
    return ConicInvariants(a=a, c=0.0, b=a, e=0.0, p=a, directrix_x=INF, focus_to_directrix=INF)


def elliptical_invariants(a: float, focal_distance: float) -> ConicInvariants:
    c = a - focal_distance
    e = c / a
    b = math.sqrt(max(a * a - c * c, 0.0))
    directrix_x = a * a / c if c > 0 else INF
    return ConicInvariants(a=a, c=c, b=b, e=e, p=a * (1.0 - e * e),
                           directrix_x=directrix_x, focus_to_directrix=directrix_x - c)


def hyperbolic_invariants(a: float, focal_distance: float) -> ConicInvariants:
    c = a + focal_distance
    e = c / a
    b = math.sqrt(max(c * c - a * a, 0.0))
    directrix_x = a * a / c
    return ConicInvariants(a=a, c=c, b=b, e=e, p=a * (e * e - 1.0),
                           directrix_x=directrix_x, focus_to_directrix=c - directrix_x)


def parabolic_invariants(a: float, focal_distance: float) -> ConicInvariants:
    f = focal_distance
    return ConicInvariants(a=0.0, c=f, b=0.0, e=1.0, p=2.0 * f,
                           directrix_x=-f, focus_to_directrix=2.0 * f)


# ---------------------------------------------------------------------------------------
# Base curve
# ---------------------------------------------------------------------------------------

class ConicSectionCurve(ABC):
    """Abstract conic section.

    Subclasses supply the invariant strategy, the local parametric form and
    its derivatives, the local implicit coefficients and the chord length
    from the major vertex.
    """

    _invariants_strategy = None
    # +1 when the major vertex lies on the +x side of the focus, else -1
    _focus_radius_sign: int = 1

    def _define(self, vertex_major: CartesianCoordinate, focus: CartesianCoordinate,
                a: float, rotation: AngleLike, tolerance: float = DEFAULT_TOLERANCE) -> None:
        if not tolerance > 0:
            raise ValueError(f'tolerance must be positive, got {tolerance!r}')
        self._tolerance = tolerance
        self._vertex_major = vertex_major.copy(tolerance)
        self._focus = focus.copy(tolerance)
        self._a = float(a)
        self._rotation = Angle(float(rotation), tolerance)
        self.range = CurveRange(self, self._vertex_major, self._vertex_major)

    @classmethod
    def from_definition(cls, vertex_major: CartesianCoordinate, focus: CartesianCoordinate,
                        a: float, rotation: AngleLike,
                        tolerance: float = DEFAULT_TOLERANCE) -> 'ConicSectionCurve':
        """Build a curve directly from its stored state."""
        curve = cls.__new__(cls)
        curve._define(vertex_major, focus, a, rotation, tolerance)
        return curve

    # -- tolerance ------------------------------------------------------------------------

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        """Cascade ``value`` to every stored coordinate, the rotation and the range."""
        if not value > 0:
            raise ValueError(f'tolerance must be positive, got {value!r}')
        self._tolerance = value
        self._vertex_major.tolerance = value
        self._focus.tolerance = value
        self._rotation.tolerance = value
        self.range.tolerance = value
        logger.debug('%s tolerance set to %g', type(self).__name__, value)

    def with_tolerance(self, tolerance: float) -> 'ConicSectionCurve':
        other = self.clone()
        other.tolerance = tolerance
        return other

    def clone(self) -> 'ConicSectionCurve':
        return copy.deepcopy(self)

    clone_curve = clone

    # -- stored and derived state ---------------------------------------------------------

    @property
    def rotation(self) -> Angle:
        return self._rotation

    @property
    def focus(self) -> CartesianCoordinate:
        return self._focus

    @property
    def vertex_major(self) -> CartesianCoordinate:
        return self._vertex_major

    @property
    def invariants(self) -> ConicInvariants:
        focal_distance = self._focus.distance_to(self._vertex_major)
        return type(self)._invariants_strategy(self._a, focal_distance)

    @property
    def distance_from_vertex_major_to_local_origin(self) -> float:
        return self.invariants.a

    @property
    def distance_from_focus_to_local_origin(self) -> float:
        return self.invariants.c

    @property
    def distance_from_vertex_minor_to_major_axis(self) -> float:
        return self.invariants.b

    @property
    def eccentricity(self) -> float:
        return self.invariants.e

    @property
    def semilatus_rectum_distance(self) -> float:
        return self.invariants.p

    @property
    def distance_from_directrix_to_local_origin(self) -> float:
        return self.invariants.directrix_x

    @property
    def distance_from_focus_to_directrix(self) -> float:
        return self.invariants.focus_to_directrix

    @property
    def local_origin(self) -> CartesianCoordinate:
        return self._focus.offset_coordinate(-self.invariants.c, self._rotation)

    @property
    def directrix(self) -> LinearCurve:
        return self._directrix_at(self.invariants.directrix_x)

    @property
    def vertices_major(self) -> Tuple[CartesianCoordinate, CartesianCoordinate]:
        a = self.invariants.a
        return self._vertex_major.copy(), self.local_to_global(-a, 0.0)

    @property
    def vertices_minor(self) -> Tuple[CartesianCoordinate, CartesianCoordinate]:
        b = self.invariants.b
        return self.local_to_global(0.0, b), self.local_to_global(0.0, -b)

    def _directrix_at(self, local_x: float) -> LinearCurve:
        if math.isinf(local_x):
            return LinearCurve(CartesianCoordinate(local_x, 0.0), CartesianCoordinate(local_x, 1.0),
                               self._tolerance)
        return LinearCurve(self.local_to_global(local_x, 0.0), self.local_to_global(local_x, 1.0),
                           self._tolerance)

    # -- frames ---------------------------------------------------------------------------

    def local_to_global(self, u: float, v: float) -> CartesianCoordinate:
        origin = self.local_origin
        cos_r, sin_r = self._rotation.cos(), self._rotation.sin()
        return CartesianCoordinate(origin.x + cos_r * u - sin_r * v,
                                   origin.y + sin_r * u + cos_r * v,
                                   self._tolerance)

    def global_to_local(self, coordinate: CartesianCoordinate) -> Tuple[float, float]:
        origin = self.local_origin
        cos_r, sin_r = self._rotation.cos(), self._rotation.sin()
        dx, dy = coordinate.x - origin.x, coordinate.y - origin.y
        return cos_r * dx + sin_r * dy, -sin_r * dx + cos_r * dy

    def _rotate_to_global(self, du: float, dv: float) -> Tuple[float, float]:
        cos_r, sin_r = self._rotation.cos(), self._rotation.sin()
        return cos_r * du - sin_r * dv, sin_r * du + cos_r * dv

    # -- kind-specific pieces -------------------------------------------------------------

    @abstractmethod
    def local_position(self, t):
        """Local (x, y) at curve parameter ``t``; accepts numpy arrays."""

    @abstractmethod
    def local_derivative(self, t):
        """First derivative (dx/dt, dy/dt) at ``t``."""

    @abstractmethod
    def local_second_derivative(self, t):
        """Second derivative (d2x/dt2, d2y/dt2) at ``t``."""

    @abstractmethod
    def implicit_coefficients(self) -> Tuple[float, float, float, float, float, float]:
        """Local ``(A, B, C, D, E, F)`` of ``A u^2 + B uv + C v^2 + D u + E v + F = 0``."""

    @abstractmethod
    def parameter_at_local(self, u: float, v: float) -> float:
        """Curve parameter of the local point ``(u, v)`` lying on the curve."""

    @abstractmethod
    def radius_about_vertex_major_left(self, angle: AngleLike) -> float:
        """Chord length from the major vertex on the local -x side along ``angle``."""

    def radius_about_vertex_major_right(self, angle: AngleLike) -> float:
        return self.radius_about_vertex_major_left(math.pi - float(angle))

    # -- parametric queries (local frame) -------------------------------------------------

    def x_by_rotation_about_origin(self, angle: AngleLike) -> float:
        return float(self.local_position(float(angle))[0])

    def y_by_rotation_about_origin(self, angle: AngleLike) -> float:
        return float(self.local_position(float(angle))[1])

    def radius_about_origin(self, angle: AngleLike) -> float:
        x, y = self.local_position(float(angle))
        return float(math.hypot(x, y))

    def radius_about_offset(self, angle: AngleLike, offset: CartesianCoordinate) -> float:
        """Distance from the local point ``offset`` to the curve point at ``angle``."""
        x, y = self.local_position(float(angle))
        return float(math.hypot(x - offset.x, y - offset.y))

    def radii_about_origin(self, angle: AngleLike) -> List[float]:
        """Distances along the ray from the local origin at polar ``angle`` to every crossing."""
        theta = float(angle)
        c, s = math.cos(theta), math.sin(theta)
        A, B, C, D, E, F = self.implicit_coefficients()
        roots = self._roots(A * c * c + B * c * s + C * s * s, D * c + E * s, F)
        return sorted(r for r in roots if r >= 0 or is_zero(r, self._tolerance))

    def coordinate_by_angle(self, angle: AngleLike) -> CartesianCoordinate:
        x, y = self.local_position(float(angle))
        return self.local_to_global(float(x), float(y))

    def slope_by_angle(self, angle: AngleLike) -> float:
        dx, dy = self.local_derivative(float(angle))
        return LinearCurve.slope_of(float(dy), float(dx), EPS_DENOMINATOR)

    def curvature_by_angle(self, angle: AngleLike) -> float:
        t = float(angle)
        dx, dy = self.local_derivative(t)
        ddx, ddy = self.local_second_derivative(t)
        denominator = (dx * dx + dy * dy) ** 1.5
        if denominator == 0:
            return INF
        return float((dx * ddy - dy * ddx) / denominator)

    def tangential_angle_by_angle(self, angle: AngleLike) -> Angle:
        dx, dy = self.local_derivative(float(angle))
        return Angle(math.atan2(dy, dx), self._tolerance)

    def polar_tangential_angle_by_angle(self, angle: AngleLike) -> Angle:
        """Angle between the radius from the local origin and the tangent."""
        t = float(angle)
        x, y = self.local_position(t)
        dx, dy = self.local_derivative(t)
        radius = math.hypot(x, y)
        if radius == 0:
            return Angle(math.atan2(dy, dx), self._tolerance)
        radius_rate = (x * dx + y * dy) / radius
        return Angle(math.atan2(radius, radius_rate), self._tolerance)

    def tangent_vector_by_angle(self, angle: AngleLike) -> Vector:
        dx, dy = self.local_derivative(float(angle))
        return Vector.unit_tangent(float(dx), float(dy), self._tolerance)

    def normal_vector_by_angle(self, angle: AngleLike) -> Vector:
        dx, dy = self.local_derivative(float(angle))
        return Vector.unit_normal(float(dx), float(dy), self._tolerance)

    def local_points(self, t) -> Tuple[np.ndarray, np.ndarray]:
        x, y = self.local_position(np.asarray(t, dtype=float))
        return np.asarray(x, dtype=float), np.asarray(y, dtype=float)

    def global_points(self, t) -> np.ndarray:
        """``(N, 2)`` array of global points at parameters ``t``."""
        u, v = self.local_points(t)
        origin = self.local_origin
        cos_r, sin_r = self._rotation.cos(), self._rotation.sin()
        x = origin.x + cos_r * u - sin_r * v
        y = origin.y + sin_r * u + cos_r * v
        return np.column_stack([np.atleast_1d(x), np.atleast_1d(y)])

    # -- focal radii ----------------------------------------------------------------------

    def radius_about_focus_right(self, angle: AngleLike) -> float:
        """Focal radius ``p / (1 + s e cos(angle))`` about the focus on the local +x side.

        ``s`` is +1 for curves whose major vertex lies beyond the focus and -1
        otherwise. A vanishing denominator yields ``inf``.
        """
        inv = self.invariants
        denominator = 1.0 + self._focus_radius_sign * inv.e * math.cos(float(angle))
        if abs(denominator) <= EPS_DENOMINATOR:
            return INF
        return inv.p / denominator

    def radius_about_focus_left(self, angle: AngleLike) -> float:
        return self.radius_about_focus_right(math.pi - float(angle))

    def x_by_rotation_about_focus_right(self, angle: AngleLike) -> float:
        theta = float(angle)
        return self.invariants.c + self.radius_about_focus_right(theta) * math.cos(theta)

    def y_by_rotation_about_focus_right(self, angle: AngleLike) -> float:
        theta = float(angle)
        return self.radius_about_focus_right(theta) * math.sin(theta)

    def x_by_rotation_about_focus_left(self, angle: AngleLike) -> float:
        theta = float(angle)
        return -self.invariants.c + self.radius_about_focus_left(theta) * math.cos(theta)

    def y_by_rotation_about_focus_left(self, angle: AngleLike) -> float:
        theta = float(angle)
        return self.radius_about_focus_left(theta) * math.sin(theta)

    def rotation_about_origin_from_focus_right(self, angle: AngleLike) -> Angle:
        """Polar angle about the local origin of the point seen from the right focus at ``angle``."""
        return Angle(math.atan2(self.y_by_rotation_about_focus_right(angle),
                                self.x_by_rotation_about_focus_right(angle)), self._tolerance)

    def rotation_about_origin_from_focus_left(self, angle: AngleLike) -> Angle:
        return Angle(math.atan2(self.y_by_rotation_about_focus_left(angle),
                                self.x_by_rotation_about_focus_left(angle)), self._tolerance)

    def rotation_about_focus_right_from_origin(self, angle: AngleLike) -> Angle:
        """Angle from the right focus to the curve point at parameter ``angle``."""
        x, y = self.local_position(float(angle))
        return Angle(math.atan2(y, x - self.invariants.c), self._tolerance)

    def rotation_about_focus_left_from_origin(self, angle: AngleLike) -> Angle:
        x, y = self.local_position(float(angle))
        return Angle(math.atan2(y, x + self.invariants.c), self._tolerance)

    # -- cartesian queries (global frame) -------------------------------------------------

    def implicit_matrix(self) -> np.ndarray:
        """Symmetric 3x3 matrix ``M`` with ``[x y 1] M [x y 1]^T = 0`` on the curve (global)."""
        A, B, C, D, E, F = self.implicit_coefficients()
        local = np.array([[A, B / 2.0, D / 2.0],
                          [B / 2.0, C, E / 2.0],
                          [D / 2.0, E / 2.0, F]], dtype=float)
        origin = self.local_origin
        cos_r, sin_r = self._rotation.cos(), self._rotation.sin()
        to_local = np.array([[cos_r, sin_r, -(cos_r * origin.x + sin_r * origin.y)],
                             [-sin_r, cos_r, sin_r * origin.x - cos_r * origin.y],
                             [0.0, 0.0, 1.0]])
        return to_local.T @ local @ to_local

    def implicit_value(self, coordinate: CartesianCoordinate) -> float:
        point = np.array([coordinate.x, coordinate.y, 1.0])
        return float(point @ self.implicit_matrix() @ point)

    def _roots(self, a: float, b: float, c: float) -> List[float]:
        scale = max(abs(a), abs(b), abs(c))
        if scale == 0.0:
            return []
        return solve_quadratic(a / scale, b / scale, c / scale, self._tolerance, EPS_QUADRATIC)

    def ys_at_x(self, x: float) -> List[float]:
        m = self.implicit_matrix()
        return [float(y) for y in self._roots(m[1, 1],
                                             2.0 * (m[0, 1] * x + m[1, 2]),
                                             m[0, 0] * x * x + 2.0 * m[0, 2] * x + m[2, 2])]

    def xs_at_y(self, y: float) -> List[float]:
        m = self.implicit_matrix()
        return [float(x) for x in self._roots(m[0, 0],
                                             2.0 * (m[0, 1] * y + m[0, 2]),
                                             m[1, 1] * y * y + 2.0 * m[1, 2] * y + m[2, 2])]

    def y_at_x(self, x: float) -> float:
        ys = self.ys_at_x(x)
        return max(ys) if ys else INF

    def x_at_y(self, y: float) -> float:
        xs = self.xs_at_y(y)
        return max(xs) if xs else INF

    def is_intersecting_coordinate(self, coordinate: CartesianCoordinate) -> bool:
        tol = governing_tolerance(self, coordinate)
        # Near a vertical tangent the vertical query misses; the horizontal one does not
        return (any(is_equal(y, coordinate.y, tol) for y in self.ys_at_x(coordinate.x))
                or any(is_equal(x, coordinate.x, tol) for x in self.xs_at_y(coordinate.y)))

    def _slope_at(self, x: float, y: float) -> float:
        m = self.implicit_matrix()
        grad_x = m[0, 0] * x + m[0, 1] * y + m[0, 2]
        grad_y = m[0, 1] * x + m[1, 1] * y + m[1, 2]
        return LinearCurve.slope_of(-grad_x, grad_y, EPS_DENOMINATOR)

    def slopes_at_x(self, x: float) -> List[float]:
        return [self._slope_at(x, y) for y in self.ys_at_x(x)]

    def slopes_at_y(self, y: float) -> List[float]:
        return [self._slope_at(x, y) for x in self.xs_at_y(y)]

    # -- range-based measures -------------------------------------------------------------

    def parameter_at(self, coordinate: CartesianCoordinate) -> float:
        u, v = self.global_to_local(coordinate)
        return self.parameter_at_local(u, v)

    def parameter_span(self) -> Tuple[float, float]:
        """Curve parameters of the range start and end limits."""
        return self.parameter_at(self.range.start.limit), self.parameter_at(self.range.end.limit)

    def _parameter_at_relative(self, relative_position: float,
                               config: Optional[ArcLengthConfig] = None) -> float:
        CurveRange.validate_relative_position(relative_position, self._tolerance)
        t_start, t_end = self.parameter_span()
        return _arc.parameter_at_fraction(self, t_start, t_end, relative_position, config)

    def length(self, config: Optional[ArcLengthConfig] = None) -> float:
        """Arc length between the range limits."""
        t_start, t_end = self.parameter_span()
        return abs(_arc.arc_length(self, t_start, t_end, config))

    def length_between_relative(self, relative_start: float, relative_end: float,
                                config: Optional[ArcLengthConfig] = None) -> float:
        """Arc length between two relative positions in [0, 1] of the range."""
        t0 = self._parameter_at_relative(relative_start, config)
        t1 = self._parameter_at_relative(relative_end, config)
        return abs(_arc.arc_length(self, t0, t1, config))

    def coordinate_cartesian(self, relative_position: float,
                             config: Optional[ArcLengthConfig] = None) -> CartesianCoordinate:
        return self.coordinate_by_angle(self._parameter_at_relative(relative_position, config))

    def tangent_vector(self, relative_position: float) -> Vector:
        t = self._parameter_at_relative(relative_position)
        dx, dy = self._rotate_to_global(*self.local_derivative(t))
        return Vector.unit_tangent(float(dx), float(dy), self._tolerance)

    def normal_vector(self, relative_position: float) -> Vector:
        t = self._parameter_at_relative(relative_position)
        dx, dy = self._rotate_to_global(*self.local_derivative(t))
        return Vector.unit_normal(float(dx), float(dy), self._tolerance)

    def chord(self) -> LinearCurve:
        return LinearCurve(self.range.start.limit, self.range.end.limit, self._tolerance)

    def chord_length(self) -> float:
        return self.range.length_linear()

    def chord_between(self, relative_start: float, relative_end: float) -> LinearCurve:
        return LinearCurve(self.coordinate_cartesian(relative_start),
                           self.coordinate_cartesian(relative_end), self._tolerance)

    def chord_length_between(self, relative_start: float, relative_end: float) -> float:
        return self.coordinate_cartesian(relative_start).distance_to(self.coordinate_cartesian(relative_end))

    def __repr__(self) -> str:
        return f'{type(self).__name__}(focus={self._focus!r}, vertex_major={self._vertex_major!r}, a={self._a!r})'


# ---------------------------------------------------------------------------------------
# Traits
# ---------------------------------------------------------------------------------------

class ClosedCurve:
    """Trait for closed conics (circle, ellipse): elliptic parametric form ``(a cos t, b sin t)``."""

    def local_position(self, t):
        inv = self.invariants
        return inv.a * np.cos(t), inv.b * np.sin(t)

    def local_derivative(self, t):
        inv = self.invariants
        return -inv.a * np.sin(t), inv.b * np.cos(t)

    def local_second_derivative(self, t):
        inv = self.invariants
        return -inv.a * np.cos(t), -inv.b * np.sin(t)

    def implicit_coefficients(self):
        inv = self.invariants
        return 1.0 / inv.a ** 2, 0.0, 1.0 / inv.b ** 2, 0.0, 0.0, -1.0

    def parameter_at_local(self, u: float, v: float) -> float:
        inv = self.invariants
        return math.atan2(v / inv.b, u / inv.a)

    def radius_about_vertex_major_left(self, angle: AngleLike) -> float:
        theta = float(angle)
        inv = self.invariants
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        denominator = inv.b ** 2 * cos_t ** 2 + inv.a ** 2 * sin_t ** 2
        radius = 2.0 * inv.a * inv.b ** 2 * cos_t / denominator
        return max(radius, 0.0)

    def is_closed_curve(self) -> bool:
        """True while the range start and end limits coincide."""
        return self.range.start.limit == self.range.end.limit

    def parameter_span(self) -> Tuple[float, float]:
        # Counter-clockwise sweep; coincident limits sweep the whole curve
        t_start = self.parameter_at(self.range.start.limit)
        t_end = self.parameter_at(self.range.end.limit)
        if self.is_closed_curve():
            return t_start, t_start + TWO_PI
        while t_end <= t_start:
            t_end += TWO_PI
        return t_start, t_end


class TwoFociCurve:
    """Trait for conics with a second focus and directrix (ellipse, hyperbola)."""

    @property
    def focus2(self) -> CartesianCoordinate:
        return self.local_to_global(-self.invariants.c, 0.0)

    @property
    def directrix2(self) -> LinearCurve:
        return self._directrix_at(-self.invariants.directrix_x)

    @property
    def foci(self) -> Tuple[CartesianCoordinate, CartesianCoordinate]:
        return self.focus.copy(), self.focus2

    @property
    def directrices(self) -> Tuple[LinearCurve, LinearCurve]:
        return self.directrix, self.directrix2


def require_positive(name: str, value: float) -> float:
    value = float(value)
    if not value > 0 or math.isinf(value):
        raise DegenerateGeometryError(f'{name} must be positive and finite, got {value!r}')
    return value


__all__ = [
    'ConicInvariants',
    'ConicSectionCurve',
    'ClosedCurve',
    'TwoFociCurve',
    'circular_invariants',
    'elliptical_invariants',
    'hyperbolic_invariants',
    'parabolic_invariants',
    'require_positive',
]
