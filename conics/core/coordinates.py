"""Planar value types: Cartesian coordinates, angles, angular offsets and vectors.

Each value carries its own equality tolerance. Comparisons between two values
use the larger of the two tolerances. Values are mutable only through their
``tolerance`` attribute, which curves rewrite when their tolerance cascades.
"""
from __future__ import annotations

import math
from typing import Tuple, Union

from .constants import DEFAULT_TOLERANCE, PI, TWO_PI
from .exceptions import DegenerateGeometryError
from .numerics import governing_tolerance, is_equal, is_zero


def _fmt(value: float) -> str:
    """Text for ``value`` rounded to 12 decimals; integral values print without a decimal point."""
    value = float(value)
    if math.isfinite(value):
        value = round(value, 12) + 0.0
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def wrap_angle(radians: float) -> float:
    """Wrap ``radians`` into (-pi, pi]."""
    if not math.isfinite(radians):
        return radians
    wrapped = math.fmod(radians, TWO_PI)
    if wrapped > PI:
        wrapped -= TWO_PI
    elif wrapped <= -PI:
        wrapped += TWO_PI
    return wrapped


class CartesianCoordinate:
    __slots__ = ('x', 'y', 'tolerance')

    def __init__(self, x: float = 0.0, y: float = 0.0, tolerance: float = DEFAULT_TOLERANCE):
        self.x = float(x)
        self.y = float(y)
        self.tolerance = tolerance

    @classmethod
    def origin(cls, tolerance: float = DEFAULT_TOLERANCE) -> 'CartesianCoordinate':
        return cls(0.0, 0.0, tolerance)

    def copy(self, tolerance: float = None) -> 'CartesianCoordinate':
        return CartesianCoordinate(self.x, self.y, self.tolerance if tolerance is None else tolerance)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def distance_to(self, other: 'CartesianCoordinate') -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def angle_to(self, other: 'CartesianCoordinate') -> 'Angle':
        return Angle.create_from_points(self, other, governing_tolerance(self, other))

    def offset_coordinate(self, distance: float, rotation: Union[float, 'Angle']) -> 'CartesianCoordinate':
        """Coordinate ``distance`` away from this one in direction ``rotation``."""
        theta = float(rotation)
        return CartesianCoordinate(self.x + distance * math.cos(theta),
                                   self.y + distance * math.sin(theta),
                                   self.tolerance)

    def rotate_about(self, center: 'CartesianCoordinate', rotation: Union[float, 'Angle']) -> 'CartesianCoordinate':
        theta = float(rotation)
        c, s = math.cos(theta), math.sin(theta)
        dx, dy = self.x - center.x, self.y - center.y
        return CartesianCoordinate(center.x + c * dx - s * dy, center.y + s * dx + c * dy, self.tolerance)

    def __add__(self, other):
        if isinstance(other, CartesianCoordinate):
            return CartesianCoordinate(self.x + other.x, self.y + other.y, governing_tolerance(self, other))
        if isinstance(other, Vector):
            return CartesianCoordinate(self.x + other.dx, self.y + other.dy, governing_tolerance(self, other))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, CartesianCoordinate):
            return CartesianCoordinate(self.x - other.x, self.y - other.y, governing_tolerance(self, other))
        if isinstance(other, Vector):
            return CartesianCoordinate(self.x - other.dx, self.y - other.dy, governing_tolerance(self, other))
        return NotImplemented

    def __mul__(self, factor: float) -> 'CartesianCoordinate':
        return CartesianCoordinate(self.x * factor, self.y * factor, self.tolerance)

    __rmul__ = __mul__

    def __neg__(self) -> 'CartesianCoordinate':
        return CartesianCoordinate(-self.x, -self.y, self.tolerance)

    def __eq__(self, other):
        if not isinstance(other, CartesianCoordinate):
            return NotImplemented
        tol = governing_tolerance(self, other)
        return is_equal(self.x, other.x, tol) and is_equal(self.y, other.y, tol)

    # Tolerance equality is not transitive
    __hash__ = None

    def __str__(self) -> str:
        return f'{{X: {_fmt(self.x)}, Y: {_fmt(self.y)}}}'

    def __repr__(self) -> str:
        return f'CartesianCoordinate({self.x!r}, {self.y!r})'


class Angle:
    """Planar angle stored in radians, wrapped to (-pi, pi]."""

    __slots__ = ('_radians', 'tolerance')

    def __init__(self, radians: float = 0.0, tolerance: float = DEFAULT_TOLERANCE):
        self._radians = wrap_angle(float(radians))
        self.tolerance = tolerance

    @classmethod
    def origin(cls, tolerance: float = DEFAULT_TOLERANCE) -> 'Angle':
        return cls(0.0, tolerance)

    @classmethod
    def from_degrees(cls, degrees: float, tolerance: float = DEFAULT_TOLERANCE) -> 'Angle':
        return cls(math.radians(degrees), tolerance)

    @classmethod
    def create_from_points(cls, point_i: CartesianCoordinate, point_j: CartesianCoordinate,
                           tolerance: float = DEFAULT_TOLERANCE) -> 'Angle':
        """Direction of the ray from ``point_i`` to ``point_j``."""
        return cls(math.atan2(point_j.y - point_i.y, point_j.x - point_i.x), tolerance)

    @property
    def radians(self) -> float:
        return self._radians

    @property
    def degrees(self) -> float:
        return math.degrees(self._radians)

    def cos(self) -> float:
        return math.cos(self._radians)

    def sin(self) -> float:
        return math.sin(self._radians)

    def copy(self, tolerance: float = None) -> 'Angle':
        return Angle(self._radians, self.tolerance if tolerance is None else tolerance)

    def __float__(self) -> float:
        return self._radians

    def _tolerance_with(self, other) -> float:
        if isinstance(other, Angle):
            return governing_tolerance(self, other)
        return self.tolerance

    def __add__(self, other):
        if isinstance(other, (Angle, int, float)):
            return Angle(self._radians + float(other), self._tolerance_with(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, (Angle, int, float)):
            return Angle(self._radians - float(other), self._tolerance_with(other))
        return NotImplemented

    def __neg__(self) -> 'Angle':
        return Angle(-self._radians, self.tolerance)

    def __eq__(self, other):
        if isinstance(other, Angle):
            tol = governing_tolerance(self, other)
            diff = wrap_angle(self._radians - other._radians)
            return is_zero(diff, tol)
        if isinstance(other, (int, float)):
            return is_zero(wrap_angle(self._radians - float(other)), self.tolerance)
        return NotImplemented

    __hash__ = None

    def __str__(self) -> str:
        return f'{_fmt(self._radians)} rad'

    def __repr__(self) -> str:
        return f'Angle({self._radians!r})'


class AngularOffset:
    """Signed, unwrapped angular sweep ``delta`` in radians."""

    __slots__ = ('delta', 'tolerance')

    def __init__(self, delta: float = 0.0, tolerance: float = DEFAULT_TOLERANCE):
        self.delta = float(delta)
        self.tolerance = tolerance

    @classmethod
    def create_from_angles(cls, angle_i: Union[float, Angle], angle_j: Union[float, Angle],
                           tolerance: float = DEFAULT_TOLERANCE) -> 'AngularOffset':
        return cls(float(angle_j) - float(angle_i), tolerance)

    @classmethod
    def create_from_points(cls, center: CartesianCoordinate, point_i: CartesianCoordinate,
                           point_j: CartesianCoordinate,
                           tolerance: float = DEFAULT_TOLERANCE) -> 'AngularOffset':
        """Counter-clockwise sweep about ``center`` from ``point_i`` to ``point_j``, in (-pi, pi]."""
        angle_i = math.atan2(point_i.y - center.y, point_i.x - center.x)
        angle_j = math.atan2(point_j.y - center.y, point_j.x - center.x)
        return cls(wrap_angle(angle_j - angle_i), tolerance)

    @property
    def radians(self) -> float:
        return self.delta

    @property
    def degrees(self) -> float:
        return math.degrees(self.delta)

    def to_angle(self) -> Angle:
        return Angle(self.delta, self.tolerance)

    def length_arc(self, radius: float) -> float:
        return radius * self.delta

    def __eq__(self, other):
        if not isinstance(other, AngularOffset):
            return NotImplemented
        return is_equal(self.delta, other.delta, governing_tolerance(self, other))

    __hash__ = None

    def __repr__(self) -> str:
        return f'AngularOffset({self.delta!r})'


class Vector:
    __slots__ = ('dx', 'dy', 'tolerance')

    def __init__(self, dx: float = 0.0, dy: float = 0.0, tolerance: float = DEFAULT_TOLERANCE):
        self.dx = float(dx)
        self.dy = float(dy)
        self.tolerance = tolerance

    @classmethod
    def from_points(cls, point_i: CartesianCoordinate, point_j: CartesianCoordinate) -> 'Vector':
        return cls(point_j.x - point_i.x, point_j.y - point_i.y, governing_tolerance(point_i, point_j))

    @classmethod
    def unit_tangent(cls, dx: float, dy: float, tolerance: float = DEFAULT_TOLERANCE) -> 'Vector':
        """Unit vector along (dx, dy)."""
        return cls(dx, dy, tolerance).normalized()

    @classmethod
    def unit_normal(cls, dx: float, dy: float, tolerance: float = DEFAULT_TOLERANCE) -> 'Vector':
        """Unit vector along (dx, dy) rotated a quarter turn counter-clockwise."""
        return cls(-dy, dx, tolerance).normalized()

    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)

    def normalized(self) -> 'Vector':
        length = self.magnitude()
        if length == 0.0 or not math.isfinite(length):
            raise DegenerateGeometryError(f'cannot normalize vector ({self.dx}, {self.dy})')
        return Vector(self.dx / length, self.dy / length, self.tolerance)

    def dot(self, other: 'Vector') -> float:
        return self.dx * other.dx + self.dy * other.dy

    def cross(self, other: 'Vector') -> float:
        return self.dx * other.dy - self.dy * other.dx

    def __mul__(self, factor: float) -> 'Vector':
        return Vector(self.dx * factor, self.dy * factor, self.tolerance)

    __rmul__ = __mul__

    def __neg__(self) -> 'Vector':
        return Vector(-self.dx, -self.dy, self.tolerance)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        tol = governing_tolerance(self, other)
        return is_equal(self.dx, other.dx, tol) and is_equal(self.dy, other.dy, tol)

    __hash__ = None

    def __str__(self) -> str:
        return f'{{dX: {_fmt(self.dx)}, dY: {_fmt(self.dy)}}}'

    def __repr__(self) -> str:
        return f'Vector({self.dx!r}, {self.dy!r})'


__all__ = [
    'CartesianCoordinate',
    'Angle',
    'AngularOffset',
    'Vector',
    'wrap_angle',
]
