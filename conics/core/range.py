"""Curve limits and ranges.

A :class:`CurveLimit` pins one end of a finite arc to a coordinate on its
owning curve; a :class:`CurveRange` pairs a start and an end limit. Limits can
be placed by x, by y, by rotation or by an explicit coordinate, provided the
curve exposes the matching capability.
"""
from __future__ import annotations

import math
from typing import List, Optional, Protocol, Tuple, Union, runtime_checkable

from .constants import DEFAULT_TOLERANCE, PI, TWO_PI
from .coordinates import Angle, CartesianCoordinate, Vector
from .exceptions import LimitOutOfRangeError, UnsupportedCurveOperation
from .logging_utils import get_logger
from .numerics import is_within_inclusive

logger = get_logger('conics.range')


@runtime_checkable
class CartesianPosition(Protocol):
    """Curves that can be queried by global x or y."""

    def x_at_y(self, y: float) -> float: ...

    def y_at_x(self, x: float) -> float: ...

    def xs_at_y(self, y: float) -> List[float]: ...

    def ys_at_x(self, x: float) -> List[float]: ...

    def is_intersecting_coordinate(self, coordinate: CartesianCoordinate) -> bool: ...


@runtime_checkable
class PolarPosition(Protocol):
    """Curves that can be queried by angle."""

    def radius_about_origin(self, angle: Union[float, Angle]) -> float: ...

    def coordinate_by_angle(self, angle: Union[float, Angle]) -> CartesianCoordinate: ...


def _require_cartesian(curve) -> None:
    if not isinstance(curve, CartesianPosition):
        raise UnsupportedCurveOperation(f'{type(curve).__name__} does not support cartesian position queries')


def _require_polar(curve) -> None:
    if not isinstance(curve, PolarPosition):
        raise UnsupportedCurveOperation(f'{type(curve).__name__} does not support polar position queries')


def _checked(coordinate: CartesianCoordinate, what: str) -> CartesianCoordinate:
    if not coordinate.is_finite():
        logger.debug("limit rejected, curve has no point for %s", what)
        raise LimitOutOfRangeError(f'no point on the curve for {what}')
    return coordinate


def _curve_tolerance(curve) -> float:
    return getattr(curve, 'tolerance', DEFAULT_TOLERANCE)


class CurveLimit:
    """One bounding coordinate of a curve."""

    def __init__(self, curve, limit: Optional[CartesianCoordinate] = None):
        self._curve = curve
        tol = _curve_tolerance(curve)
        self._limit = CartesianCoordinate.origin(tol) if limit is None else limit.copy(tol)

    @property
    def curve(self):
        return self._curve

    @property
    def limit(self) -> CartesianCoordinate:
        return self._limit

    @property
    def tolerance(self) -> float:
        return self._limit.tolerance

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        self._limit.tolerance = value

    # -- static resolution of limits against a curve -------------------------------------

    @staticmethod
    def get_limit_by_x(x: float, curve) -> CartesianCoordinate:
        _require_cartesian(curve)
        y = curve.y_at_x(x)
        return _checked(CartesianCoordinate(x, y, _curve_tolerance(curve)), f'x = {x}')

    @staticmethod
    def get_limit_by_y(y: float, curve) -> CartesianCoordinate:
        _require_cartesian(curve)
        x = curve.x_at_y(y)
        return _checked(CartesianCoordinate(x, y, _curve_tolerance(curve)), f'y = {y}')

    @staticmethod
    def get_limit_by_rotation(rotation: Union[float, Angle], curve) -> CartesianCoordinate:
        _require_polar(curve)
        coordinate = curve.coordinate_by_angle(rotation)
        return _checked(coordinate.copy(_curve_tolerance(curve)), f'rotation = {float(rotation)}')

    @staticmethod
    def get_limit_by_coordinate(coordinate: CartesianCoordinate, curve) -> CartesianCoordinate:
        _require_cartesian(curve)
        if not curve.is_intersecting_coordinate(coordinate):
            raise LimitOutOfRangeError(f'coordinate {coordinate} does not lie on the curve')
        return coordinate.copy(_curve_tolerance(curve))

    # -- mutation --------------------------------------------------------------------------

    def set_limit_by_x(self, x: float) -> None:
        self._limit = self.get_limit_by_x(x, self._curve)

    def set_limit_by_y(self, y: float) -> None:
        self._limit = self.get_limit_by_y(y, self._curve)

    def set_limit_by_rotation(self, rotation: Union[float, Angle]) -> None:
        self._limit = self.get_limit_by_rotation(rotation, self._curve)

    def set_limit_by_coordinate(self, coordinate: CartesianCoordinate) -> None:
        self._limit = self.get_limit_by_coordinate(coordinate, self._curve)

    def limit_polar(self) -> Tuple[float, Angle]:
        """Limit as (radius, angle) about the global origin."""
        radius = math.hypot(self._limit.x, self._limit.y)
        return radius, Angle(math.atan2(self._limit.y, self._limit.x), self.tolerance)

    def clone(self) -> 'CurveLimit':
        return CurveLimit(self._curve, self._limit)

    clone_limit = clone

    def __repr__(self) -> str:
        return f'CurveLimit({self._limit!r})'


class CurveRange:
    """Start and end limits bounding a curve to a finite arc."""

    def __init__(self, curve, start: Optional[CartesianCoordinate] = None,
                 end: Optional[CartesianCoordinate] = None):
        self._curve = curve
        self.start = CurveLimit(curve, start)
        self.end = CurveLimit(curve, end)

    @property
    def curve(self):
        return self._curve

    @property
    def tolerance(self) -> float:
        return max(self.start.tolerance, self.end.tolerance)

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        self.start.tolerance = value
        self.end.tolerance = value

    def _origin(self) -> CartesianCoordinate:
        # Angular/radial separations are measured about the curve's own frame
        origin = getattr(self._curve, 'local_origin', None)
        return origin if origin is not None else CartesianCoordinate.origin(self.tolerance)

    def to_offset(self) -> Vector:
        return Vector.from_points(self.start.limit, self.end.limit)

    def length_linear(self) -> float:
        return self.start.limit.distance_to(self.end.limit)

    def length_x(self) -> float:
        return abs(self.end.limit.x - self.start.limit.x)

    def length_y(self) -> float:
        return abs(self.end.limit.y - self.start.limit.y)

    def length_radius(self) -> float:
        origin = self._origin()
        return abs(origin.distance_to(self.end.limit) - origin.distance_to(self.start.limit))

    def length_rotation(self) -> Angle:
        origin = self._origin()
        start = Angle.create_from_points(origin, self.start.limit)
        end = Angle.create_from_points(origin, self.end.limit)
        return Angle(end.radians - start.radians, self.tolerance)

    def length_rotation_radians(self) -> float:
        return self.length_rotation().radians

    def length_rotation_degrees(self) -> float:
        return self.length_rotation().degrees

    # -- range-policy guards ---------------------------------------------------------------

    @staticmethod
    def validate_rotation_half_circle(position: float, tolerance: float = DEFAULT_TOLERANCE) -> None:
        """Reject rotational positions outside [-pi, pi]."""
        if not is_within_inclusive(position, -PI, PI, tolerance):
            raise LimitOutOfRangeError(f'rotation {position} outside [-pi, pi]')

    @staticmethod
    def validate_rotation_full_circle(position: float, tolerance: float = DEFAULT_TOLERANCE) -> None:
        """Reject rotational positions outside [0, 2*pi]."""
        if not is_within_inclusive(position, 0.0, TWO_PI, tolerance):
            raise LimitOutOfRangeError(f'rotation {position} outside [0, 2*pi]')

    @staticmethod
    def validate_relative_position(position: float, tolerance: float = DEFAULT_TOLERANCE) -> None:
        if not is_within_inclusive(position, 0.0, 1.0, tolerance):
            raise LimitOutOfRangeError(f'relative position {position} outside [0, 1]')

    def coordinate_interpolated(self, relative_position: float) -> CartesianCoordinate:
        """Point on the straight chord between the limits at ``relative_position``."""
        self.validate_relative_position(relative_position, self.tolerance)
        s, e = self.start.limit, self.end.limit
        return CartesianCoordinate(s.x + relative_position * (e.x - s.x),
                                   s.y + relative_position * (e.y - s.y),
                                   self.tolerance)

    def clone(self) -> 'CurveRange':
        return CurveRange(self._curve, self.start.limit, self.end.limit)

    clone_range = clone

    def __str__(self) -> str:
        return f'CurveRange - Start: {self.start.limit}, End: {self.end.limit}'

    def __repr__(self) -> str:
        return f'CurveRange(start={self.start.limit!r}, end={self.end.limit!r})'


__all__ = [
    'CartesianPosition',
    'PolarPosition',
    'CurveLimit',
    'CurveRange',
]
