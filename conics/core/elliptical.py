"""Elliptical curve: closed conic with 0 < e < 1."""
from __future__ import annotations

import math
from typing import Optional

from .arc_length import arc_length, ellipse_perimeter
from .config import ArcLengthConfig
from .constants import DEFAULT_TOLERANCE
from .conic import (AngleLike, ClosedCurve, ConicSectionCurve, TwoFociCurve,
                    elliptical_invariants, require_positive)
from .coordinates import Angle, AngularOffset, CartesianCoordinate, _fmt
from .exceptions import DegenerateGeometryError


class EllipticalCurve(ClosedCurve, TwoFociCurve, ConicSectionCurve):
    """Ellipse with semi-major axis ``a`` and semi-minor axis ``b`` about ``center``.

    ``rotation`` is the direction of the major axis. The primary focus and
    major vertex lie on the +x side of the local frame.
    """

    _invariants_strategy = staticmethod(elliptical_invariants)

    def __init__(self, a: float, b: float, center: CartesianCoordinate,
                 rotation: AngleLike = 0.0, tolerance: float = DEFAULT_TOLERANCE):
        a = require_positive('a', a)
        b = require_positive('b', b)
        if b > a:
            raise DegenerateGeometryError(f'semi-minor axis {b} exceeds semi-major axis {a}')
        c = math.sqrt(a * a - b * b)
        vertex = center.offset_coordinate(a, rotation)
        focus = center.offset_coordinate(c, rotation)
        self._define(vertex, focus, a, rotation, tolerance)

    @classmethod
    def from_vertex_major(cls, vertex_major: CartesianCoordinate, b: float,
                          center: CartesianCoordinate,
                          tolerance: float = DEFAULT_TOLERANCE) -> 'EllipticalCurve':
        a = center.distance_to(vertex_major)
        return cls(a, b, center, Angle.create_from_points(center, vertex_major), tolerance)

    @classmethod
    def from_focus(cls, vertex_major: CartesianCoordinate, focus: CartesianCoordinate,
                   a: float, tolerance: float = DEFAULT_TOLERANCE) -> 'EllipticalCurve':
        """Ellipse through ``vertex_major`` with near focus ``focus`` and semi-major axis ``a``."""
        a = require_positive('a', a)
        focal_distance = focus.distance_to(vertex_major)
        if focal_distance == 0 or focal_distance > a:
            raise DegenerateGeometryError(
                f'focus-to-vertex distance {focal_distance} must lie in (0, a = {a}]')
        return cls.from_definition(vertex_major, focus, a, Angle.create_from_points(focus, vertex_major), tolerance)

    @property
    def center(self) -> CartesianCoordinate:
        return self.local_origin

    def length(self, config: Optional[ArcLengthConfig] = None) -> float:
        """Perimeter of the whole ellipse."""
        inv = self.invariants
        return ellipse_perimeter(inv.a, inv.b)

    def length_between(self, angular_offset: AngularOffset,
                       config: Optional[ArcLengthConfig] = None) -> float:
        """Signed arc length swept by ``angular_offset`` from the range start, in curve parameter."""
        t_start = self.parameter_at(self.range.start.limit)
        return arc_length(self, t_start, t_start + angular_offset.delta, config)

    def __str__(self) -> str:
        inv = self.invariants
        return (f'EllipticalCurve - Center: {self.center}, Rotation: {self.rotation}, '
                f'a: {_fmt(inv.a)}, b: {_fmt(inv.b)}, '
                f'I: {self.range.start.limit}, J: {self.range.end.limit}')


__all__ = ['EllipticalCurve']
