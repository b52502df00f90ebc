"""Parabolic curve: open conic with e = 1.

The local origin is the vertex and the curve opens towards the focus along
local +x: ``v^2 = 4 c u`` with ``c`` the focal length. The curve parameter
``t`` traces ``(c t^2, 2 c t)``.
"""
from __future__ import annotations

import math

import numpy as np

from .constants import DEFAULT_TOLERANCE, EPS_DENOMINATOR
from .conic import AngleLike, ConicSectionCurve, parabolic_invariants, require_positive
from .coordinates import Angle, CartesianCoordinate, _fmt
from .exceptions import DegenerateGeometryError


class ParabolicCurve(ConicSectionCurve):
    _invariants_strategy = staticmethod(parabolic_invariants)
    _focus_radius_sign = -1

    def __init__(self, focal_length: float, vertex: CartesianCoordinate,
                 rotation: AngleLike = 0.0, tolerance: float = DEFAULT_TOLERANCE):
        focal_length = require_positive('focal length', focal_length)
        focus = vertex.offset_coordinate(focal_length, rotation)
        self._define(vertex, focus, 0.0, rotation, tolerance)

    @classmethod
    def from_focus(cls, vertex_major: CartesianCoordinate, focus: CartesianCoordinate,
                   tolerance: float = DEFAULT_TOLERANCE) -> 'ParabolicCurve':
        if focus == vertex_major:
            raise DegenerateGeometryError('focus and vertex of a parabola must differ')
        return cls.from_definition(vertex_major, focus, 0.0, Angle.create_from_points(vertex_major, focus), tolerance)

    @property
    def vertex(self) -> CartesianCoordinate:
        return self.local_origin

    @property
    def focal_length(self) -> float:
        return self.invariants.c

    def local_position(self, t):
        f = self.invariants.c
        return f * np.square(t), 2.0 * f * np.asarray(t, dtype=float)

    def local_derivative(self, t):
        f = self.invariants.c
        return 2.0 * f * np.asarray(t, dtype=float), 2.0 * f * np.ones_like(t, dtype=float)

    def local_second_derivative(self, t):
        f = self.invariants.c
        return 2.0 * f * np.ones_like(t, dtype=float), np.zeros_like(t, dtype=float)

    def implicit_coefficients(self):
        return 0.0, 0.0, 1.0, -4.0 * self.invariants.c, 0.0, 0.0

    def parameter_at_local(self, u: float, v: float) -> float:
        return v / (2.0 * self.invariants.c)

    def radius_about_vertex_major_left(self, angle: AngleLike) -> float:
        """Chord from the vertex along ``angle``; ``inf`` along the axis of symmetry."""
        theta = float(angle)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        if sin_t * sin_t <= EPS_DENOMINATOR:
            return float('inf') if cos_t > 0 else 0.0
        return max(4.0 * self.invariants.c * cos_t / (sin_t * sin_t), 0.0)

    def radius_about_vertex_major_right(self, angle: AngleLike) -> float:
        # A single vertex serves both sides
        return self.radius_about_vertex_major_left(angle)

    def __str__(self) -> str:
        return (f'ParabolicCurve - Center: {self.vertex}, Rotation: {self.rotation}, '
                f'c: {_fmt(self.focal_length)}, '
                f'I: {self.range.start.limit}, J: {self.range.end.limit}')


__all__ = ['ParabolicCurve']
