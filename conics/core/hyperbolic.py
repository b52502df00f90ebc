"""Hyperbolic curve: open two-branch conic with e > 1.

The curve parameter is the hyperbolic angle ``t`` of
``(a cosh t, b sinh t)``, which traces the branch through the major vertex.
Cartesian queries see both branches.
"""
from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from .constants import DEFAULT_TOLERANCE, EPS_DENOMINATOR
from .conic import (AngleLike, ConicSectionCurve, TwoFociCurve,
                    hyperbolic_invariants, require_positive)
from .coordinates import Angle, CartesianCoordinate, _fmt
from .exceptions import DegenerateGeometryError
from .linear import LinearCurve


class HyperbolicCurve(TwoFociCurve, ConicSectionCurve):
    """Hyperbola ``u^2/a^2 - v^2/b^2 = 1`` about ``center`` rotated by ``rotation``."""

    _invariants_strategy = staticmethod(hyperbolic_invariants)
    _focus_radius_sign = -1

    def __init__(self, a: float, b: float, center: CartesianCoordinate,
                 rotation: AngleLike = 0.0, tolerance: float = DEFAULT_TOLERANCE):
        a = require_positive('a', a)
        b = require_positive('b', b)
        c = math.sqrt(a * a + b * b)
        vertex = center.offset_coordinate(a, rotation)
        focus = center.offset_coordinate(c, rotation)
        self._define(vertex, focus, a, rotation, tolerance)

    @classmethod
    def from_focus(cls, a: float, vertex_major: CartesianCoordinate, focus: CartesianCoordinate,
                   tolerance: float = DEFAULT_TOLERANCE) -> 'HyperbolicCurve':
        """Hyperbola with semi-major axis ``a`` through ``vertex_major`` with the focus beyond it."""
        a = require_positive('a', a)
        if focus == vertex_major:
            raise DegenerateGeometryError('focus and vertex of a hyperbola must differ')
        return cls.from_definition(vertex_major, focus, a, Angle.create_from_points(vertex_major, focus), tolerance)

    @property
    def center(self) -> CartesianCoordinate:
        return self.local_origin

    # -- parametric form ------------------------------------------------------------------

    def local_position(self, t):
        inv = self.invariants
        return inv.a * np.cosh(t), inv.b * np.sinh(t)

    def local_derivative(self, t):
        inv = self.invariants
        return inv.a * np.sinh(t), inv.b * np.cosh(t)

    def local_second_derivative(self, t):
        inv = self.invariants
        return inv.a * np.cosh(t), inv.b * np.sinh(t)

    def implicit_coefficients(self):
        inv = self.invariants
        return 1.0 / inv.a ** 2, 0.0, -1.0 / inv.b ** 2, 0.0, 0.0, -1.0

    def parameter_at_local(self, u: float, v: float) -> float:
        return math.asinh(v / self.invariants.b)

    def radius_about_vertex_major_left(self, angle: AngleLike) -> float:
        """Chord from the vertex of the far branch; 0 where the ray does not return to the curve."""
        theta = float(angle)
        inv = self.invariants
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        denominator = inv.b ** 2 * cos_t ** 2 - inv.a ** 2 * sin_t ** 2
        if abs(denominator) <= EPS_DENOMINATOR:
            return 0.0
        radius = 2.0 * inv.a * inv.b ** 2 * cos_t / denominator
        return max(radius, 0.0)

    # -- hyperbola-only geometry ----------------------------------------------------------

    @property
    def vertices_minor(self) -> Tuple[CartesianCoordinate, CartesianCoordinate]:
        """Corners ``(a, +b)`` and ``(a, -b)`` of the asymptote rectangle on the primary side."""
        inv = self.invariants
        return self.local_to_global(inv.a, inv.b), self.local_to_global(inv.a, -inv.b)

    @property
    def vertices_minor2(self) -> Tuple[CartesianCoordinate, CartesianCoordinate]:
        inv = self.invariants
        return self.local_to_global(-inv.a, inv.b), self.local_to_global(-inv.a, -inv.b)

    @property
    def asymptotes(self) -> Tuple[LinearCurve, LinearCurve]:
        """Lines through the center with local slopes +b/a and -b/a."""
        origin = self.local_origin
        minor_pos, minor_neg = self.vertices_minor
        return (LinearCurve(origin, minor_pos, self._tolerance),
                LinearCurve(origin, minor_neg, self._tolerance))

    def __str__(self) -> str:
        inv = self.invariants
        return (f'HyperbolicCurve - Center: {self.center}, Rotation: {self.rotation}, '
                f'a: {_fmt(inv.a)}, b: {_fmt(inv.b)}, '
                f'I: {self.range.start.limit}, J: {self.range.end.limit}')


__all__ = ['HyperbolicCurve']
