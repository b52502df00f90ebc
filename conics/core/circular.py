"""Circular curve: the zero-eccentricity conic.

Focus and local origin coincide with the center, the directrix sits at
infinity and every focal radius equals the radius.
"""
from __future__ import annotations

import math
from typing import List, Optional, Tuple

from .config import ArcLengthConfig
from .constants import DEFAULT_TOLERANCE, TWO_PI
from .conic import AngleLike, ClosedCurve, ConicSectionCurve, circular_invariants, require_positive
from .coordinates import Angle, AngularOffset, CartesianCoordinate, _fmt
from .exceptions import DegenerateGeometryError
from .range import CurveRange


class CircularCurve(ClosedCurve, ConicSectionCurve):
    """Circle of ``radius`` about ``center``.

    The major vertex, and therefore both default range limits, sits at
    ``center + (radius, 0)``.
    """

    _invariants_strategy = staticmethod(circular_invariants)

    def __init__(self, radius: float, center: CartesianCoordinate,
                 tolerance: float = DEFAULT_TOLERANCE):
        radius = require_positive('radius', radius)
        vertex = center.offset_coordinate(radius, 0.0)
        self._define(vertex, center, radius, 0.0, tolerance)

    @classmethod
    def from_vertex(cls, vertex: CartesianCoordinate, center: CartesianCoordinate,
                    tolerance: float = DEFAULT_TOLERANCE) -> 'CircularCurve':
        radius = require_positive('radius', center.distance_to(vertex))
        return cls.from_definition(vertex, center, radius, Angle.create_from_points(center, vertex), tolerance)

    @property
    def center(self) -> CartesianCoordinate:
        return self.local_origin

    @property
    def radius(self) -> float:
        return self._a

    def is_circle(self) -> bool:
        return True

    def has_chord(self) -> bool:
        return not self.is_closed_curve()

    def curvature(self) -> float:
        return 1.0 / self._a

    def curvature_by_angle(self, angle: AngleLike) -> float:
        return 1.0 / self._a

    def radius_about_focus_right(self, angle: AngleLike) -> float:
        return self._a

    def radius_about_origin(self, angle: AngleLike) -> float:
        return self._a

    def radii_about_origin(self, angle: AngleLike) -> List[float]:
        return [self._a]

    # -- lengths --------------------------------------------------------------------------

    def length(self, config: Optional[ArcLengthConfig] = None) -> float:
        return TWO_PI * self._a

    def length_between(self, angular_offset: AngularOffset) -> float:
        """Signed arc length swept by ``angular_offset``."""
        return angular_offset.length_arc(self._a)

    def _parameter_at_relative(self, relative_position: float,
                               config: Optional[ArcLengthConfig] = None) -> float:
        # Arc length is linear in the polar angle
        CurveRange.validate_relative_position(relative_position, self._tolerance)
        t_start, t_end = self.parameter_span()
        return t_start + relative_position * (t_end - t_start)

    def length_between_relative(self, relative_start: float, relative_end: float,
                                config: Optional[ArcLengthConfig] = None) -> float:
        t0 = self._parameter_at_relative(relative_start)
        t1 = self._parameter_at_relative(relative_end)
        return abs(t1 - t0) * self._a

    @staticmethod
    def length_between_points(point_i: CartesianCoordinate, point_j: CartesianCoordinate,
                              radius: float, tolerance: float = DEFAULT_TOLERANCE) -> float:
        """Minor arc length between two points on a circle of ``radius``.

        The center is located by intersecting circles of ``radius`` drawn
        about each point.
        """
        from .intersections import CircularCircularIntersection

        if point_i == point_j:
            return 0.0
        about_i = CircularCurve(radius, point_i, tolerance)
        about_j = CircularCurve(radius, point_j, tolerance)
        centers = CircularCircularIntersection(about_i, about_j).intersection_coordinates()
        if not centers:
            raise DegenerateGeometryError(
                f'points {point_i} and {point_j} are farther apart than the diameter {2 * radius}')
        offset = AngularOffset.create_from_points(centers[0], point_i, point_j, tolerance)
        return abs(offset.length_arc(radius))

    # -- perpendicular projection ---------------------------------------------------------

    def coordinates_of_perpendicular_projection(
            self, point: CartesianCoordinate) -> Tuple[CartesianCoordinate, CartesianCoordinate]:
        """(near, far) points where the line from the center through ``point`` meets the circle."""
        from .intersections import LinearCircularIntersection
        from .linear import LinearCurve

        center = self.center
        if point == center:
            inf = float('inf')
            return (CartesianCoordinate(inf, inf, self._tolerance),
                    CartesianCoordinate(-inf, -inf, self._tolerance))
        ray = LinearCurve(center, point, self._tolerance)
        hits = LinearCircularIntersection(ray, self).intersection_coordinates()
        near, far = sorted(hits, key=point.distance_to)
        return near, far

    def coordinate_of_perpendicular_projection(self, point: CartesianCoordinate) -> CartesianCoordinate:
        return self.coordinates_of_perpendicular_projection(point)[0]

    # -- intersections --------------------------------------------------------------------

    def is_intersecting(self, other) -> bool:
        from .intersections import are_intersecting
        return are_intersecting(self, other)

    def is_tangent(self, other) -> bool:
        from .intersections import are_tangent
        return are_tangent(self, other)

    def intersection_coordinates(self, other) -> List[CartesianCoordinate]:
        from .intersections import intersection_coordinates
        return intersection_coordinates(self, other)

    def __str__(self) -> str:
        return (f'CircularCurve - Center: {self.center}, Radius: {_fmt(self.radius)}, '
                f'I: {self.range.start.limit}, J: {self.range.end.limit}')


__all__ = ['CircularCurve']
