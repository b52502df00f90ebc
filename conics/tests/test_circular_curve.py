"""Unit tests for CircularCurve."""
import math

import pytest

from conics.core.circular import CircularCurve
from conics.core.coordinates import AngularOffset, CartesianCoordinate as P
from conics.core.exceptions import DegenerateGeometryError

TOL = 1e-5


def circle(radius, x=0.0, y=0.0):
    return CircularCurve(radius, P(x, y), TOL)


class TestConstruction:
    """Test stored and derived state of a circle."""

    def test_center_radius_and_vertex(self):
        """The major vertex sits to the right of the center."""
        c = circle(6, 4, 5)
        assert c.center == P(4, 5)
        assert c.radius == 6
        assert c.vertex_major == P(10, 5)
        assert c.focus == c.center
        assert c.local_origin == c.center

    def test_invariants(self):
        """Zero eccentricity, semi-latus rectum equal to the radius, directrix at infinity."""
        c = circle(6, 4, 5)
        assert c.eccentricity == 0.0
        assert c.semilatus_rectum_distance == 6
        assert c.distance_from_vertex_minor_to_major_axis == 6
        assert c.distance_from_directrix_to_local_origin == math.inf
        assert c.directrix.control_point_i.x == math.inf

    def test_vertices(self):
        """Major vertices left and right, minor vertices above and below."""
        c = circle(6, 4, 5)
        right, left = c.vertices_major
        assert right == P(10, 5)
        assert left == P(-2, 5)
        top, bottom = c.vertices_minor
        assert top == P(4, 11)
        assert bottom == P(4, -1)

    def test_from_vertex(self):
        """Circle from its center and a point on it."""
        c = CircularCurve.from_vertex(P(4, 8), P(4, 5), TOL)
        assert c.radius == pytest.approx(3.0)
        assert c.is_intersecting_coordinate(P(7, 5))

    def test_non_positive_radius_is_degenerate(self):
        """Zero and negative radii are rejected."""
        with pytest.raises(DegenerateGeometryError):
            circle(0)
        with pytest.raises(DegenerateGeometryError):
            circle(-2)

    def test_string_form(self):
        """Summary string with center, radius and range limits."""
        assert str(circle(6, 4, 5)) == \
            'CircularCurve - Center: {X: 4, Y: 5}, Radius: 6, I: {X: 10, Y: 5}, J: {X: 10, Y: 5}'


class TestShapeQueries:
    """Test curvature and the various radii."""

    def test_curvature(self):
        """Curvature is the reciprocal radius everywhere."""
        c = circle(6, 4, 5)
        assert c.curvature() == pytest.approx(1 / 6)
        assert c.curvature_by_angle(1.3) == pytest.approx(1 / 6)

    def test_radius_about_vertex_major_right(self):
        """Chord lengths from the right vertex."""
        c = circle(6, 4, 5)
        assert abs(c.radius_about_vertex_major_right(3 * math.pi / 4) - 8.485281) < TOL
        assert abs(c.radius_about_vertex_major_right(math.pi) - 12.0) < TOL
        assert abs(c.radius_about_vertex_major_right(0.0)) < TOL

    def test_radius_about_vertex_major_left(self):
        """Chord lengths from the left vertex."""
        c = circle(6)
        assert abs(c.radius_about_vertex_major_left(0.0) - 12.0) < TOL
        assert abs(c.radius_about_vertex_major_left(math.pi / 4) - 8.485281) < TOL

    def test_focal_and_origin_radii(self):
        """Every focal and central radius equals the radius."""
        c = circle(6, 4, 5)
        assert c.radius_about_focus_right(0.7) == 6
        assert c.radius_about_focus_left(2.1) == pytest.approx(6.0)
        assert c.radius_about_origin(1.0) == 6
        assert c.radii_about_origin(1.0) == [6]

    def test_coordinate_by_angle(self):
        """Global point at a polar angle about the center."""
        assert circle(6, 4, 5).coordinate_by_angle(math.pi / 2) == P(4, 11)


class TestCartesianQueries:
    """Test x-at-y / y-at-x queries in global coordinates."""

    def test_x_at_y(self):
        """Crossing, missing and touching horizontal queries."""
        c = circle(3, 4, 5)
        assert abs(c.x_at_y(6.5) - 6.598076) < TOL
        assert c.x_at_y(9) == math.inf
        assert abs(c.x_at_y(8) - 4.0) < TOL

    def test_y_at_x(self):
        """Positive-branch y of a vertical query."""
        assert abs(circle(3, 4, 5).y_at_x(5.5) - 7.598076) < TOL

    def test_plural_queries(self):
        """Both roots, repeated when the query touches the circle."""
        c = circle(6)
        assert c.ys_at_x(0) == pytest.approx([6.0, -6.0])
        assert c.xs_at_y(6) == pytest.approx([0.0, 0.0])
        assert c.xs_at_y(7) == []

    def test_slopes(self):
        """Slopes of the circle where a vertical query crosses it."""
        c = circle(5)
        assert c.slopes_at_x(3) == pytest.approx([-0.75, 0.75])
        assert c.slopes_at_x(0) == pytest.approx([0.0, 0.0])
        assert c.slopes_at_y(0)[0] in (math.inf, -math.inf)

    def test_is_intersecting_coordinate(self):
        """Points on and off the circle."""
        c = circle(6)
        assert c.is_intersecting_coordinate(P(0, -6))
        assert not c.is_intersecting_coordinate(P(1, 1))

    def test_roots_just_inside_a_vertex_stay_apart(self):
        """A vertical query 1e-7 inside the vertex still sees two distinct crossings."""
        c = CircularCurve(3, P(0, 0))
        x = 3.0 - 1e-7
        expected = math.sqrt(9.0 - x * x)
        assert c.ys_at_x(x) == pytest.approx([expected, -expected], abs=1e-9)
        assert c.is_intersecting_coordinate(P(x, expected))
        assert not c.is_intersecting_coordinate(P(x, 0.01))

    def test_limit_on_a_point_near_the_vertex(self):
        """A coordinate on the curve next to the vertex is accepted as a range limit."""
        c = CircularCurve(3, P(0, 0))
        x = 3.0 - 1e-7
        c.range.end.set_limit_by_coordinate(P(x, math.sqrt(9.0 - x * x)))
        assert c.range.end.limit.y == pytest.approx(7.7459e-4, abs=1e-7)

    def test_point_just_outside_a_vertex_is_on_the_curve(self):
        """A point within tolerance beyond the vertex counts as on the curve."""
        assert circle(3).is_intersecting_coordinate(P(3.0 + 1e-7, 0.0))


class TestLengths:
    """Test perimeter, arc and relative lengths."""

    def test_perimeter(self):
        """Full circumference."""
        assert circle(6).length() == pytest.approx(12 * math.pi)

    def test_length_between_offset(self):
        """Arc swept by an angular offset."""
        assert circle(6).length_between(AngularOffset(math.pi / 2)) == pytest.approx(3 * math.pi)

    def test_relative_lengths_on_open_arc(self):
        """A quarter arc measured through relative positions."""
        c = circle(6, 4, 5)
        c.range.end.set_limit_by_rotation(math.pi / 2)
        assert not c.is_closed_curve()
        assert c.has_chord()
        assert c.length_between_relative(0.0, 1.0) == pytest.approx(3 * math.pi)
        assert c.length_between_relative(0.25, 0.75) == pytest.approx(1.5 * math.pi)
        mid = c.coordinate_cartesian(0.5)
        assert abs(mid.x - 8.242641) < TOL and abs(mid.y - 9.242641) < TOL
        assert c.chord_length() == pytest.approx(6 * math.sqrt(2))

    def test_closed_by_default(self):
        """Coincident default limits close the curve."""
        c = circle(6)
        assert c.is_closed_curve()
        assert not c.has_chord()
        assert c.length_between_relative(0.0, 0.5) == pytest.approx(6 * math.pi)

    def test_length_between_points(self):
        """Minor arc between two points a quarter turn apart."""
        arc = CircularCurve.length_between_points(P(1, 0), P(0, 1), 1.0, TOL)
        assert arc == pytest.approx(math.pi / 2)

    def test_length_between_distant_points_is_degenerate(self):
        """Points farther apart than the diameter cannot share the circle."""
        with pytest.raises(DegenerateGeometryError):
            CircularCurve.length_between_points(P(0, 0), P(3, 0), 1.0, TOL)


class TestProjection:
    """Test perpendicular projection onto the circle."""

    def test_near_and_far(self):
        """Projection along the ray from the center."""
        near, far = circle(6, 4, 5).coordinates_of_perpendicular_projection(P(7, 5))
        assert near == P(10, 5)
        assert far == P(-2, 5)
        assert circle(6, 4, 5).coordinate_of_perpendicular_projection(P(4, 2)) == P(4, -1)

    def test_projection_of_center(self):
        """The center has no defined projection."""
        near, far = circle(6, 4, 5).coordinates_of_perpendicular_projection(P(4, 5))
        assert near.x == math.inf and far.x == -math.inf


class TestTolerance:
    """Test tolerance propagation through a circle."""

    def test_cascade(self):
        """The setter rewrites stored points, rotation and range limits."""
        c = circle(6, 4, 5)
        c.tolerance = 1e-3
        assert c.focus.tolerance == 1e-3
        assert c.vertex_major.tolerance == 1e-3
        assert c.rotation.tolerance == 1e-3
        assert c.range.start.tolerance == 1e-3
        assert c.vertices_minor[0].tolerance == 1e-3

    def test_with_tolerance(self):
        """with_tolerance leaves the original alone."""
        c = circle(6, 4, 5)
        loose = c.with_tolerance(1e-2)
        assert loose.tolerance == 1e-2
        assert c.tolerance == TOL
        assert loose.center == c.center

    def test_rejects_non_positive_tolerance(self):
        """Tolerance must stay positive."""
        with pytest.raises(ValueError):
            circle(6).tolerance = 0.0
