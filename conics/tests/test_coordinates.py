"""Unit tests for coordinates, angles, angular offsets and vectors."""
import math

import pytest

from conics.core.coordinates import Angle, AngularOffset, CartesianCoordinate, Vector, wrap_angle
from conics.core.exceptions import DegenerateGeometryError


class TestCartesianCoordinate:
    """Test the tolerance-carrying coordinate value type."""

    def test_equality_within_tolerance(self):
        """Coordinates closer than the tolerance compare equal."""
        a = CartesianCoordinate(1.0, 2.0, 1e-5)
        b = CartesianCoordinate(1.000001, 1.999999, 1e-5)
        assert a == b
        assert a != CartesianCoordinate(1.1, 2.0, 1e-5)

    def test_larger_tolerance_governs_equality(self):
        """A loose coordinate matches a tight one within the loose tolerance."""
        loose = CartesianCoordinate(0.0, 0.0, 1e-2)
        tight = CartesianCoordinate(0.005, 0.0, 1e-8)
        assert loose == tight
        assert tight == loose

    def test_string_form(self):
        """Integral components print without a decimal point."""
        assert str(CartesianCoordinate(4, 5)) == '{X: 4, Y: 5}'
        assert str(CartesianCoordinate(-0.5, -1.5)) == '{X: -0.5, Y: -1.5}'

    def test_offset_and_distance(self):
        """Offsetting by a distance along a rotation lands that far away."""
        origin = CartesianCoordinate.origin()
        moved = origin.offset_coordinate(2.0, math.pi / 2)
        assert moved == CartesianCoordinate(0.0, 2.0)
        assert origin.distance_to(moved) == pytest.approx(2.0)

    def test_arithmetic_with_vectors(self):
        """Coordinates translate by vectors and subtract to coordinates."""
        p = CartesianCoordinate(1, 2) + Vector(3, -1)
        assert p == CartesianCoordinate(4, 1)
        assert (p - CartesianCoordinate(4, 1)) == CartesianCoordinate.origin()

    def test_rotate_about(self):
        """Quarter turn about a center."""
        p = CartesianCoordinate(2, 1).rotate_about(CartesianCoordinate(1, 1), math.pi / 2)
        assert p == CartesianCoordinate(1, 2)

    def test_copy_is_independent(self):
        """Copies can take a new tolerance without touching the original."""
        a = CartesianCoordinate(1, 1, 1e-5)
        b = a.copy(1e-3)
        assert b.tolerance == 1e-3
        assert a.tolerance == 1e-5


class TestAngle:
    """Test wrapped angles."""

    def test_wrapping_range(self):
        """Angles wrap into (-pi, pi]."""
        assert abs(wrap_angle(3 * math.pi)) == pytest.approx(math.pi)
        assert wrap_angle(-math.pi) == pytest.approx(math.pi)
        assert Angle(2.5 * math.pi).radians == pytest.approx(0.5 * math.pi)

    def test_equality_across_wrap(self):
        """Angles a full turn apart are equal."""
        assert Angle(math.pi - 1e-8) == Angle(-math.pi + 1e-8)
        assert Angle(0.0) == 2 * math.pi

    def test_create_from_points(self):
        """Direction of the ray between two points."""
        angle = Angle.create_from_points(CartesianCoordinate(0, 0), CartesianCoordinate(1, 1))
        assert angle.degrees == pytest.approx(45.0)

    def test_arithmetic_keeps_tolerance(self):
        """Adding a plain number keeps the angle's own tolerance."""
        angle = Angle(0.25, 1e-4) + 0.5
        assert angle.radians == pytest.approx(0.75)
        assert angle.tolerance == 1e-4

    def test_string_form(self):
        """Zero angle prints as '0 rad'."""
        assert str(Angle.origin()) == '0 rad'


class TestAngularOffset:
    """Test signed angular sweeps."""

    def test_from_points_is_wrapped(self):
        """Sweep between two points about a center takes the short way."""
        offset = AngularOffset.create_from_points(CartesianCoordinate(0, 0),
                                                  CartesianCoordinate(1, 0),
                                                  CartesianCoordinate(0, -1))
        assert offset.radians == pytest.approx(-math.pi / 2)

    def test_from_angles_is_unwrapped(self):
        """Sweep between angles keeps its sign and size."""
        offset = AngularOffset.create_from_angles(0.0, 1.5 * math.pi)
        assert offset.degrees == pytest.approx(270.0)

    def test_arc_length(self):
        """Arc swept on a circle of radius 2."""
        assert AngularOffset(math.pi / 2).length_arc(2.0) == pytest.approx(math.pi)


class TestVector:
    """Test vectors."""

    def test_unit_normal_is_quarter_turn(self):
        """Normal is the tangent rotated counter-clockwise."""
        tangent = Vector.unit_tangent(3.0, 4.0)
        normal = Vector.unit_normal(3.0, 4.0)
        assert tangent == Vector(0.6, 0.8)
        assert normal == Vector(-0.8, 0.6)
        assert tangent.dot(normal) == pytest.approx(0.0)
        assert tangent.cross(normal) == pytest.approx(1.0)

    def test_zero_vector_cannot_be_normalized(self):
        """Normalizing a zero vector is degenerate."""
        with pytest.raises(DegenerateGeometryError):
            Vector(0.0, 0.0).normalized()
