"""Unit tests for tolerance-aware comparisons and the quadratic solver."""
import math

import pytest

from conics.core.constants import DEFAULT_TOLERANCE
from conics.core.coordinates import CartesianCoordinate
from conics.core.numerics import (
    governing_tolerance,
    is_equal,
    is_greater,
    is_less,
    is_within_inclusive,
    is_zero,
    sign,
    solve_quadratic,
)


class TestComparisons:
    """Test scalar comparisons within a tolerance."""

    def test_is_zero_within_tolerance(self):
        """Values inside the tolerance band count as zero."""
        assert is_zero(0.5e-6, DEFAULT_TOLERANCE)
        assert not is_zero(2e-6, DEFAULT_TOLERANCE)

    def test_is_equal_handles_infinities(self):
        """Infinite sentinels compare equal to themselves only."""
        assert is_equal(math.inf, math.inf)
        assert is_equal(-math.inf, -math.inf)
        assert not is_equal(math.inf, -math.inf)
        assert not is_equal(math.inf, 1.0)

    def test_strict_comparisons_need_more_than_tolerance(self):
        """is_greater/is_less require a margin larger than the tolerance."""
        assert not is_greater(1.0 + 1e-7, 1.0)
        assert is_greater(1.0 + 1e-3, 1.0)
        assert is_less(1.0, 1.0 + 1e-3)
        assert not is_less(1.0, 1.0 + 1e-7)

    def test_is_within_inclusive_tolerant_bounds(self):
        """Bounds are inclusive and widened by the tolerance."""
        assert is_within_inclusive(math.pi, -math.pi, math.pi)
        assert is_within_inclusive(math.pi + 1e-7, -math.pi, math.pi)
        assert not is_within_inclusive(1.1 * math.pi, -math.pi, math.pi)

    def test_sign_treats_zero_as_positive(self):
        """Sign is -1 only below zero by more than the tolerance."""
        assert sign(3.0) == 1
        assert sign(-3.0) == -1
        assert sign(0.0) == 1
        assert sign(-1e-8) == 1


class TestGoverningTolerance:
    """Test tolerance propagation between values."""

    def test_larger_tolerance_governs(self):
        """The larger of two tolerances is used for a pairwise comparison."""
        a = CartesianCoordinate(0, 0, 1e-3)
        b = CartesianCoordinate(0, 0, 1e-5)
        assert governing_tolerance(a, b) == 1e-3

    def test_numbers_and_objects_mix(self):
        """Plain numbers participate as tolerances."""
        a = CartesianCoordinate(0, 0, 1e-5)
        assert governing_tolerance(a, 1e-2) == 1e-2

    def test_default_when_nothing_carries_tolerance(self):
        """Items without a tolerance fall back to the default."""
        assert governing_tolerance(object()) == DEFAULT_TOLERANCE


class TestSolveQuadratic:
    """Test the quadratic root finder used by cartesian queries."""

    def test_two_roots_largest_first(self):
        """x^2 - 5x + 6 has roots 3 and 2, returned largest first."""
        assert solve_quadratic(1.0, -5.0, 6.0) == pytest.approx([3.0, 2.0])

    def test_no_real_roots(self):
        """A negative discriminant gives no roots."""
        assert solve_quadratic(1.0, 0.0, 1.0) == []

    def test_double_root_is_repeated(self):
        """Roots closer than the tolerance merge and both equal roots are reported."""
        for c in (1.0, 1.0 + 1e-14, 1.0 - 1e-14):
            roots = solve_quadratic(1.0, -2.0, c)
            assert len(roots) == 2, c
            assert roots[0] == roots[1] == pytest.approx(1.0)

    def test_close_roots_stay_apart(self):
        """Roots 2e-4 apart are distinct at the default tolerance."""
        roots = solve_quadratic(1.0, -2.0, 1.0 - 1e-8)
        assert roots == pytest.approx([1.0001, 0.9999], abs=1e-9)
        assert solve_quadratic(1.0, -2.0, 1.0 + 1e-8) == []

    def test_merge_uses_root_separation(self):
        """Merging depends on the root gap, not on the coefficient scale."""
        assert len(set(solve_quadratic(4.0, 0.0, -4e-14))) == 1
        assert solve_quadratic(4.0, 0.0, -4e-8) == pytest.approx([1e-4, -1e-4])

    def test_linear_fallback(self):
        """A vanishing leading coefficient degrades to the linear root."""
        assert solve_quadratic(0.0, 2.0, -4.0, DEFAULT_TOLERANCE, 1e-12) == [2.0]
        assert solve_quadratic(0.0, 0.0, 1.0, DEFAULT_TOLERANCE, 1e-12) == []

    def test_cancellation_is_avoided(self):
        """The small root of a badly scaled quadratic stays accurate."""
        roots = solve_quadratic(1.0, -1e8, 1.0)
        assert roots[0] == pytest.approx(1e8)
        assert roots[1] == pytest.approx(1e-8, rel=1e-6)
