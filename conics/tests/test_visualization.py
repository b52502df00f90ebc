"""Tests for the plotting helpers (Agg backend, files under tmp_path)."""
import math

import numpy as np
import pytest

from conics.core.circular import CircularCurve
from conics.core.config import PlotConfig
from conics.core.coordinates import CartesianCoordinate as P
from conics.core.elliptical import EllipticalCurve
from conics.core.exceptions import UnsupportedCurveOperation
from conics.core.hyperbolic import HyperbolicCurve
from conics.core.linear import LinearCurve
from conics.core.parabolic import ParabolicCurve
from conics.core.visualization import plot_curves, sample_points


class TestSamplePoints:
    """Test curve sampling."""

    def test_closed_curve(self):
        """Circle samples lie on the circle and close the loop."""
        pts = sample_points(CircularCurve(2, P(1, 1)), 50)
        assert pts.shape == (50, 2)
        assert np.allclose(np.hypot(pts[:, 0] - 1, pts[:, 1] - 1), 2.0)
        assert np.allclose(pts[0], pts[-1])

    def test_line(self):
        """Line samples run between the control points."""
        pts = sample_points(LinearCurve(P(0, 0), P(2, 4)), 5)
        assert np.allclose(pts[2], [1.0, 2.0])

    def test_hyperbola_has_two_branches(self):
        """The mirrored branch follows a nan separator row."""
        pts = sample_points(HyperbolicCurve(3, 4, P(0, 0)), 20)
        assert pts.shape == (41, 2)
        assert np.isnan(pts[20]).all()
        assert (pts[:20, 0] > 0).all() and (pts[21:, 0] < 0).all()

    def test_parabola_span(self):
        """Open curves are sampled over the configured parameter span."""
        cfg = PlotConfig(parameter_span=1.0)
        pts = sample_points(ParabolicCurve(1, P(0, 0)), 11, cfg)
        assert np.allclose(pts[0], [1.0, -2.0])
        assert np.allclose(pts[-1], [1.0, 2.0])

    def test_unsupported(self):
        """Unknown objects cannot be sampled."""
        with pytest.raises(UnsupportedCurveOperation):
            sample_points(object(), 10)


class TestPlotCurves:
    """Test figure output."""

    def test_writes_png(self, tmp_path):
        """Curves, foci, limits and intersections render to a file."""
        curves = [
            CircularCurve(6, P(0, 0)),
            CircularCurve(7, P(11, 0)),
            LinearCurve(P(0, -10), P(0, 10)),
            EllipticalCurve(5, 3, P(0, 0), math.pi / 6),
            HyperbolicCurve(3, 4, P(0, 0)),
        ]
        out = tmp_path / 'curves.png'
        written = plot_curves(curves, str(out), PlotConfig(samples=64, dpi=40), title='conics')
        assert written == str(out)
        assert out.exists() and out.stat().st_size > 0

    def test_minimal_config(self, tmp_path):
        """Overlays can be switched off."""
        cfg = PlotConfig(samples=16, dpi=30, show_foci=False, show_limits=False,
                         show_intersections=False, equal_aspect=False)
        out = tmp_path / 'plain.png'
        plot_curves([ParabolicCurve(1, P(0, 0))], str(out), cfg)
        assert out.exists()
