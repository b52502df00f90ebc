"""Numerical arc lengths for conic sections.

Elliptical, hyperbolic and parabolic arcs have no elementary closed form.
Arc length is the integral of the parametric speed ``|r'(t)|`` computed with
``scipy.integrate.quad``; the inverse (parameter at a given length) is found
with ``scipy.optimize.brentq``. A complete ellipse uses the complete elliptic
integral of the second kind.
"""
from __future__ import annotations

from typing import Optional

import numpy as np
from scipy.integrate import quad
from scipy.optimize import brentq
from scipy.special import ellipe

from .config import ArcLengthConfig
from .constants import EPS_ROOT, ROOT_MAXITER
from .logging_utils import get_logger

logger = get_logger('conics.arc_length')


def speed_at(curve, t: float) -> float:
    """Magnitude of the parametric velocity of ``curve`` at parameter ``t``."""
    dx, dy = curve.local_derivative(t)
    return float(np.hypot(dx, dy))


def arc_length(curve, t_start: float, t_end: float,
               config: Optional[ArcLengthConfig] = None) -> float:
    """Signed arc length of ``curve`` from parameter ``t_start`` to ``t_end``."""
    if t_start == t_end:
        return 0.0
    cfg = config or ArcLengthConfig()
    value, abserr = quad(lambda t: speed_at(curve, t), t_start, t_end, **cfg.quad_kwargs())
    if abserr > max(cfg.epsabs, cfg.epsrel * abs(value)) * 100.0:
        logger.warning('arc length quadrature may be inaccurate: value=%g abserr=%g', value, abserr)
    else:
        logger.debug('arc length [%g, %g] = %g (abserr %g)', t_start, t_end, value, abserr)
    return float(value)


def parameter_at_fraction(curve, t_start: float, t_end: float, fraction: float,
                          config: Optional[ArcLengthConfig] = None) -> float:
    """Parameter at which the arc from ``t_start`` covers ``fraction`` of the arc to ``t_end``."""
    if fraction <= 0.0 or t_start == t_end:
        return t_start
    if fraction >= 1.0:
        return t_end
    total = arc_length(curve, t_start, t_end, config)
    target = fraction * total

    def f(t: float) -> float:
        return arc_length(curve, t_start, t, config) - target

    lo, hi = min(t_start, t_end), max(t_start, t_end)
    return float(brentq(f, lo, hi, xtol=EPS_ROOT, maxiter=ROOT_MAXITER))


def ellipse_perimeter(a: float, b: float) -> float:
    """Perimeter ``4 a E(e**2)`` of an ellipse with semi-axes ``a >= b``."""
    if a == 0.0:
        return 0.0
    m = 1.0 - (b / a) ** 2
    return float(4.0 * a * ellipe(m))


__all__ = ['speed_at', 'arc_length', 'parameter_at_fraction', 'ellipse_perimeter']
