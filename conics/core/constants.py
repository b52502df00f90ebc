"""Central numerical tolerances and small geometry constants.

Every comparison in the kernel is made against a tolerance. This module holds
the defaults so they can be tuned consistently and referenced without
scattering literals through the curve code.
"""
from __future__ import annotations

import math

# Curve/coordinate tolerances
DEFAULT_TOLERANCE: float = 1e-6    # default equality tolerance carried by every value
EPS_DENOMINATOR: float = 1e-12     # denominators below this are treated as singular
EPS_QUADRATIC: float = 1e-12       # leading coefficient below this degrades a quadratic to linear
EPS_ROOT: float = 1e-12            # absolute bracket tolerance for scalar root finding
ROOT_MAXITER: int = 200            # iteration cap for scalar root finding

# Numerical quadrature (arc length)
QUAD_EPSABS: float = 1e-10         # absolute error target for scipy.integrate.quad
QUAD_EPSREL: float = 1e-10         # relative error target for scipy.integrate.quad
QUAD_LIMIT: int = 200              # subinterval cap for scipy.integrate.quad

# Plotting
PLOT_SAMPLES: int = 400            # points per sampled curve
PLOT_PARAMETER_SPAN: float = 2.0   # half-span of the parameter for open curves (hyperbolic/parabolic)
PLOT_DPI: int = 150

# Angles
PI: float = math.pi
TWO_PI: float = 2.0 * math.pi
PI_OVER_2: float = 0.5 * math.pi

__all__ = [
    'DEFAULT_TOLERANCE',
    'EPS_DENOMINATOR',
    'EPS_QUADRATIC',
    'EPS_ROOT',
    'ROOT_MAXITER',
    'QUAD_EPSABS',
    'QUAD_EPSREL',
    'QUAD_LIMIT',
    'PLOT_SAMPLES',
    'PLOT_PARAMETER_SPAN',
    'PLOT_DPI',
    'PI',
    'TWO_PI',
    'PI_OVER_2',
]
