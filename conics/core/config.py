"""Configuration objects for the conics kernel: tolerance, quadrature and plotting."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .constants import (
    DEFAULT_TOLERANCE,
    PLOT_DPI,
    PLOT_PARAMETER_SPAN,
    PLOT_SAMPLES,
    QUAD_EPSABS,
    QUAD_EPSREL,
    QUAD_LIMIT,
)


@dataclass
class ArcLengthConfig:
    """Options forwarded to ``scipy.integrate.quad`` for numerical arc lengths."""
    epsabs: float = QUAD_EPSABS
    epsrel: float = QUAD_EPSREL
    limit: int = QUAD_LIMIT

    def quad_kwargs(self) -> Dict[str, Any]:
        return {'epsabs': self.epsabs, 'epsrel': self.epsrel, 'limit': self.limit}


@dataclass
class PlotConfig:
    samples: int = PLOT_SAMPLES
    # Open curves are drawn for parameter t in [-span, span]
    parameter_span: float = PLOT_PARAMETER_SPAN
    figsize: Tuple[float, float] = (6.0, 6.0)
    dpi: int = PLOT_DPI
    show_foci: bool = True
    show_limits: bool = True
    show_intersections: bool = True
    equal_aspect: bool = True


@dataclass
class ConicsConfig:
    """Unified configuration.

    Attributes
    ----------
    tolerance : float
        Equality tolerance given to curves passed through :meth:`bind`.
    arc_length : ArcLengthConfig
        Quadrature options for elliptical/hyperbolic/parabolic arc lengths.
    plot : PlotConfig
        Options for :func:`conics.core.visualization.plot_curves`.
    """
    tolerance: float = DEFAULT_TOLERANCE
    arc_length: ArcLengthConfig = field(default_factory=ArcLengthConfig)
    plot: PlotConfig = field(default_factory=PlotConfig)

    def __post_init__(self):
        if not self.tolerance > 0:
            raise ValueError(f'tolerance must be positive, got {self.tolerance!r}')

    @classmethod
    def from_tolerance(cls, tolerance: float, **plot_overrides: Any) -> 'ConicsConfig':
        plot = PlotConfig()
        for key, value in plot_overrides.items():
            if not hasattr(plot, key):
                raise ValueError(f'unknown plot option: {key}')
            setattr(plot, key, value)
        return cls(tolerance=tolerance, plot=plot)

    def bind(self, curve):
        """Independent copy of ``curve`` carrying this configuration's tolerance."""
        return curve.with_tolerance(self.tolerance)


__all__ = ['ArcLengthConfig', 'PlotConfig', 'ConicsConfig']
