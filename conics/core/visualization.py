"""Plotting helpers for curves, their foci, range limits and intersections.

Separated from the curve classes so that matplotlib is only imported when a
figure is actually requested.
"""
from __future__ import annotations

import os as _os
import math
from typing import Iterable, List, Optional

import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    try:
        _mpl.use('Agg')
    except Exception:
        pass
import numpy as np
import matplotlib.pyplot as plt

from .circular import CircularCurve
from .config import PlotConfig
from .conic import ConicSectionCurve
from .exceptions import IntersectingCurveException, OverlappingCurvesException, UnsupportedCurveOperation
from .hyperbolic import HyperbolicCurve
from .intersections import intersection_coordinates
from .linear import LinearCurve
from .logging_utils import get_logger

logger = get_logger('conics.viz')


def sample_points(curve, samples: int = None, config: Optional[PlotConfig] = None) -> np.ndarray:
    """``(N, 2)`` array of global points along ``curve`` for drawing.

    Closed curves are sampled over a full turn. Hyperbolas and parabolas are
    sampled over ``[-span, span]`` of their curve parameter; the second
    hyperbola branch is appended after a ``nan`` row so it plots as a
    separate polyline. Lines are sampled between their control points.
    """
    cfg = config or PlotConfig()
    n = int(samples or cfg.samples)
    if isinstance(curve, LinearCurve):
        i, j = curve.control_points()
        s = np.linspace(0.0, 1.0, n)
        return np.column_stack([i.x + s * (j.x - i.x), i.y + s * (j.y - i.y)])
    if not isinstance(curve, ConicSectionCurve):
        raise UnsupportedCurveOperation(f'cannot sample {type(curve).__name__}')
    if hasattr(curve, 'is_closed_curve'):
        t = np.linspace(0.0, 2.0 * math.pi, n)
        return curve.global_points(t)
    t = np.linspace(-cfg.parameter_span, cfg.parameter_span, n)
    points = curve.global_points(t)
    if isinstance(curve, HyperbolicCurve):
        # Mirror branch through the center
        center = np.array(curve.center.as_tuple())
        mirrored = 2.0 * center - points
        gap = np.full((1, 2), np.nan)
        points = np.vstack([points, gap, mirrored])
    return points


def _foci_of(curve) -> List:
    if isinstance(curve, CircularCurve):
        return [curve.center]
    if hasattr(curve, 'foci'):
        return list(curve.foci)
    if isinstance(curve, ConicSectionCurve):
        return [curve.focus]
    return []


def _pairwise_intersections(curves: List) -> List:
    found = []
    for idx, first in enumerate(curves):
        for second in curves[idx + 1:]:
            try:
                found.extend(intersection_coordinates(first, second))
            except (UnsupportedCurveOperation, OverlappingCurvesException, IntersectingCurveException) as exc:
                logger.debug('skipping intersection of %s and %s: %s',
                             type(first).__name__, type(second).__name__, exc)
    return [p for p in found if p.is_finite()]


def plot_curves(curves: Iterable, outname: str = 'curves.png',
                config: Optional[PlotConfig] = None, title: Optional[str] = None) -> str:
    """Draw ``curves`` into ``outname`` and return the path written.

    Args:
        curves: iterable of LinearCurve / conic section curves
        outname: output image path
        config: drawing options; defaults to :class:`PlotConfig`
        title: optional axes title
    """
    cfg = config or PlotConfig()
    curves = list(curves)
    fig, ax = plt.subplots(figsize=cfg.figsize)
    try:
        for curve in curves:
            pts = sample_points(curve, config=cfg)
            ax.plot(pts[:, 0], pts[:, 1], linewidth=1.5, label=type(curve).__name__)
            if cfg.show_foci:
                for focus in _foci_of(curve):
                    ax.plot(focus.x, focus.y, marker='+', color='k', markersize=8)
            if cfg.show_limits and hasattr(curve, 'range'):
                start, end = curve.range.start.limit, curve.range.end.limit
                ax.plot([start.x, end.x], [start.y, end.y], linestyle='none',
                        marker='o', color=(0.2, 0.4, 0.85), markersize=4)
        if cfg.show_intersections:
            hits = _pairwise_intersections(curves)
            if hits:
                ax.scatter([p.x for p in hits], [p.y for p in hits], color=(0.85, 0.2, 0.2),
                           zorder=5, s=18, label='intersections')
            logger.info('plotted %d curves with %d intersection points', len(curves), len(hits))
        if cfg.equal_aspect:
            ax.set_aspect('equal', adjustable='datalim')
        if title:
            ax.set_title(title)
        if curves:
            ax.legend(loc='best', fontsize='small')
        ax.grid(True, linewidth=0.3)
        fig.savefig(outname, dpi=cfg.dpi, bbox_inches='tight')
    finally:
        plt.close(fig)
    logger.debug('wrote %s', outname)
    return outname


__all__ = ['sample_points', 'plot_curves']
