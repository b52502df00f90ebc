"""Public package API for the conics geometry kernel.

This facade provides a flat import surface on top of the internal
implementation package ``conics.core`` while deferring the matplotlib-backed
plotting module until first use so that ``import conics`` stays fast and
headless.

Example
-------
    from conics import CartesianCoordinate, CircularCurve, intersection_coordinates

    c1 = CircularCurve(6, CartesianCoordinate(0, 0))
    c2 = CircularCurve(7, CartesianCoordinate(11, 0))
    intersection_coordinates(c1, c2)

The deeper modules (``conics.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:  # Python 3.8+ runtime version export
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("conics-kernel")  # populated when installed
except Exception:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_const = _imp('conics.core.constants')
_exc = _imp('conics.core.exceptions')
_num = _imp('conics.core.numerics')
_coords = _imp('conics.core.coordinates')
_range = _imp('conics.core.range')
_linear = _imp('conics.core.linear')
_conic = _imp('conics.core.conic')
_circular = _imp('conics.core.circular')
_elliptical = _imp('conics.core.elliptical')
_hyperbolic = _imp('conics.core.hyperbolic')
_parabolic = _imp('conics.core.parabolic')
_inter = _imp('conics.core.intersections')
_arc = _imp('conics.core.arc_length')
_config = _imp('conics.core.config')
_log = _imp('conics.core.logging_utils')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)

        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m

        def __getattr__(self, item):
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


def _lazy_attr(mod_name, name):
    def _wrapper(*args, **kwargs):
        return getattr(_imp(mod_name), name)(*args, **kwargs)
    _wrapper.__name__ = name
    return _wrapper


# Lazily loaded matplotlib-backed module
visualization = _lazy_module('conics.core.visualization')
plot_curves = _lazy_attr('conics.core.visualization', 'plot_curves')
sample_points = _lazy_attr('conics.core.visualization', 'sample_points')

# Value types
CartesianCoordinate = _coords.CartesianCoordinate
Angle = _coords.Angle
AngularOffset = _coords.AngularOffset
Vector = _coords.Vector

# Curves
LinearCurve = _linear.LinearCurve
ConicSectionCurve = _conic.ConicSectionCurve
CircularCurve = _circular.CircularCurve
EllipticalCurve = _elliptical.EllipticalCurve
HyperbolicCurve = _hyperbolic.HyperbolicCurve
ParabolicCurve = _parabolic.ParabolicCurve
CurveLimit = _range.CurveLimit
CurveRange = _range.CurveRange

# Intersections
Incidence = _inter.Incidence
are_intersecting = _inter.are_intersecting
are_tangent = _inter.are_tangent
intersection_coordinates = _inter.intersection_coordinates

# Errors
DegenerateGeometryError = _exc.DegenerateGeometryError
UnsupportedCurveOperation = _exc.UnsupportedCurveOperation
LimitOutOfRangeError = _exc.LimitOutOfRangeError
OverlappingCurvesException = _exc.OverlappingCurvesException
IntersectingCurveException = _exc.IntersectingCurveException

# Configuration and logging
ConicsConfig = _config.ConicsConfig
ArcLengthConfig = _config.ArcLengthConfig
PlotConfig = _config.PlotConfig
configure_logging = _log.configure_logging
get_logger = _log.get_logger

# Tolerances
DEFAULT_TOLERANCE = _const.DEFAULT_TOLERANCE

# Namespace submodules for exploratory users
constants = _const
numerics = _num
coordinates = _coords
intersections = _inter
arc_length = _arc

__all__ = [
    '__version__',
    # value types
    'CartesianCoordinate', 'Angle', 'AngularOffset', 'Vector',
    # curves
    'LinearCurve', 'ConicSectionCurve', 'CircularCurve', 'EllipticalCurve',
    'HyperbolicCurve', 'ParabolicCurve', 'CurveLimit', 'CurveRange',
    # intersections
    'Incidence', 'are_intersecting', 'are_tangent', 'intersection_coordinates',
    # errors
    'DegenerateGeometryError', 'UnsupportedCurveOperation', 'LimitOutOfRangeError',
    'OverlappingCurvesException', 'IntersectingCurveException',
    # configuration / logging
    'ConicsConfig', 'ArcLengthConfig', 'PlotConfig', 'configure_logging', 'get_logger',
    'DEFAULT_TOLERANCE',
    # plotting (lazy)
    'plot_curves', 'sample_points', 'visualization',
    # submodules / namespaces
    'constants', 'numerics', 'coordinates', 'intersections', 'arc_length',
]
