"""Tolerance-aware scalar comparisons.

All curve predicates are written in terms of these helpers rather than raw
``==``/``<``. Infinities compare equal to themselves so that sentinel results
(``inf`` for "no solution") can be compared directly.
"""
from __future__ import annotations

import math
from typing import List

from .constants import DEFAULT_TOLERANCE


def is_zero(value: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    return abs(value) <= tolerance


def is_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    if a == b:
        return True
    return abs(a - b) <= tolerance


def is_greater(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """True when ``a`` exceeds ``b`` by more than the tolerance."""
    return a - b > tolerance


def is_less(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    return b - a > tolerance


def is_greater_or_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    return not is_less(a, b, tolerance)


def is_less_or_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    return not is_greater(a, b, tolerance)


def is_within_inclusive(value: float, lower: float, upper: float,
                        tolerance: float = DEFAULT_TOLERANCE) -> bool:
    return is_greater_or_equal(value, lower, tolerance) and is_less_or_equal(value, upper, tolerance)


def sign(value: float, tolerance: float = DEFAULT_TOLERANCE) -> int:
    """-1 when ``value`` is below zero by more than ``tolerance``, else 1 (so sgn(0) = 1)."""
    return -1 if is_less(value, 0.0, tolerance) else 1


def governing_tolerance(*items, default: float = DEFAULT_TOLERANCE) -> float:
    """Largest tolerance carried by ``items``.

    Items may be numbers or objects exposing a ``tolerance`` attribute; items
    with neither are ignored.
    """
    tolerances = []
    for item in items:
        if isinstance(item, (int, float)) and not isinstance(item, bool):
            tolerances.append(float(item))
        elif hasattr(item, 'tolerance'):
            tolerances.append(float(item.tolerance))
    return max(tolerances) if tolerances else default


def solve_quadratic(a: float, b: float, c: float,
                    tolerance: float = DEFAULT_TOLERANCE,
                    eps_leading: float = 0.0) -> List[float]:
    """Real roots of ``a*x**2 + b*x + c`` ordered largest first.

    Roots whose half-separation ``sqrt(|disc|) / (2|a|)`` is within
    ``tolerance`` are merged into a double root and both equal roots are
    returned. A vanishing leading coefficient degrades to the linear root.
    """
    if abs(a) <= eps_leading:
        if abs(b) <= eps_leading:
            return []
        return [-c / b]
    disc = b * b - 4.0 * a * c
    if math.sqrt(abs(disc)) / (2.0 * abs(a)) <= tolerance:
        vertex = -b / (2.0 * a)
        return [vertex, vertex]
    if disc < 0:
        return []
    root = math.sqrt(disc)
    # Numerically stable form avoids cancellation between -b and root
    q = -0.5 * (b + math.copysign(root, b)) if b != 0 else 0.5 * root
    return sorted([q / a, c / q], reverse=True)


__all__ = [
    'is_zero',
    'is_equal',
    'is_greater',
    'is_less',
    'is_greater_or_equal',
    'is_less_or_equal',
    'is_within_inclusive',
    'sign',
    'governing_tolerance',
    'solve_quadratic',
]
