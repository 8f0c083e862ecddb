# locu/core/formulas.py
"""Scalar summaries derived from a Lorenz curve."""

from __future__ import annotations

import math
from numbers import Real
from typing import Protocol, Sequence

import numpy as np

from ..domain.curve import Curve
from ..errors import InvalidInputError


class Interpolator(Protocol):
    """Reads y at population share *p* off the support points (xs, ys)."""

    def __call__(self, p: float, xs: Sequence[float], ys: Sequence[float]) -> float:
        ...


def default_interp(p: float, xs: Sequence[float], ys: Sequence[float]) -> float:
    return float(np.interp(p, xs, ys))


def area_under_curve(curve: Curve) -> float:
    """Trapezoidal area between the x-axis and the curve (0.5 for equality)."""
    dx = np.diff(curve.x)
    return float(np.sum(dx * (curve.y[1:] + curve.y[:-1])) / 2.0)


def gini_coefficient(curve: Curve) -> float:
    """Gini coefficient of the sample behind *curve*.

    Formula: *G* = 1 − 2 × area under the Lorenz curve.
    """
    return 1.0 - 2.0 * area_under_curve(curve)


def share_at(curve: Curve, p: float, interp: Interpolator = default_interp) -> float:
    """Share of the total held by the poorest fraction *p* of the population."""
    if isinstance(p, bool) or not isinstance(p, Real) or math.isnan(p):
        raise InvalidInputError(f"Population share must be a number, got {p!r}")
    if not 0.0 <= p <= 1.0:
        raise InvalidInputError(f"Population share must lie in [0, 1], got {p!r}")
    return interp(p, curve.x, curve.y)


def shoelace_area(x: Sequence[float], y: Sequence[float]) -> float:
    """Signed area of the polygon with vertices (x[i], y[i]).

    Positive for counter-clockwise vertex order.  The polygon is closed
    implicitly; the first vertex must not be repeated at the end.
    """
    xs = np.asarray(x, dtype=np.float64)
    ys = np.asarray(y, dtype=np.float64)
    return float(np.dot(xs, np.roll(ys, -1)) - np.dot(ys, np.roll(xs, -1))) / 2.0
