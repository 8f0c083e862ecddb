# locu/core/polygon_builder.py
"""Polygons used to shade regions of a Lorenz chart."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ..domain.curve import Curve

Polygon = Tuple[np.ndarray, np.ndarray]  # (x, y) vertex coordinates


def polygon_below_curve(curve: Curve) -> Polygon:
    """Outline of the area between the x-axis and the curve.

    Walks forward along ``y = 0`` through every support point's x, then back
    along the curve from (1, 1) to the first point after the origin.  The
    closing edge returns to the origin, which is not repeated, so the
    polygon has ``2n + 1`` vertices.
    """
    x = np.concatenate((curve.x, curve.x[:0:-1]))
    y = np.concatenate((np.zeros(len(curve.x)), curve.y[:0:-1]))
    return x, y


def polygon_above_curve(curve: Curve) -> Polygon:
    """Outline used for the above-curve highlight: the curve's own points.

    Closing the path from (1, 1) back to (0, 0) runs along the line of
    equality, so the filled region is the one between curve and diagonal.
    """
    return curve.x.copy(), curve.y.copy()
