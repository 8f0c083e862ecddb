# locu/domain/curve.py
"""Опорные точки кривой Лоренца.

Модель хранит *минимально* необходимый набор данных, который нужен
отрисовке и производным расчётам:

* **source** – исходная выборка в исходном порядке (копия, только чтение);
* **x** – накопленная доля совокупности ``i / n`` (``n + 1`` значение,
  начиная с 0);
* **y** – накопленная доля суммарной величины (``n + 1`` значение,
  начиная с 0 и заканчивая ровно 1).

Объект создаётся только через :func:`locu.core.curve_builder.build_curve`
и после этого не меняется: массивы помечены как read‑only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np
import pandas as pd


class CurvePoint(NamedTuple):
    """Support point of the curve; both coordinates lie in [0, 1]."""

    x: float  # cumulative share of population
    y: float  # cumulative share of the quantity


@dataclass(frozen=True, slots=True, eq=False)
class Curve:
    """Immutable container of a sample and its Lorenz support points."""

    source: np.ndarray  # sample as given, original order
    x: np.ndarray       # n + 1 population shares
    y: np.ndarray       # n + 1 quantity shares

    @property
    def n(self) -> int:
        """Sample size (number of points minus the origin)."""
        return len(self.source)

    @property
    def points(self) -> Tuple[CurvePoint, ...]:
        return tuple(CurvePoint(float(a), float(b)) for a, b in zip(self.x, self.y))

    @property
    def data(self) -> pd.DataFrame:
        """Support points as a two-column table (``x``, ``y``)."""
        return pd.DataFrame({"x": self.x, "y": self.y})

    def __len__(self) -> int:
        return len(self.x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return (
            np.array_equal(self.source, other.source)
            and np.array_equal(self.x, other.x)
            and np.array_equal(self.y, other.y)
        )
