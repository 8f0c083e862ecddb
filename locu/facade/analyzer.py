# locu/facade/analyzer.py
"""Высокоуровневый *facade* для построения и отрисовки кривой Лоренца.

Класс **LorenzAnalyzer** инкапсулирует последовательность вызовов:
1. Расчёт опорных точек (``build_curve``).
2. Производные показатели (площадь, коэффициент Джини, доля нижних *p*).
3. Отрисовка через модуль *visualization.renderer*.

Клиентскому коду достаточно создать один объект и вызвать ``plot``.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import pandas as pd
from matplotlib.figure import Figure

from ..core import formulas
from ..core.curve_builder import build_curve
from ..domain.curve import Curve
from ..domain.render_config import RenderConfig
from ..errors import InvalidConfigError
from ..visualization import renderer


class LorenzAnalyzer:
    """Single entry point bundling a sample, its curve and its chart."""

    # ------------------------------------------------------------------
    # Конструктор
    # ------------------------------------------------------------------

    def __init__(self, sample: Sequence[float]) -> None:
        self.curve: Curve = build_curve(sample)

    # ------------------------------------------------------------------
    # Данные и показатели
    # ------------------------------------------------------------------

    @property
    def data(self) -> pd.DataFrame:
        return self.curve.data

    @property
    def gini(self) -> float:
        return formulas.gini_coefficient(self.curve)

    def share_at(self, p: float) -> float:
        """Share of the total held by the poorest fraction *p*."""
        return formulas.share_at(self.curve, p)

    # ------------------------------------------------------------------
    # График
    # ------------------------------------------------------------------

    def plot(self, config: Optional[RenderConfig] = None, **options: Any) -> Figure:
        """Render the curve.

        Either pass a ready :class:`RenderConfig` or keyword options
        (snake_case or camelCase), not both.
        """
        if config is not None and options:
            raise InvalidConfigError("Pass either a RenderConfig or keyword options")
        if config is None:
            config = RenderConfig.from_options(options)
        return renderer.render(self.curve, config)
