# locu/visualization/renderer.py
"""Отрисовка кривой Лоренца средствами matplotlib.

Функция :func:`render` собирает график из слоёв строго в заданном
порядке (каждый следующий слой рисуется поверх предыдущего):

1. заливка под кривой (опционально);
2. заливка над кривой (опционально);
3. линия кривой;
4. маркеры опорных точек;
5. пунктирная линия равенства ``y = x``;
6. подписи осей и заголовок.

Порядок закрепляется явным ``zorder``, потому что matplotlib по
умолчанию рисует заливки, линии и маркеры на разных уровнях.  Каждому
слою присваивается ``gid``, по которому его можно найти на осях.

По умолчанию создаётся отдельный :class:`~matplotlib.figure.Figure`, не
привязанный к ``pyplot``: функция не трогает глобальное состояние и не
вызывает ``plt.show()``.
"""

from __future__ import annotations

import logging
from typing import Optional

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..constants import POINTS_PER_MM
from ..core.polygon_builder import polygon_above_curve, polygon_below_curve
from ..domain.curve import Curve
from ..domain.render_config import RenderConfig
from ..errors import InvalidConfigError, InvalidInputError

logger = logging.getLogger(__name__)

# gid and z-order of every layer, bottom to top
LAYER_BELOW_CURVE = "below-curve"
LAYER_ABOVE_CURVE = "above-curve"
LAYER_CURVE = "lorenz-curve"
LAYER_POINTS = "curve-points"
LAYER_EQUALITY = "line-of-equality"

LAYER_ORDER = (
    LAYER_BELOW_CURVE,
    LAYER_ABOVE_CURVE,
    LAYER_CURVE,
    LAYER_POINTS,
    LAYER_EQUALITY,
)
_ZORDER = {name: i + 1 for i, name in enumerate(LAYER_ORDER)}

_INK = "black"


def render(
    curve: Curve,
    config: Optional[RenderConfig] = None,
    ax: Optional[Axes] = None,
) -> Figure:
    """Draw *curve* styled by *config* and return the figure.

    If *ax* is given the chart is drawn into it and its figure is returned;
    otherwise a new standalone figure with one axes is created.
    """
    if not isinstance(curve, Curve):
        raise InvalidInputError(f"Expected a Curve, got {type(curve).__name__}")
    if config is None:
        config = RenderConfig()
    elif not isinstance(config, RenderConfig):
        raise InvalidConfigError(
            f"Expected a RenderConfig, got {type(config).__name__}"
        )

    logger.info(
        "Rendering Lorenz curve (n=%d, below=%s, above=%s)",
        curve.n,
        config.highlight_below_curve,
        config.highlight_above_curve,
    )

    if ax is None:
        fig = Figure()
        ax = fig.add_subplot()
    else:
        fig = ax.get_figure()

    # 1) Заливка между осью x и кривой
    if config.highlight_below_curve:
        px, py = polygon_below_curve(curve)
        _fill(ax, px, py, config.below_fill, config.highlight_below_curve_alpha,
              LAYER_BELOW_CURVE)

    # 2) Заливка по точкам самой кривой
    if config.highlight_above_curve:
        px, py = polygon_above_curve(curve)
        _fill(ax, px, py, config.above_fill, config.highlight_above_curve_alpha,
              LAYER_ABOVE_CURVE)

    # 3) Линия и 4) точки
    (line,) = ax.plot(curve.x, curve.y, color=_INK, zorder=_ZORDER[LAYER_CURVE])
    line.set_gid(LAYER_CURVE)

    markers = ax.scatter(
        curve.x,
        curve.y,
        s=(config.point_size * POINTS_PER_MM) ** 2,
        color=_INK,
        zorder=_ZORDER[LAYER_POINTS],
    )
    markers.set_gid(LAYER_POINTS)

    # 5) Линия равенства
    diagonal = ax.axline(
        (0.0, 0.0), (1.0, 1.0),
        color=_INK, linestyle="--", zorder=_ZORDER[LAYER_EQUALITY],
    )
    diagonal.set_gid(LAYER_EQUALITY)

    # 6) Подписи
    ax.set_xlabel(config.xlab)
    ax.set_ylabel(config.ylab)
    ax.set_title(config.title)
    return fig


def _fill(ax: Axes, x, y, color: str, alpha: float, gid: str) -> None:
    for patch in ax.fill(x, y, color=color, alpha=alpha, linewidth=0,
                         zorder=_ZORDER[gid]):
        patch.set_gid(gid)
