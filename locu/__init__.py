# locu/__init__.py
"""Пакет **locu** (LOrenz CUrve).

Инициализационный модуль упрощает импорт «ключевых сущностей»
библиотеки для внешних пользователей:

--- from locu import build_curve, render, RenderConfig ---

Экспортируемые объекты перечислены в ``__all__`` — это *public API*
пакета.
"""

from __future__ import annotations

from .core.curve_builder import build_curve
from .core.formulas import area_under_curve, gini_coefficient, share_at
from .core.polygon_builder import polygon_above_curve, polygon_below_curve
from .domain.curve import Curve, CurvePoint
from .domain.render_config import DEFAULT_PALETTE, RenderConfig
from .errors import (
    DivisionByZeroError,
    InvalidConfigError,
    InvalidInputError,
    LocuError,
)
from .facade.analyzer import LorenzAnalyzer
from .visualization.renderer import render

# historical name of the entry point
locu = build_curve

__all__ = [
    "build_curve",     # выборка -> опорные точки
    "render",          # опорные точки -> Figure
    "locu",
    "Curve",
    "CurvePoint",
    "RenderConfig",
    "DEFAULT_PALETTE",
    "polygon_below_curve",
    "polygon_above_curve",
    "area_under_curve",
    "gini_coefficient",
    "share_at",
    "LorenzAnalyzer",  # фасад: кривая + показатели + график
    "LocuError",
    "InvalidInputError",
    "DivisionByZeroError",
    "InvalidConfigError",
]
