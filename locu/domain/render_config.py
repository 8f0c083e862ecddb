# locu/domain/render_config.py
"""Параметры отрисовки кривой Лоренца.

Все опции собраны в один неизменяемый объект **RenderConfig**, который
проверяется *один раз* при создании (``__post_init__``).  Отрисовщик
получает уже корректную конфигурацию и не делает собственных проверок.

Допустимые имена цветов задаются явной палитрой (``palette``).  По
умолчанию это именованные цвета CSS4 из matplotlib, но вызывающий код
может передать собственное отображение *имя → цвет*.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from numbers import Real
from types import MappingProxyType
from typing import Any, Mapping

from matplotlib import colors as mcolors

from .. import constants as C
from ..errors import InvalidConfigError

# Read-only; pass a custom mapping via RenderConfig(palette=...)
DEFAULT_PALETTE: Mapping[str, str] = MappingProxyType(dict(mcolors.CSS4_COLORS))

# camelCase option names -> RenderConfig attributes
_OPTION_ALIASES = {
    "highlightBelowCurve": "highlight_below_curve",
    "highlightBelowCurveFillColor": "highlight_below_curve_fill_color",
    "highlightBelowCurveAlpha": "highlight_below_curve_alpha",
    "highlightAboveCurve": "highlight_above_curve",
    "highlightAboveCurveFillColor": "highlight_above_curve_fill_color",
    "highlightAboveCurveAlpha": "highlight_above_curve_alpha",
    "pointSize": "point_size",
    "main": "title",
}


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Validated styling options of a Lorenz curve chart."""

    # --- подписи ---
    xlab: str = C.DEFAULT_XLAB
    ylab: str = C.DEFAULT_YLAB
    title: str = C.DEFAULT_TITLE

    # --- заливка между осью x и кривой ---
    highlight_below_curve: bool = False
    highlight_below_curve_fill_color: str = C.DEFAULT_BELOW_FILL_COLOR
    highlight_below_curve_alpha: float = C.DEFAULT_ALPHA

    # --- заливка между кривой и линией равенства ---
    highlight_above_curve: bool = False
    highlight_above_curve_fill_color: str = C.DEFAULT_ABOVE_FILL_COLOR
    highlight_above_curve_alpha: float = C.DEFAULT_ALPHA

    point_size: float = C.DEFAULT_POINT_SIZE

    palette: Mapping[str, str] = field(
        default_factory=lambda: DEFAULT_PALETTE, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        for name in ("xlab", "ylab", "title"):
            _check_text(name, getattr(self, name))
        for name in ("highlight_below_curve", "highlight_above_curve"):
            _check_flag(name, getattr(self, name))
        for name in ("highlight_below_curve_alpha", "highlight_above_curve_alpha"):
            _check_alpha(name, getattr(self, name))

        if not isinstance(self.palette, Mapping) or not self.palette:
            raise InvalidConfigError("palette must be a non-empty mapping")
        for name in (
            "highlight_below_curve_fill_color",
            "highlight_above_curve_fill_color",
        ):
            self._check_color(name, getattr(self, name))

        size = self.point_size
        if (
            not _is_real(size)
            or math.isnan(size)
            or math.isinf(size)
            or size < C.MIN_POINT_SIZE
        ):
            raise InvalidConfigError(
                f"point_size must be a finite number >= {C.MIN_POINT_SIZE:g}, got {size!r}"
            )

    # ------------------------------------------------------------------
    # Доступ к цветам палитры
    # ------------------------------------------------------------------

    @property
    def below_fill(self) -> str:
        """Colour spec of the below-curve fill, resolved via the palette."""
        return self.palette[self.highlight_below_curve_fill_color]

    @property
    def above_fill(self) -> str:
        return self.palette[self.highlight_above_curve_fill_color]

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "RenderConfig":
        """Build a config from keyword options.

        Accepts both the snake_case attribute names and their camelCase
        spellings (``pointSize``, ``highlightBelowCurveAlpha`` ...).
        Unknown keys raise :class:`InvalidConfigError`.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise InvalidConfigError(f"Unknown render option '{key}'")
            if name in kwargs:
                raise InvalidConfigError(f"Render option '{name}' given twice")
            kwargs[name] = value
        return cls(**kwargs)

    def _check_color(self, name: str, value: Any) -> None:
        if not isinstance(value, str) or value not in self.palette:
            raise InvalidConfigError(
                f"{name} must be a colour name from the palette, got {value!r}"
            )


# ---------------------------------------------------------------------------
# Проверки отдельных полей
# ---------------------------------------------------------------------------


def _is_real(value: Any) -> bool:
    # bool is an int subclass, but True is not a valid size or alpha
    return isinstance(value, Real) and not isinstance(value, bool)


def _check_text(name: str, value: Any) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidConfigError(f"{name} must be a non-empty string, got {value!r}")


def _check_flag(name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise InvalidConfigError(f"{name} must be a bool, got {value!r}")


def _check_alpha(name: str, value: Any) -> None:
    if not _is_real(value) or not 0.0 <= value <= 1.0:
        raise InvalidConfigError(f"{name} must be a number in [0, 1], got {value!r}")
