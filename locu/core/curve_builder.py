# locu/core/curve_builder.py
"""Расчёт опорных точек кривой Лоренца.

Алгоритм:
1. Проверяет выборку (длина ≥ 2, только числа, без пропусков, без
   отрицательных и бесконечных значений).
2. Сортирует значения по возрастанию, делит на максимум (чтобы сумма
   огромных значений не переполнилась) и считает накопленные суммы.
3. Делит накопленные суммы на общую сумму (доля величины, *y*) и номера
   элементов на ``n`` (доля совокупности, *x*).
4. Добавляет начало координат (0, 0).

Нулевая сумма делает доли неопределёнными, поэтому выборка из одних
нулей отклоняется с :class:`~locu.errors.DivisionByZeroError`.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..constants import MIN_SAMPLE_SIZE
from ..domain.curve import Curve
from ..errors import DivisionByZeroError, InvalidInputError

logger = logging.getLogger(__name__)


def build_curve(sample: Sequence[float] | np.ndarray) -> Curve:
    """Return the Lorenz curve support points of *sample*.

    Raises
    ------
    InvalidInputError
        If the sample is not one-dimensional numeric data of length >= 2
        with finite, non-negative values.
    DivisionByZeroError
        If all values are zero.
    """
    source = _as_sample(sample)
    n = len(source)

    ordered = np.sort(source)
    largest = ordered[-1]
    if largest == 0:
        raise DivisionByZeroError("Sample sums to zero; cumulative shares are undefined")
    # scaled by the maximum so the running sum stays finite for huge values
    cumsum = np.cumsum(ordered / largest)
    total = cumsum[-1]

    x = np.concatenate(([0.0], np.arange(1, n + 1) / n))
    y = np.concatenate(([0.0], cumsum / total))
    logger.debug("built Lorenz curve: n=%d max=%g", n, largest)

    for arr in (source, x, y):
        arr.flags.writeable = False
    return Curve(source=source, x=x, y=y)


def _as_sample(sample) -> np.ndarray:
    """Validate *sample* and return it as a private float64 copy."""
    if sample is None or isinstance(sample, (str, bytes)):
        raise InvalidInputError(f"Sample must be a sequence of numbers, got {sample!r}")
    try:
        values = sample if isinstance(sample, np.ndarray) else list(sample)
        missing = any(v is None for v in values)
        if isinstance(values, np.ndarray):
            logical = values.dtype.kind == "b"
        else:
            logical = any(isinstance(v, (bool, np.bool_)) for v in values)
        arr = None if missing else np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Sample must contain only numbers: {exc}") from exc
    if arr is None:
        raise InvalidInputError("Sample contains missing values")
    if logical:
        raise InvalidInputError("Sample must be numeric, got boolean values")

    if arr.ndim != 1:
        raise InvalidInputError(f"Sample must be one-dimensional, got shape {arr.shape}")
    if len(arr) < MIN_SAMPLE_SIZE:
        raise InvalidInputError(
            f"Sample must have at least {MIN_SAMPLE_SIZE} values, got {len(arr)}"
        )
    if np.isnan(arr).any():
        raise InvalidInputError("Sample contains missing values (NaN)")
    if np.isinf(arr).any():
        raise InvalidInputError("Sample contains infinite values")
    if (arr < 0).any():
        raise InvalidInputError("Sample contains negative values")
    return arr
