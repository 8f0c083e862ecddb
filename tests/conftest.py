import importlib
import os
import sys

import matplotlib
import pytest

matplotlib.use("Agg")

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

build_curve = importlib.import_module('locu.core.curve_builder').build_curve


@pytest.fixture
def incomes():
    return [540, 450, 740, 2850, 3500, 1100, 750, 630, 450, 465, 560, 410]


@pytest.fixture
def curve(incomes):
    return build_curve(incomes)


@pytest.fixture
def small_curve():
    return build_curve([0, 0, 10])
