import dataclasses
import importlib

import pytest

cfg = importlib.import_module('locu.domain.render_config')
errors = importlib.import_module('locu.errors')
RenderConfig = cfg.RenderConfig


def test_defaults():
    c = RenderConfig()
    assert (c.xlab, c.ylab, c.title) == ('x', 'y', 'Lorenz curve')
    assert c.highlight_below_curve is False
    assert c.highlight_above_curve is False
    assert c.highlight_below_curve_fill_color == 'gray'
    assert c.highlight_above_curve_fill_color == 'tomato'
    assert c.highlight_below_curve_alpha == 0.7
    assert c.highlight_above_curve_alpha == 0.7
    assert c.point_size == 2


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        RenderConfig().title = 'other'


@pytest.mark.parametrize('kwargs', [
    {'highlight_below_curve_fill_color': 'not-a-color'},
    {'highlight_above_curve_fill_color': 'not-a-color'},
    {'highlight_below_curve_fill_color': None},
    {'highlight_below_curve_alpha': 1.5},
    {'highlight_above_curve_alpha': -0.1},
    {'highlight_above_curve_alpha': float('nan')},
    {'highlight_below_curve_alpha': True},
    {'highlight_below_curve_alpha': '0.5'},
    {'point_size': 0.5},
    {'point_size': float('nan')},
    {'point_size': float('inf')},
    {'point_size': '2'},
    {'xlab': ''},
    {'ylab': None},
    {'title': 3},
    {'highlight_below_curve': 1},
    {'highlight_above_curve': 'yes'},
    {'palette': {}},
])
def test_invalid_options(kwargs):
    with pytest.raises(errors.InvalidConfigError):
        RenderConfig(**kwargs)


def test_alpha_bounds_are_inclusive():
    c = RenderConfig(highlight_below_curve_alpha=0, highlight_above_curve_alpha=1)
    assert c.highlight_below_curve_alpha == 0


def test_explicit_palette():
    palette = {'brand': '#123456', 'muted': '#cccccc'}
    c = RenderConfig(
        highlight_below_curve_fill_color='brand',
        highlight_above_curve_fill_color='muted',
        palette=palette,
    )
    assert c.below_fill == '#123456'
    assert c.above_fill == '#cccccc'
    # default colour names are not in a custom palette
    with pytest.raises(errors.InvalidConfigError):
        RenderConfig(palette=palette)


def test_default_palette_is_read_only():
    with pytest.raises(TypeError):
        cfg.DEFAULT_PALETTE['gray'] = '#000000'


def test_from_options_accepts_camel_case():
    c = RenderConfig.from_options({
        'highlightBelowCurve': True,
        'highlightBelowCurveAlpha': 0.3,
        'pointSize': 4,
        'main': 'Income',
        'xlab': 'population',
    })
    assert c.highlight_below_curve is True
    assert c.highlight_below_curve_alpha == 0.3
    assert c.point_size == 4
    assert c.title == 'Income'
    assert c.xlab == 'population'


def test_from_options_rejects_unknown_and_duplicates():
    with pytest.raises(errors.InvalidConfigError):
        RenderConfig.from_options({'colour': 'red'})
    with pytest.raises(errors.InvalidConfigError):
        RenderConfig.from_options({'pointSize': 2, 'point_size': 3})
