from __future__ import annotations

import numpy as np
import pytest

from curves3d._config import DEFAULT_SETTINGS, PipelineSettings
from curves3d.curves import Circle, Ellipse, Helix
from curves3d.factory import (
    build_curves,
    grouped_curves,
    make_rng,
    parse_curve_spec,
    random_curve,
    random_curves,
)
from curves3d.validation import InvalidParameter, ValidationError


def test_random_curves_within_ranges(rng):
    curves = random_curves(300, rng)
    assert len(curves) == 300
    lo, hi = DEFAULT_SETTINGS.radius_range
    step_lo, step_hi = DEFAULT_SETTINGS.step_range
    for curve in curves:
        if isinstance(curve, Circle):
            assert lo <= curve.radius <= hi
        elif isinstance(curve, Ellipse):
            assert lo <= curve.radius_x <= hi
            assert lo <= curve.radius_y <= hi
        else:
            assert isinstance(curve, Helix)
            assert lo <= curve.radius <= hi
            assert step_lo <= curve.step <= step_hi


def test_random_curves_cover_every_kind(rng):
    kinds = {type(curve) for curve in random_curves(300, rng)}
    assert kinds == {Circle, Ellipse, Helix}


def test_random_curves_deterministic_for_seed():
    first = random_curves(20, make_rng(7))
    second = random_curves(20, make_rng(7))
    assert first == second


def test_random_curve_real_range():
    settings = PipelineSettings(radius_range=(0.1, 0.5), step_range=(0.25, 0.75))
    rng = make_rng(3)
    for _ in range(50):
        curve = random_curve(rng, settings)
        radius = curve.radius_x if isinstance(curve, Ellipse) else curve.radius
        assert 0.1 <= radius <= 0.5


def test_random_curves_rejects_negative_count(rng):
    with pytest.raises(ValueError):
        random_curves(-1, rng)


def test_grouped_curves_layout(rng):
    curves = grouped_curves(5, rng)
    assert [type(c) for c in curves] == [Circle] * 5 + [Ellipse] * 5 + [Helix] * 5


def test_build_curves_grouped_warns_on_remainder(rng):
    settings = PipelineSettings(count=10, layout="grouped")
    with pytest.warns(UserWarning):
        curves = build_curves(settings, rng)
    assert len(curves) == 9


def test_build_curves_random(rng):
    curves = build_curves(PipelineSettings(count=4), rng)
    assert len(curves) == 4


def test_parse_curve_spec():
    assert parse_curve_spec("circle:3") == Circle(3.0)
    assert parse_curve_spec("Ellipse: 2, 5") == Ellipse(2.0, 5.0)
    assert parse_curve_spec("helix:2,4") == Helix(2.0, 4.0)


@pytest.mark.parametrize("text", ["circle", "square:1", "circle:1,2", "helix:1", "ellipse:a,b"])
def test_parse_curve_spec_malformed(text):
    with pytest.raises(ValueError) as info:
        parse_curve_spec(text)
    assert not isinstance(info.value, InvalidParameter)


def test_parse_curve_spec_invalid_parameter():
    with pytest.raises(InvalidParameter):
        parse_curve_spec("helix:1,0")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"count": -1},
        {"radius_range": (0, 5)},
        {"step_range": (3, 1)},
        {"layout": "spiral"},
        {"t": float("inf")},
    ],
)
def test_settings_validation(kwargs):
    with pytest.raises(ValidationError):
        PipelineSettings(**kwargs)


def test_settings_with_overrides_skips_none():
    settings = DEFAULT_SETTINGS.with_overrides(count=3, t=None, layout="Grouped")
    assert settings.count == 3
    assert settings.t == DEFAULT_SETTINGS.t
    assert settings.layout == "grouped"
    assert np.isclose(DEFAULT_SETTINGS.t, np.pi / 4)
