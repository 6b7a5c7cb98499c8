import pytest
from pydantic import ValidationError

from color_engine.models import OKLCH
from color_engine.sliders import (
    SLIDER_CONFIG,
    SliderConfig,
    format_slider_label,
    gradient_stops,
    linear_gradient,
    slider_values,
)

color = OKLCH(l=50, c=0.1, h=180, a=40)


def test_slider_values_lightness():
    assert slider_values(SLIDER_CONFIG["l"]) == pytest.approx([float(v) for v in range(0, 101, 10)])


def test_slider_values_hue_has_twelve_steps():
    values = slider_values(SLIDER_CONFIG["h"])
    assert len(values) == 12
    assert values[0] == 0
    assert values[-1] == pytest.approx(360)


def test_slider_values_chroma_ends():
    values = slider_values(SLIDER_CONFIG["c"])
    assert values[0] == 0
    assert values[-1] == pytest.approx(0.4)


@pytest.mark.parametrize(
    "channel, value, expected",
    [("l", 50, "50.00%"), ("c", 0.1234, "0.12"), ("h", 180.0, "180°"), ("a", 50, "50%")],
)
def test_format_slider_label(channel, value, expected):
    assert format_slider_label(channel, value) == expected


def test_lightness_gradient_is_opaque():
    stops = gradient_stops("l", color)
    assert len(stops) == 11
    assert stops[0] == "oklch(0% 0.1 180)"
    assert stops[5] == "oklch(50% 0.1 180)"
    assert stops[-1] == "oklch(100% 0.1 180)"


def test_alpha_gradient_carries_alpha():
    stops = gradient_stops("a", color)
    assert stops[0] == "oklch(50% 0.1 180 / 0%)"
    assert stops[1] == "oklch(50% 0.1 180 / 10%)"
    assert stops[-1] == "oklch(50% 0.1 180)"


def test_hue_gradient_varies_hue_only():
    stops = gradient_stops("h", color)
    assert stops[0] == "oklch(50% 0.1 0)"
    assert stops[-1] == "oklch(50% 0.1 360)"


def test_gradient_does_not_modify_color():
    gradient_stops("c", color)
    assert color == OKLCH(l=50, c=0.1, h=180, a=40)


def test_linear_gradient():
    css = linear_gradient("l", color)
    assert css.startswith("linear-gradient(to right, oklch(0% 0.1 180), oklch(10% 0.1 180)")
    assert css.endswith("oklch(100% 0.1 180))")


def test_custom_config():
    config = SliderConfig(min=0, max=1, steps=2, label_format=lambda v: f"{v:.1f}")
    assert gradient_stops("l", color, config) == ["oklch(0% 0.1 180)", "oklch(1% 0.1 180)"]
    assert format_slider_label("l", 0.25, config) == "0.2"


def test_unknown_channel():
    with pytest.raises(ValueError):
        gradient_stops("x", color)


def test_config_needs_two_steps():
    with pytest.raises(ValidationError):
        SliderConfig(min=0, max=1, steps=1, label_format=str)


def test_config_is_frozen():
    with pytest.raises(ValidationError):
        SLIDER_CONFIG["l"].steps = 3
