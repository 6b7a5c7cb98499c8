"""
OKLCH slider configuration: ranges, step counts, label formats and gradient stops.
Plain data handed in by callers; nothing here refers to a widget.
"""

from typing import Callable, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .formatter import format_oklch, js_number
from .models import OKLCH

Channel = Literal["l", "c", "h", "a"]


class SliderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float
    steps: int = Field(ge=2)
    label_format: Callable[[float], str]


SLIDER_CONFIG: Dict[str, SliderConfig] = {
    # Lightness
    "l": SliderConfig(min=0, max=100, steps=11, label_format=lambda v: f"{v:.2f}%"),
    # Chroma
    "c": SliderConfig(min=0, max=0.4, steps=11, label_format=lambda v: f"{v:.2f}"),
    # Hue, 12 steps around the color wheel
    "h": SliderConfig(min=0, max=360, steps=12, label_format=lambda v: f"{js_number(v)}°"),
    # Alpha
    "a": SliderConfig(min=0, max=100, steps=11, label_format=lambda v: f"{v:.0f}%"),
}


def _config_for(channel: Channel, config: Optional[SliderConfig]) -> SliderConfig:
    if config is not None:
        return config
    if channel not in SLIDER_CONFIG:
        raise ValueError(f"Unknown slider channel: {channel!r}")
    return SLIDER_CONFIG[channel]


def slider_values(config: SliderConfig) -> List[float]:
    """Evenly spaced values from min to max, both ends included."""
    span = config.max - config.min
    return [config.min + span * (i / (config.steps - 1)) for i in range(config.steps)]


def format_slider_label(channel: Channel, value: float, config: Optional[SliderConfig] = None) -> str:
    return _config_for(channel, config).label_format(value)


def gradient_stops(channel: Channel, color: OKLCH, config: Optional[SliderConfig] = None) -> List[str]:
    """
    One oklch() string per slider step, varying only `channel` of `color`.
    Lightness, chroma and hue stops are opaque; alpha stops carry the step value.
    """
    cfg = _config_for(channel, config)
    base = color.model_copy(update={"a": 100.0})
    stops = []
    for value in slider_values(cfg):
        stops.append(format_oklch(base.model_copy(update={channel: value})))
    return stops


def linear_gradient(channel: Channel, color: OKLCH, config: Optional[SliderConfig] = None) -> str:
    """CSS background for a slider track."""
    return f"linear-gradient(to right, {', '.join(gradient_stops(channel, color, config))})"
