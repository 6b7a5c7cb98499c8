from .conversions import (
    MalformedHexError,
    convert_oklch,
    hex_to_oklch,
    hex_to_rgb,
    hsl_to_oklch,
    hsl_to_rgb,
    linear_rgb_to_standard_rgb,
    linear_to_srgb,
    oklab_to_linear_rgb,
    oklch_to_oklab,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_oklch,
    srgb_to_linear,
)
from .formatter import format_all, format_color, format_hex, format_hsla, format_oklch, format_rgba
from .models import (
    HSL,
    HSLA,
    OKLCH,
    RGB,
    RGBA,
    ColorFormat,
    ColorValue,
    ConvertedColor,
    HexColor,
    LinearRGB,
    Oklab,
    ParsedColor,
)
from .parser import detect_color_format, parse_color_format, parse_color_input
from .sliders import SLIDER_CONFIG, SliderConfig, format_slider_label, gradient_stops, linear_gradient

__all__ = [
    "MalformedHexError",
    "convert_oklch",
    "hex_to_oklch",
    "hex_to_rgb",
    "hsl_to_oklch",
    "hsl_to_rgb",
    "linear_rgb_to_standard_rgb",
    "linear_to_srgb",
    "oklab_to_linear_rgb",
    "oklch_to_oklab",
    "rgb_to_hex",
    "rgb_to_hsl",
    "rgb_to_oklch",
    "srgb_to_linear",
    "format_all",
    "format_color",
    "format_hex",
    "format_hsla",
    "format_oklch",
    "format_rgba",
    "HSL",
    "HSLA",
    "OKLCH",
    "RGB",
    "RGBA",
    "ColorFormat",
    "ColorValue",
    "ConvertedColor",
    "HexColor",
    "LinearRGB",
    "Oklab",
    "ParsedColor",
    "detect_color_format",
    "parse_color_format",
    "parse_color_input",
    "SLIDER_CONFIG",
    "SliderConfig",
    "format_slider_label",
    "gradient_stops",
    "linear_gradient",
]
