"""
Render color records as CSS text.
Alpha is omitted only when exactly opaque (1 for rgba/hsla, 100 for oklch).
"""

import math
from decimal import Decimal
from typing import Dict

from .conversions import convert_oklch
from .models import HSLA, OKLCH, RGBA, ColorValue, HexColor


def js_number(x: float) -> str:
    """
    Number to text the way a browser prints it: 50.0 -> '50', 0.1 -> '0.1',
    1e16 -> '10000000000000000', 2.5e-08 -> '2.5e-8', 1e21 -> '1e+21'.
    Digits are the shortest round-tripping ones; positional notation is used
    for exponents -7 < e < 21.
    """
    x = float(x)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "0"

    shortest = repr(x)
    exponent = Decimal(shortest).adjusted()
    if -7 < exponent < 21:
        text = format(Decimal(shortest), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    mantissa, _, exp = shortest.partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    exp_value = int(exp)
    return f"{mantissa}e{'+' if exp_value > 0 else '-'}{abs(exp_value)}"


def format_oklch(color: OKLCH) -> str:
    body = f"{js_number(color.l)}% {js_number(color.c)} {js_number(color.h)}"
    if color.a != 100:
        body += f" / {js_number(color.a)}%"
    return f"oklch({body})"


def format_hex(color: HexColor) -> str:
    return color.hex


def format_rgba(color: RGBA) -> str:
    if color.a == 1:
        return f"rgb({color.r}, {color.g}, {color.b})"
    return f"rgba({color.r}, {color.g}, {color.b}, {js_number(color.a)})"


def format_hsla(color: HSLA) -> str:
    if color.a == 1:
        return f"hsl({color.h}, {color.s}%, {color.l}%)"
    return f"hsla({color.h}, {color.s}%, {color.l}%, {js_number(color.a)})"


def format_color(color: ColorValue) -> str:
    """Format any tagged color record. Unknown record types are an error, not ''."""
    if isinstance(color, OKLCH):
        return format_oklch(color)
    elif isinstance(color, HexColor):
        return format_hex(color)
    elif isinstance(color, RGBA):
        return format_rgba(color)
    elif isinstance(color, HSLA):
        return format_hsla(color)
    raise TypeError(f"Unsupported color record: {type(color).__name__}")


def format_all(color: OKLCH) -> Dict[str, str]:
    """The four display strings of one color, from a single conversion."""
    converted = convert_oklch(color.l, color.c, color.h, color.a)
    return {
        "oklch": format_oklch(color),
        "hex": format_hex(HexColor(hex=converted.hex)),
        "rgba": format_rgba(converted.rgba),
        "hsla": format_hsla(converted.hsla),
    }
