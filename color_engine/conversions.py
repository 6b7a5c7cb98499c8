"""
Conversions between OKLCH, Oklab, linear RGB, sRGB, hex and HSL.
Math follows CSS Color Module Level 4: https://www.w3.org/TR/css-color-4/

OKLCH is the hub. Every function here is pure; out-of-gamut values are
carried through the pipeline and only clamped when producing 0-255 channels.
"""

import logging
import math
import re
from typing import Sequence, Tuple

from .models import (
    HSL,
    HSLA,
    OKLCH,
    RGB,
    RGBA,
    ConvertedColor,
    LinearRGB,
    Oklab,
    fraction_to_percent,
    percent_to_fraction,
)

logger = logging.getLogger(__name__)

Matrix = Tuple[Tuple[float, float, float], ...]

# Oklab -> LMS (cube roots)
M1: Matrix = (
    (1.0, 0.396337777408718568325042724609375, 0.21580375730345133215188979804515838623046875),
    (1.0, -0.1055613458125419479858875274658203125, -0.0638541728988224186599254608154296875),
    (1.0, -0.08948417751491888523101806640625, -1.29148554802059173583984375),
)

# LMS -> linear sRGB
M2: Matrix = (
    (4.076741662108719609375, -3.307711591321111392974853515625, 0.2309699292089945112168788909912109375),
    (-1.268438004607870094478130340576171875, 2.60975740112341635562479496002197265625, -0.34131939651554626114666461944580078125),
    (-0.004196086355900801718235015869140625, -0.7034186147013165391981601715087890625, 1.70761470104896191775798797607421875),
)

# linear sRGB -> LMS
M2_INV: Matrix = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# LMS (cube roots) -> Oklab
M1_INV: Matrix = (
    (0.2104542553, 0.793617785, -0.0040720468),
    (1.9779984951, -2.428592205, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.808675766),
)

# Below this chroma a color is gray: chroma and hue are reported as 0
ACHROMATIC_CHROMA = 1e-6

HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


class MalformedHexError(ValueError):
    """Raised when a hex string is not an optional '#' plus six hex digits."""


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def round_half_up(x: float) -> int:
    """Round to nearest integer with halves rounded up (0.5 -> 1, 2.5 -> 3)."""
    return int(math.floor(x + 0.5))


def to_channel(v: float) -> int:
    """Final 0-255 output step: NaN becomes 0, anything else is clamped then rounded."""
    if math.isnan(v):
        return 0
    return round_half_up(clamp(v, 0, 255))


def normalize_hue(h: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    h = h % 360
    # -1e-17 % 360 == 360.0 in floating point
    return 0.0 if h >= 360 else h


def _mat_vec(m: Matrix, v: Sequence[float]) -> Tuple[float, float, float]:
    return (
        m[0][0] * v[0] + m[0][1] * v[1] + m[0][2] * v[2],
        m[1][0] * v[0] + m[1][1] * v[1] + m[1][2] * v[2],
        m[2][0] * v[0] + m[2][1] * v[1] + m[2][2] * v[2],
    )


def _cbrt(v: float) -> float:
    return math.copysign(abs(v) ** (1 / 3), v)


# OKLCH -> sRGB ---------------------------------------------------

def oklch_to_oklab(l: float, c: float, h: float) -> Oklab:
    """Convert OKLCH (l 0-100, c, h degrees) to Oklab (L 0-1, a, b)."""
    # Non-finite hues wrap to NaN instead of raising in math.cos
    hue_rad = (normalize_hue(h) * math.pi) / 180
    return Oklab(L=l / 100, a=c * math.cos(hue_rad), b=c * math.sin(hue_rad))


def oklab_to_linear_rgb(L: float, a: float, b: float) -> LinearRGB:
    """Convert Oklab to linear sRGB. Results may fall outside [0, 1]."""
    lms = _mat_vec(M1, (L, a, b))
    # Multiplication overflows to inf where ** would raise
    lms_cubed = tuple(v * v * v for v in lms)
    return LinearRGB(*_mat_vec(M2, lms_cubed))


def linear_to_srgb(value: float) -> float:
    """Gamma-encode one linear channel. The sign is kept so clamping happens later."""
    abs_v = abs(value)
    sign = math.copysign(1.0, value) if value != 0 else 0.0
    if abs_v > 0.0031308:
        return sign * (1.055 * abs_v ** (1 / 2.4) - 0.055)
    return sign * (12.92 * abs_v)


def linear_rgb_to_standard_rgb(linear_rgb: LinearRGB, alpha: float = 1.0) -> RGBA:
    """Gamma-encode, scale to 0-255, clamp and round. Alpha (0-1) is attached unchanged."""
    def channel(v: float) -> int:
        return to_channel(linear_to_srgb(v) * 255)

    return RGBA(
        r=channel(linear_rgb.r),
        g=channel(linear_rgb.g),
        b=channel(linear_rgb.b),
        a=alpha,
    )


# HEX -------------------------------------------------------------

def rgb_to_hex(rgb: RGB) -> str:
    """Convert RGB to an uppercase #RRGGBB string. Alpha is dropped."""
    return f"#{rgb.r:02X}{rgb.g:02X}{rgb.b:02X}"


def hex_to_rgb(hex_str: str) -> RGB:
    """Parse #RRGGBB (the '#' is optional) to RGB."""
    m = HEX_RE.fullmatch(hex_str)
    if not m:
        raise MalformedHexError(f"Invalid hex color: {hex_str!r}")
    r, g, b = (int(group, 16) for group in m.groups())
    return RGB(r=r, g=g, b=b)


# HSL -------------------------------------------------------------

def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert RGB (0-255) to HSL with h 0-359, s and l 0-100, all rounded."""
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    max_val = max(r, g, b)
    min_val = min(r, g, b)
    delta = max_val - min_val

    lightness = (max_val + min_val) / 2
    saturation = 0.0
    hue = 0.0
    if delta != 0:
        saturation = delta / (1 - abs(2 * lightness - 1))
        if max_val == r:
            hue = ((g - b) / delta) % 6
        elif max_val == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4
        hue *= 60

    return HSL(
        h=round_half_up(normalize_hue(hue)) % 360,
        s=round_half_up(saturation * 100),
        l=round_half_up(lightness * 100),
    )


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL (h degrees, s and l 0-100) to RGB."""
    h = normalize_hue(h)
    s /= 100
    l /= 100

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(((h / 60) % 2) - 1))
    m = l - c / 2

    if 0 <= h < 60:
        r1, g1, b1 = c, x, 0.0
    elif 60 <= h < 120:
        r1, g1, b1 = x, c, 0.0
    elif 120 <= h < 180:
        r1, g1, b1 = 0.0, c, x
    elif 180 <= h < 240:
        r1, g1, b1 = 0.0, x, c
    elif 240 <= h < 300:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    def channel(v: float) -> int:
        return to_channel((v + m) * 255)

    return RGB(r=channel(r1), g=channel(g1), b=channel(b1))


# sRGB -> OKLCH ---------------------------------------------------

def srgb_to_linear(value: float) -> float:
    """Decode one gamma-encoded channel (0-1) to linear light."""
    abs_v = abs(value)
    if abs_v <= 0.04045:
        return value / 12.92
    return math.copysign(((abs_v + 0.055) / 1.055) ** 2.4, value)


def rgb_to_oklch(r: float, g: float, b: float, a: float = 1.0) -> OKLCH:
    """Convert RGB (0-255) and alpha (0-1) to OKLCH with alpha 0-100."""
    linear = (srgb_to_linear(r / 255), srgb_to_linear(g / 255), srgb_to_linear(b / 255))
    lms = _mat_vec(M2_INV, linear)
    L, lab_a, lab_b = _mat_vec(M1_INV, tuple(_cbrt(v) for v in lms))

    chroma = math.sqrt(lab_a * lab_a + lab_b * lab_b)
    hue = 0.0
    if chroma < ACHROMATIC_CHROMA:
        chroma = 0.0
    else:
        hue = normalize_hue(math.degrees(math.atan2(lab_b, lab_a)))

    return OKLCH(l=L * 100, c=chroma, h=hue, a=fraction_to_percent(a))


def hex_to_oklch(hex_str: str) -> OKLCH:
    """Convert #RRGGBB to opaque OKLCH."""
    rgb = hex_to_rgb(hex_str)
    return rgb_to_oklch(rgb.r, rgb.g, rgb.b)


def hsl_to_oklch(h: float, s: float, l: float, a: float = 1.0) -> OKLCH:
    """Convert HSL (s, l 0-100) and alpha (0-1) to OKLCH."""
    rgb = hsl_to_rgb(h, s, l)
    return rgb_to_oklch(rgb.r, rgb.g, rgb.b, a)


# Top-level -------------------------------------------------------

def convert_oklch(l: float, c: float, h: float, a: float = 100) -> ConvertedColor:
    """
    Convert OKLCH (alpha 0-100) to hex, rgba and hsla.
    All three are derived from the same RGB value so they always agree.
    """
    alpha = percent_to_fraction(a)
    oklab = oklch_to_oklab(l, c, h)
    linear = oklab_to_linear_rgb(oklab.L, oklab.a, oklab.b)
    rgba = linear_rgb_to_standard_rgb(linear, alpha)
    hsl = rgb_to_hsl(rgba)
    logger.debug("oklch(%s %s %s / %s) -> %s", l, c, h, a, rgba)
    return ConvertedColor(
        hex=rgb_to_hex(rgba),
        rgba=rgba,
        hsla=HSLA(h=hsl.h, s=hsl.s, l=hsl.l, a=alpha),
    )
