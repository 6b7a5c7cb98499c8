"""
Parse user-typed color text (hex, rgb/rgba, hsl/hsla, oklch) into canonical OKLCH.
Every accepted input converges on one OKLCH record; anything else yields None.
"""

import logging
import math
import re
from typing import Callable, Dict, Optional

from .conversions import hex_to_oklch, hsl_to_oklch, rgb_to_oklch
from .models import OKLCH, RGBA, ColorFormat, ParsedColor

logger = logging.getLogger(__name__)

# Regular expression patterns
ws = r"\s*"
num = r"(?:\d+(?:\.\d+)?|\.\d+)"
integer = r"\d+"
comma = f"{ws},{ws}"
comma_or_space = f"{ws}[,\\s]{ws}"
alpha_sep = f"{ws}[,/]{ws}"

BARE_HEX_RE = re.compile(r"[0-9a-f]{6}", re.IGNORECASE)
HEX_RE = re.compile(r"#[0-9a-f]{6}", re.IGNORECASE)

RGB_RE = re.compile(
    f"rgba?{ws}\\({ws}({integer}){comma}({integer}){comma}({integer})(?:{alpha_sep}({num})(%?))?{ws}\\)",
    re.IGNORECASE,
)

HSL_RE = re.compile(
    f"hsla?{ws}\\({ws}({num}){comma_or_space}({integer})%?{comma_or_space}({integer})%?(?:{alpha_sep}({num})(%?))?{ws}\\)",
    re.IGNORECASE,
)

OKLCH_RE = re.compile(
    f"oklch{ws}\\({ws}({num})%{ws}({num})\\s+({num})(?:{ws}/{ws}({num})(%?))?{ws}\\)",
    re.IGNORECASE,
)


def _fraction_alpha(value: Optional[str], percent: str) -> float:
    """Alpha token to the 0-1 scale. A trailing '%' means 0-100."""
    if value is None:
        return 1.0
    alpha = float(value) / 100 if percent else float(value)
    if not 0 <= alpha <= 1:
        raise ValueError(f"alpha out of range: {value}{percent}")
    return alpha


def _finite(value: str, name: str) -> float:
    """Float from a matched number. Digit runs that overflow a double become inf and are rejected."""
    v = float(value)
    if not math.isfinite(v):
        raise ValueError(f"{name} is not finite: {value[:16]}...")
    return v


def _percentage(value: str, name: str) -> int:
    v = int(value)
    if v > 100:
        raise ValueError(f"{name} out of range: {value}")
    return v


def detect_color_format(text: str) -> Optional[ColorFormat]:
    """Classify text by prefix. Hex wins over rgb, rgb over hsl, hsl over oklch."""
    s = text.strip()
    lowered = s.lower()
    if s.startswith("#") or BARE_HEX_RE.fullmatch(s):
        return "hex"
    if lowered.startswith("rgb"):
        return "rgb"
    if lowered.startswith("hsl"):
        return "hsl"
    if lowered.startswith("oklch"):
        return "oklch"
    return None


# Per-grammar parsers ---------------------------------------------

def parse_hex(s: str) -> Optional[OKLCH]:
    """Parse #RRGGBB or bare RRGGBB."""
    hex_str = s if s.startswith("#") else f"#{s}"
    if not HEX_RE.fullmatch(hex_str):
        return None
    return hex_to_oklch(hex_str)


def parse_rgb(s: str) -> Optional[OKLCH]:
    """Parse rgb(r, g, b) / rgba(r, g, b, a). Alpha is a fraction unless it ends in '%'."""
    m = RGB_RE.fullmatch(s)
    if not m:
        return None
    r, g, b, a, a_pct = m.groups()
    rgba = RGBA(r=int(r), g=int(g), b=int(b), a=_fraction_alpha(a, a_pct))
    return rgb_to_oklch(rgba.r, rgba.g, rgba.b, rgba.a)


def parse_hsl(s: str) -> Optional[OKLCH]:
    """Parse hsl(h, s%, l%) / hsla(...), comma or space separated, alpha after ',' or '/'."""
    m = HSL_RE.fullmatch(s)
    if not m:
        return None
    h, sat, light, a, a_pct = m.groups()
    return hsl_to_oklch(
        _finite(h, "hue"),
        _percentage(sat, "saturation"),
        _percentage(light, "lightness"),
        _fraction_alpha(a, a_pct),
    )


def parse_oklch(s: str) -> Optional[OKLCH]:
    """Parse oklch(l% c h) with optional '/ a' (fraction) or '/ a%' suffix."""
    m = OKLCH_RE.fullmatch(s)
    if not m:
        return None
    l, c, h, a, a_pct = m.groups()
    alpha = 100.0
    if a is not None:
        alpha = _finite(a, "alpha")
        if not a_pct:
            alpha *= 100
    lightness = _finite(l, "lightness")
    if lightness > 100:
        raise ValueError(f"lightness out of range: {l}%")
    return OKLCH(l=lightness, c=_finite(c, "chroma"), h=_finite(h, "hue"), a=alpha)


PARSERS: Dict[str, Callable[[str], Optional[OKLCH]]] = {
    "hex": parse_hex,
    "rgb": parse_rgb,
    "hsl": parse_hsl,
    "oklch": parse_oklch,
}


# Top-level -------------------------------------------------------

def parse_color_format(text: str) -> Optional[ParsedColor]:
    """Parse any supported color string, returning the grammar it matched and its OKLCH value."""
    s = text.strip()
    color_format = detect_color_format(s)
    if color_format is None:
        logger.debug("No color grammar matches %r", s)
        return None

    try:
        oklch = PARSERS[color_format](s)
    except ValueError as exc:
        logger.debug("Rejected %s color %r: %s", color_format, s, exc)
        return None

    if oklch is None:
        logger.debug("Malformed %s color %r", color_format, s)
        return None
    return ParsedColor(format=color_format, oklch=oklch)


def parse_color_input(text: str) -> Optional[OKLCH]:
    """Parse any supported color string to canonical OKLCH, or None. Never raises."""
    parsed = parse_color_format(text)
    return parsed.oklch if parsed else None
