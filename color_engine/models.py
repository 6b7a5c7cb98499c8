"""
Color records shared by the converter, parser and formatter.
Alpha is 0-1 on RGBA/HSLA and 0-100 on OKLCH; the scale lives in the type.
"""

from typing import Annotated, Literal, NamedTuple, Union
from pydantic import BaseModel, Field

# Alpha scales
FractionAlpha = Annotated[float, Field(ge=0.0, le=1.0, allow_inf_nan=False)]
PercentAlpha = Annotated[float, Field(ge=0.0, le=100.0, allow_inf_nan=False)]

ColorFormat = Literal["hex", "rgb", "hsl", "oklch"]


def fraction_to_percent(alpha: float) -> float:
    """Convert 0-1 alpha to the 0-100 scale used by OKLCH."""
    return alpha * 100


def percent_to_fraction(alpha: float) -> float:
    """Convert 0-100 OKLCH alpha to the 0-1 scale used by RGBA/HSLA."""
    return alpha / 100


# Intermediate values, unclamped
class Oklab(NamedTuple):
    L: float
    a: float
    b: float


class LinearRGB(NamedTuple):
    r: float
    g: float
    b: float


# Output records
class RGB(BaseModel):
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)


class RGBA(RGB):
    kind: Literal["rgba"] = "rgba"
    a: FractionAlpha = 1.0


class HSL(BaseModel):
    h: int = Field(ge=0, lt=360)
    s: int = Field(ge=0, le=100)
    l: int = Field(ge=0, le=100)


class HSLA(HSL):
    kind: Literal["hsla"] = "hsla"
    a: FractionAlpha = 1.0


class HexColor(BaseModel):
    kind: Literal["hex"] = "hex"
    hex: str = Field(pattern=r"^#[0-9A-F]{6}$", description="Uppercase #RRGGBB")


class OKLCH(BaseModel):
    """Canonical color: l 0-100, c 0-0.4 typical, h degrees, a 0-100."""
    kind: Literal["oklch"] = "oklch"
    l: float = Field(allow_inf_nan=False)
    c: float = Field(allow_inf_nan=False)
    h: float = Field(allow_inf_nan=False)
    a: PercentAlpha = 100.0


class ConvertedColor(BaseModel):
    hex: str
    rgba: RGBA
    hsla: HSLA


class ParsedColor(BaseModel):
    format: ColorFormat
    oklch: OKLCH


ColorValue = Annotated[Union[HexColor, RGBA, HSLA, OKLCH], Field(discriminator="kind")]
