from pydantic import BaseModel, Field
from typing import Literal

from color_engine.models import ColorValue, PercentAlpha

class ColorInputRequest(BaseModel):
    code: str = Field(..., description="Color text to parse: hex, rgb()/rgba(), hsl()/hsla() or oklch()")

class OklchRequest(BaseModel):
    l: float = Field(..., ge=0, le=100, allow_inf_nan=False, description="Lightness, 0-100")
    c: float = Field(..., ge=0, allow_inf_nan=False, description="Chroma, typically 0-0.4")
    h: float = Field(..., allow_inf_nan=False, description="Hue in degrees")
    a: PercentAlpha = Field(100, description="Alpha, 0-100")

class FormatColorRequest(BaseModel):
    color: ColorValue = Field(..., description="Color record tagged by its 'kind' field")

class SliderGradientRequest(OklchRequest):
    channel: Literal["l", "c", "h", "a"] = Field(..., description="The slider whose track to render")
