from pydantic import BaseModel, Field
from typing import Dict, Optional

from color_engine.models import ColorFormat, ConvertedColor, OKLCH

class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None

class ErrorResponse(BaseModel):
    success: bool = False
    detail: str

class ParsedColorResponse(SuccessResponse):
    format: ColorFormat
    oklch: OKLCH
    formatted: Dict[str, str] = Field(..., description="oklch, hex, rgba and hsla display strings")

class ConversionResponse(SuccessResponse):
    conversions: ConvertedColor
    formatted: Dict[str, str]

class SliderGradientResponse(SuccessResponse):
    label: str
    gradient: str
