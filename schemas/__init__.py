from .requests import ColorInputRequest, FormatColorRequest, OklchRequest, SliderGradientRequest
from .responses import (
    ConversionResponse,
    ErrorResponse,
    ParsedColorResponse,
    SliderGradientResponse,
    SuccessResponse,
)

__all__ = [
    "ColorInputRequest",
    "FormatColorRequest",
    "OklchRequest",
    "SliderGradientRequest",
    "ConversionResponse",
    "ErrorResponse",
    "ParsedColorResponse",
    "SliderGradientResponse",
    "SuccessResponse",
]
