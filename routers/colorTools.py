"""
Color tool endpoints. Thin wrappers over color_engine: every route parses or
converts through the engine and returns structured data plus CSS strings.
"""

import logging
from fastapi import HTTPException, APIRouter

from color_engine import (
    convert_oklch,
    format_all,
    format_color,
    format_slider_label,
    linear_gradient,
    parse_color_format,
)
from color_engine.models import OKLCH
from schemas.requests import (
    ColorInputRequest,
    FormatColorRequest,
    OklchRequest,
    SliderGradientRequest,
)
from schemas.responses import (
    ConversionResponse,
    ErrorResponse,
    ParsedColorResponse,
    SliderGradientResponse,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/parse_color_input",
    response_model=ParsedColorResponse,
    responses={400: {"model": ErrorResponse}},
    operation_id="parse_color_input",
    description="Parse a hex, rgb(a), hsl(a) or oklch color string into OKLCH and all display formats",
)
async def parse_color(request: ColorInputRequest):
    """Parse user color text to canonical OKLCH."""
    parsed = parse_color_format(request.code)
    if parsed is None:
        logger.info("Unparseable color input: %r", request.code)
        raise HTTPException(status_code=400, detail="Invalid color format")
    return ParsedColorResponse(
        format=parsed.format,
        oklch=parsed.oklch,
        formatted=format_all(parsed.oklch),
    )


@router.post(
    "/convert_oklch",
    response_model=ConversionResponse,
    operation_id="convert_oklch",
    description="Convert an OKLCH color (alpha 0-100) to hex, rgba and hsla",
)
async def convert(request: OklchRequest):
    """Convert OKLCH to its hex/rgba/hsla siblings."""
    color = OKLCH(l=request.l, c=request.c, h=request.h, a=request.a)
    return ConversionResponse(
        conversions=convert_oklch(color.l, color.c, color.h, color.a),
        formatted=format_all(color),
    )


@router.post(
    "/format_color",
    response_model=SuccessResponse,
    operation_id="format_color",
    description="Render a hex, rgba, hsla or oklch color record as CSS text",
)
async def format_color_record(request: FormatColorRequest):
    """Format a tagged color record."""
    return SuccessResponse(message=format_color(request.color))


@router.post(
    "/slider_gradient",
    response_model=SliderGradientResponse,
    operation_id="slider_gradient",
    description="Label and CSS linear-gradient for one OKLCH slider at the given color",
)
async def slider_gradient(request: SliderGradientRequest):
    """Render one slider's label and track gradient."""
    color = OKLCH(l=request.l, c=request.c, h=request.h, a=request.a)
    value = getattr(color, request.channel)
    return SliderGradientResponse(
        label=format_slider_label(request.channel, value),
        gradient=linear_gradient(request.channel, color),
    )
