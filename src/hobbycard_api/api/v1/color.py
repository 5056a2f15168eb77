"""Color conversion API endpoints."""

from fastapi import APIRouter, Query

from hobbycard_api.core.logging import ActionType, event_logger
from hobbycard_api.schemas.base import ApiResponse
from hobbycard_api.schemas.color import ColorConversion, HexColor, HslColor, RgbColor
from hobbycard_api.services.color_converter import (
    hex_to_complementary,
    hex_to_rgb,
    hsl_to_rgb,
    invert_color,
    rgb_to_hex,
    rgb_to_hsl,
)

router = APIRouter(prefix="/color", tags=["Color"])

HexQuery = Query(..., description="Hex color, 3 or 6 digits, '#' optional", examples=["#FFA500"])


@router.get("/convert", response_model=ApiResponse[ColorConversion])
async def convert_color(hex: str = HexQuery) -> ApiResponse[ColorConversion]:
    """
    Convert a hex color to every representation used by the cards.

    Returns RGB, HSL, the complementary color, the inverted color and
    the black/white color that contrasts best with it.
    """
    r, g, b = hex_to_rgb(hex)
    h, s, l = rgb_to_hsl(r, g, b)  # noqa: E741

    event_logger.log(ActionType.COLOR_CONVERT, {"hex": hex})

    return ApiResponse.ok(
        ColorConversion(
            hex=rgb_to_hex(r, g, b),
            rgb=RgbColor(r=r, g=g, b=b),
            hsl=HslColor(h=h, s=s, l=l),
            complementary=hex_to_complementary(hex),
            inverted=invert_color(hex),
            contrast=invert_color(hex, True),
        )
    )


@router.get("/complementary", response_model=ApiResponse[HexColor])
async def complementary_color(hex: str = HexQuery) -> ApiResponse[HexColor]:
    """Get the color opposite on the hue wheel."""
    return ApiResponse.ok(HexColor(hex=hex_to_complementary(hex)))


@router.get("/invert", response_model=ApiResponse[HexColor])
async def inverted_color(
    hex: str = HexQuery,
    bw: bool = Query(default=False, description="Return black or white for best contrast"),
) -> ApiResponse[HexColor]:
    """Invert a hex color, or pick black/white text for it."""
    return ApiResponse.ok(HexColor(hex=invert_color(hex, bw)))


@router.post("/rgb-to-hex", response_model=ApiResponse[HexColor])
async def convert_rgb_to_hex(data: RgbColor) -> ApiResponse[HexColor]:
    """Convert RGB channels to a hex color."""
    return ApiResponse.ok(HexColor(hex=rgb_to_hex(data.r, data.g, data.b)))


@router.post("/hsl-to-rgb", response_model=ApiResponse[RgbColor])
async def convert_hsl_to_rgb(data: HslColor) -> ApiResponse[RgbColor]:
    """Convert HSL components to RGB channels."""
    r, g, b = hsl_to_rgb(data.h, data.s, data.l)
    return ApiResponse.ok(RgbColor(r=r, g=g, b=b))
