"""Color conversion schemas."""

from pydantic import Field

from hobbycard_api.schemas.base import BaseSchema

HEX_PATTERN = r"^#?(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$"


class RgbColor(BaseSchema):
    """RGB channels."""

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)


class HslColor(BaseSchema):
    """HSL components, each normalized to [0, 1]."""

    h: float = Field(..., ge=0, le=1)
    s: float = Field(..., ge=0, le=1)
    l: float = Field(..., ge=0, le=1)  # noqa: E741


class HexColor(BaseSchema):
    """A single hex color."""

    hex: str


class ColorConversion(BaseSchema):
    """Every representation derived from one hex color."""

    hex: str
    rgb: RgbColor
    hsl: HslColor
    complementary: str
    inverted: str
    contrast: str = Field(..., description="Black or white, whichever reads better on this color")
