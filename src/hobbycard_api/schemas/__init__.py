"""Pydantic schemas for HobbyCard API."""

from hobbycard_api.schemas.base import ApiResponse, ErrorDetail
from hobbycard_api.schemas.card import (
    CardStateResponse,
    PhotoCard,
    PhotoCredit,
    ProfileUpdateRequest,
)
from hobbycard_api.schemas.color import ColorConversion, HexColor, HslColor, RgbColor
from hobbycard_api.schemas.photo import Photo, PhotoUrls, PhotoUser, PhotoUserLinks

__all__ = [
    # Base
    "ApiResponse",
    "ErrorDetail",
    # Card
    "CardStateResponse",
    "PhotoCard",
    "PhotoCredit",
    "ProfileUpdateRequest",
    # Color
    "ColorConversion",
    "HexColor",
    "HslColor",
    "RgbColor",
    # Photo
    "Photo",
    "PhotoUrls",
    "PhotoUser",
    "PhotoUserLinks",
]
