"""Service layer for HobbyCard API."""

from hobbycard_api.services.card_builder import build_card, build_cards
from hobbycard_api.services.card_feed import CardFeed, CardState
from hobbycard_api.services.color_converter import (
    hex_to_complementary,
    hex_to_rgb,
    hsl_to_rgb,
    invert_color,
    rgb_to_hex,
    rgb_to_hsl,
)
from hobbycard_api.services.data_loader import fetch_json, load_data
from hobbycard_api.services.photo_source import build_photos_url, parse_photos, with_utm

__all__ = [
    "CardFeed",
    "CardState",
    "build_card",
    "build_cards",
    "build_photos_url",
    "fetch_json",
    "hex_to_complementary",
    "hex_to_rgb",
    "hsl_to_rgb",
    "invert_color",
    "load_data",
    "parse_photos",
    "rgb_to_hex",
    "rgb_to_hsl",
    "with_utm",
]
