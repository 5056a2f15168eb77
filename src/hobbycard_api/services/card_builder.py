"""Card view-models built from photos and their dominant color."""

from collections.abc import Iterable

from hobbycard_api.config import Settings, get_settings
from hobbycard_api.schemas.card import PhotoCard, PhotoCredit
from hobbycard_api.schemas.photo import Photo
from hobbycard_api.services.color_converter import hex_to_complementary, invert_color
from hobbycard_api.services.photo_source import with_utm


def _ensure_hash(color: str) -> str:
    return color if color.startswith("#") else f"#{color}"


def build_card(photo: Photo, name: str, hobby: str, settings: Settings | None = None) -> PhotoCard:
    """Build the card for one photo.

    The dominant color is the text color, its complement colors the divider
    and the hobby line, and the frame is black or white for contrast.
    """
    settings = settings or get_settings()

    complementary = hex_to_complementary(photo.color)
    frame = invert_color(photo.color, True)

    return PhotoCard(
        id=photo.id,
        image_url=photo.urls.regular,
        frame_color=frame,
        text_color=_ensure_hash(photo.color),
        divider_color=complementary,
        position_color=complementary,
        name_text=f"My name is {name}",
        hobby_text=f"I love {hobby}",
        credit=PhotoCredit(
            user_name=photo.user.name,
            user_url=with_utm(photo.user.links.html, settings.utm_source, settings.utm_medium),
            source_url=with_utm(settings.unsplash_url, settings.utm_source, settings.utm_medium),
        ),
    )


def build_cards(
    photos: Iterable[Photo],
    name: str,
    hobby: str,
    settings: Settings | None = None,
) -> list[PhotoCard]:
    """Build cards for every photo; nothing is shown without a hobby."""
    if not hobby:
        return []
    return [build_card(photo, name, hobby, settings) for photo in photos]
