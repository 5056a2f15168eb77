"""One-shot photo API endpoints."""

from fastapi import APIRouter, Query

from hobbycard_api.deps import HttpClientDep, SettingsDep
from hobbycard_api.schemas.base import ApiResponse
from hobbycard_api.schemas.card import PhotoCard
from hobbycard_api.services.card_builder import build_cards
from hobbycard_api.services.data_loader import fetch_json
from hobbycard_api.services.photo_source import build_photos_url, parse_photos

router = APIRouter(prefix="/photos", tags=["Photos"])


@router.get("", response_model=ApiResponse[list[PhotoCard]])
async def get_photo_cards(
    settings: SettingsDep,
    client: HttpClientDep,
    hobby: str = Query(..., min_length=1, max_length=100),
    name: str | None = Query(default=None, max_length=100),
    count: int = Query(default=1, ge=1, le=30, description="Number of photos to fetch"),
) -> ApiResponse[list[PhotoCard]]:
    """
    Fetch random photos for a hobby and build their cards.

    Independent from the shared card feed; nothing is stored. Photo API
    failures answer 502 with the HTTP_STATUS_ERROR or NETWORK_FAILURE code.
    """
    url = build_photos_url(settings.photo_api_url, hobby, count)
    photos = parse_photos(await fetch_json(url, client=client))

    return ApiResponse.ok(build_cards(photos, name or settings.default_name, hobby, settings))
