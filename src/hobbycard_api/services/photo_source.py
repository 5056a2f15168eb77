"""Photo API URL building and response parsing."""

import logging
from typing import Any
from urllib.parse import urlencode

from pydantic import ValidationError

from hobbycard_api.core.exceptions import NetworkFailureError
from hobbycard_api.schemas.photo import Photo

logger = logging.getLogger(__name__)


def build_photos_url(base_url: str, hobby: str | None, count: int = 1) -> str:
    """Build the random-photo URL, searching by ``hobby`` when one is set."""
    params: dict[str, Any] = {"count": count}
    if hobby:
        params["query"] = hobby
    return f"{base_url.rstrip('/')}/?{urlencode(params)}"


def with_utm(url: str, source: str, medium: str) -> str:
    """Append referral parameters required for Unsplash attribution."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode({'utm_source': source, 'utm_medium': medium})}"


def parse_photos(data: Any) -> list[Photo]:
    """Validate a photo API payload.

    The API answers with a list when ``count`` is given and with a single
    object otherwise; both come back as a list.
    """
    items = data if isinstance(data, list) else [data]
    try:
        return [Photo.model_validate(item) for item in items]
    except ValidationError as e:
        logger.warning(f"Unexpected photo payload: {e.error_count()} validation errors")
        raise NetworkFailureError(f"unexpected photo payload: {e.error_count()} validation errors") from e
