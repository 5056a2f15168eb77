"""Dependency injection for FastAPI."""

from typing import Annotated

import httpx
from fastapi import Depends, Request

from hobbycard_api.config import Settings, get_settings
from hobbycard_api.services import CardFeed


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Get the shared HTTP client opened by the application lifespan."""
    return request.app.state.http_client


def get_card_feed(request: Request) -> CardFeed:
    """Get the application's card feed."""
    return request.app.state.card_feed


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
HttpClientDep = Annotated[httpx.AsyncClient, Depends(get_http_client)]
CardFeedDep = Annotated[CardFeed, Depends(get_card_feed)]
