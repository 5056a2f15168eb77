"""Card feed - the name/hobby state and the photos fetched for it."""

import asyncio
import logging
import time
from functools import partial
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from hobbycard_api.config import Settings, get_settings
from hobbycard_api.core.exceptions import HobbyCardException
from hobbycard_api.core.logging import ActionType, event_logger
from hobbycard_api.schemas.card import PhotoCard
from hobbycard_api.schemas.photo import Photo
from hobbycard_api.services.card_builder import build_cards
from hobbycard_api.services.data_loader import load_data
from hobbycard_api.services.photo_source import build_photos_url, parse_photos

logger = logging.getLogger(__name__)


class CardState(BaseModel):
    """Immutable snapshot of the feed."""

    model_config = ConfigDict(frozen=True)

    name: str
    hobby: str
    photos: tuple[Photo, ...] = ()
    generation: int = 0
    loading: bool = False
    error: str | None = None


class CardFeed:
    """Owns the card state and the one photo request in flight.

    Every fetch is tagged with a generation number. Starting a new fetch
    cancels the previous one, and any response that still arrives for an
    older generation is dropped, so a slow answer for an old hobby never
    overwrites the photos of the current one.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.client = client
        self._state = CardState(name=self.settings.default_name, hobby=self.settings.default_hobby)
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> CardState:
        return self._state

    def _update(self, **changes: Any) -> CardState:
        self._state = self._state.model_copy(update=changes)
        return self._state

    def set_name(self, name: str) -> CardState:
        """Change the displayed name. Photos do not depend on it."""
        if name != self._state.name:
            event_logger.log(ActionType.NAME_CHANGE, {"name": name})
        return self._update(name=name)

    def set_hobby(self, hobby: str) -> "asyncio.Task[None] | None":
        """Change the hobby and fetch photos for it.

        Returns the new fetch, or the one already running when the hobby is
        unchanged.
        """
        if hobby == self._state.hobby and self._state.generation > 0:
            return self._task

        event_logger.log(
            ActionType.HOBBY_CHANGE,
            {"from": self._state.hobby, "to": hobby},
            generation=self._state.generation + 1,
        )
        self._update(hobby=hobby)
        return self.refresh()

    def refresh(self) -> "asyncio.Task[None]":
        """Fetch photos for the current hobby, superseding any pending fetch."""
        if self._task is not None and not self._task.done():
            self._task.cancel()

        generation = self._state.generation + 1
        self._update(generation=generation, loading=True, error=None)

        url = build_photos_url(self.settings.photo_api_url, self._state.hobby, self.settings.photo_count)
        event_logger.log(ActionType.PHOTO_FETCH_START, {"url": url}, generation=generation)

        self._task = load_data(
            url,
            on_success=partial(self._on_success, generation, url, time.time()),
            on_error=partial(self._on_error, generation, url),
            client=self.client,
        )
        return self._task

    def _is_stale(self, generation: int, url: str) -> bool:
        if generation == self._state.generation:
            return False
        logger.debug(f"Dropping response for generation {generation} (current {self._state.generation})")
        event_logger.log(
            ActionType.PHOTO_FETCH_STALE,
            {"url": url, "current_generation": self._state.generation},
            generation=generation,
        )
        return True

    def _on_success(self, generation: int, url: str, started: float, data: Any) -> None:
        if self._is_stale(generation, url):
            return

        try:
            photos = parse_photos(data)
        except HobbyCardException as e:
            self._on_error(generation, url, e)
            return

        self._update(photos=tuple(photos), loading=False, error=None)
        event_logger.log_fetch_complete(
            url=url,
            photo_count=len(photos),
            duration_ms=int((time.time() - started) * 1000),
            generation=generation,
        )

    def _on_error(self, generation: int, url: str, error: HobbyCardException) -> None:
        if self._is_stale(generation, url):
            return

        logger.error(f"Failed to fetch photos: {error.message}")
        event_logger.log_fetch_failed(url, error.code, error.message, generation=generation)
        # Photos of the last successful fetch stay on display
        self._update(loading=False, error=error.message)

    async def wait(self) -> CardState:
        """Wait until no fetch is pending and return the settled state."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
        return self._state

    def cards(self) -> list[PhotoCard]:
        """Card view-models for the current state."""
        state = self._state
        return build_cards(state.photos, state.name, state.hobby, self.settings)

    async def aclose(self) -> None:
        """Cancel the pending fetch, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            await asyncio.wait({self._task})
            self._update(loading=False)
        self._task = None
