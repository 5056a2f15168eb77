"""Structured event logging for card and photo activity."""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel

from hobbycard_api.config import get_settings


class ActionType(str, Enum):
    """Event types written to the event log."""

    # Photo API
    PHOTO_FETCH_START = "photo.fetch.start"
    PHOTO_FETCH_COMPLETE = "photo.fetch.complete"
    PHOTO_FETCH_FAILED = "photo.fetch.failed"
    PHOTO_FETCH_STALE = "photo.fetch.stale"

    # Card state
    NAME_CHANGE = "card.name.change"
    HOBBY_CHANGE = "card.hobby.change"
    CARD_VIEW = "card.view"

    # Color tools
    COLOR_CONVERT = "color.convert"


class EventLog(BaseModel):
    """Structured log entry."""

    timestamp: datetime
    action_type: ActionType
    action_data: dict[str, Any]
    generation: int | None = None
    duration_ms: int | None = None


class EventLogger:
    """Logger for structured card events.

    Every event goes to the ``hobbycard.events`` logger as one JSON
    document, so it can be shipped as JSON lines when ``event_log_file``
    is configured.
    """

    def __init__(self, log_file: str = "") -> None:
        self.logger = logging.getLogger("hobbycard.events")
        self._setup_logger(log_file)

    def _setup_logger(self, log_file: str) -> None:
        """Configure the event logger."""
        self.logger.setLevel(logging.INFO)
        if log_file:
            handler = logging.FileHandler(log_file, encoding="utf-8")
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)

    def log(
        self,
        action_type: ActionType,
        action_data: dict[str, Any] | None = None,
        generation: int | None = None,
        duration_ms: int | None = None,
    ) -> EventLog:
        """Log an event."""
        log_entry = EventLog(
            timestamp=datetime.now(timezone.utc),
            action_type=action_type,
            action_data=action_data or {},
            generation=generation,
            duration_ms=duration_ms,
        )
        self.logger.info(log_entry.model_dump_json())
        return log_entry

    def log_fetch_complete(
        self,
        url: str,
        photo_count: int,
        duration_ms: int,
        generation: int | None = None,
    ) -> None:
        """Log a successful photo fetch."""
        self.log(
            action_type=ActionType.PHOTO_FETCH_COMPLETE,
            action_data={"url": url, "photo_count": photo_count},
            generation=generation,
            duration_ms=duration_ms,
        )

    def log_fetch_failed(
        self,
        url: str,
        code: str,
        message: str,
        generation: int | None = None,
    ) -> None:
        """Log a failed photo fetch with its error code."""
        self.log(
            action_type=ActionType.PHOTO_FETCH_FAILED,
            action_data={"url": url, "code": code, "message": message},
            generation=generation,
        )


# Global event logger instance
event_logger = EventLogger(get_settings().event_log_file)
