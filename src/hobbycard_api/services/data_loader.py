"""Fire-and-forget JSON loading with success/error callbacks."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import httpx

from hobbycard_api.config import get_settings
from hobbycard_api.core.exceptions import (
    CallbackError,
    HobbyCardException,
    HttpStatusError,
    MissingArgumentError,
    NetworkFailureError,
)

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[HobbyCardException], None]


async def fetch_json(url: str, *, client: httpx.AsyncClient | None = None) -> Any:
    """GET ``url`` once and return its parsed JSON body.

    Raises:
        MissingArgumentError: if ``url`` is empty.
        HttpStatusError: on a non-2xx response.
        NetworkFailureError: on transport failure or an unparsable body.
    """
    if not url:
        raise MissingArgumentError("URL")

    if client is None:
        async with httpx.AsyncClient(timeout=get_settings().http_timeout) as own_client:
            return await fetch_json(url, client=own_client)

    try:
        response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise NetworkFailureError(str(e) or type(e).__name__, url) from e

    if not response.is_success:
        raise HttpStatusError(response.status_code, url)

    try:
        return response.json()
    except ValueError as e:
        raise NetworkFailureError(f"invalid JSON body: {e}", url) from e


async def _load(
    url: str,
    on_success: SuccessCallback | None,
    on_error: ErrorCallback | None,
    client: httpx.AsyncClient | None,
) -> None:
    try:
        data = await fetch_json(url, client=client)
        if on_success:
            try:
                on_success(data)
            except HobbyCardException:
                raise
            except Exception as e:
                raise CallbackError("on_success", e) from e
    except HobbyCardException as e:
        if on_error:
            on_error(e)
        else:
            logger.error(f"Error fetching data: {e.message}")


def load_data(
    url: str | None,
    on_success: SuccessCallback | None = None,
    on_error: ErrorCallback | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> "asyncio.Task[None]":
    """Fetch ``url`` in the background and dispatch the result to callbacks.

    The URL is checked before anything is scheduled, so a missing URL fails
    right here. Everything after that is delivered through ``on_success`` or
    ``on_error``; when no error callback is given the failure is logged and
    nothing escapes. The returned task can be awaited or cancelled.

    Must be called with a running event loop.
    """
    if not url:
        raise MissingArgumentError("URL")

    return asyncio.get_running_loop().create_task(_load(url, on_success, on_error, client))
