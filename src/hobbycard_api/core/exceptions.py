"""Custom exceptions for the HobbyCard API."""

from typing import Any


class HobbyCardException(Exception):
    """Base exception for HobbyCard API."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidFormatError(HobbyCardException, ValueError):
    """Malformed hex color."""

    def __init__(self, value: str, expected: str = "3 or 6 hexadecimal digits") -> None:
        super().__init__(
            f"Invalid HEX color {value!r}. Expected {expected}",
            "INVALID_FORMAT",
            {"value": value},
        )


class MissingArgumentError(HobbyCardException):
    """A required argument was not supplied."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} is required", "MISSING_ARGUMENT", {"argument": argument})


class HttpStatusError(HobbyCardException):
    """Upstream answered with a non-success HTTP status."""

    def __init__(self, status_code: int, url: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(
            f"HTTP error! status: {status_code}",
            "HTTP_STATUS_ERROR",
            {"status_code": status_code, "url": url},
        )


class NetworkFailureError(HobbyCardException):
    """Transport failure or unreadable response body."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(
            f"Network failure: {message}",
            "NETWORK_FAILURE",
            {"url": url},
        )


class CallbackError(HobbyCardException):
    """A result callback raised while handling loaded data."""

    def __init__(self, callback: str, error: Exception) -> None:
        super().__init__(
            f"{callback} failed: {type(error).__name__}: {error}",
            "CALLBACK_ERROR",
            {"callback": callback},
        )
