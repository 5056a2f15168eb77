"""API v1."""

from hobbycard_api.api.v1.router import router

__all__ = ["router"]
