"""
Pytest configuration for hobbycard-api tests.
"""

import pytest

from hobbycard_api.config import Settings

PHOTO_API_URL = "https://photos.test/unsplash/photos/random"


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        photo_api_url=PHOTO_API_URL,
        default_name="Renato",
        default_hobby="Paint",
    )


@pytest.fixture
def photo_factory():
    """Build photo API payloads, including fields the cards ignore."""

    def make(photo_id: str = "abc123", color: str = "#ffa500", name: str = "Jane Doe") -> dict:
        return {
            "id": photo_id,
            "color": color,
            "likes": 42,
            "urls": {
                "raw": f"https://images.test/{photo_id}?raw",
                "regular": f"https://images.test/{photo_id}.jpg",
            },
            "user": {
                "name": name,
                "links": {"html": f"https://unsplash.com/@{photo_id}"},
            },
        }

    return make
