"""Photo API schemas."""

from pydantic import ConfigDict, Field

from hobbycard_api.schemas.base import BaseSchema
from hobbycard_api.schemas.color import HEX_PATTERN


class _ApiModel(BaseSchema):
    """Photo API payloads carry far more fields than a card needs."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class PhotoUrls(_ApiModel):
    """Rendered image URLs."""

    regular: str
    small: str | None = None
    thumb: str | None = None


class PhotoUserLinks(_ApiModel):
    """Photographer links."""

    html: str


class PhotoUser(_ApiModel):
    """Photographer credited on the card."""

    name: str
    links: PhotoUserLinks


class Photo(_ApiModel):
    """A random photo as returned by the photo API."""

    id: str
    color: str = Field(..., pattern=HEX_PATTERN)
    urls: PhotoUrls
    user: PhotoUser
    description: str | None = None
    alt_description: str | None = None
