"""Photo card schemas."""

from pydantic import Field

from hobbycard_api.schemas.base import BaseSchema


class PhotoCredit(BaseSchema):
    """Attribution line: "Photo by <user> on Unsplash"."""

    user_name: str = Field(..., alias="userName")
    user_url: str = Field(..., alias="userUrl")
    source_name: str = Field("Unsplash", alias="sourceName")
    source_url: str = Field(..., alias="sourceUrl")


class PhotoCard(BaseSchema):
    """Everything needed to render one card."""

    id: str
    image_url: str = Field(..., alias="imageUrl")
    frame_color: str = Field(..., alias="frameColor")
    text_color: str = Field(..., alias="textColor")
    divider_color: str = Field(..., alias="dividerColor")
    position_color: str = Field(..., alias="positionColor")
    name_text: str = Field(..., alias="nameText")
    hobby_text: str = Field(..., alias="hobbyText")
    credit: PhotoCredit


class ProfileUpdateRequest(BaseSchema):
    """Change the name and/or hobby shown on the cards."""

    name: str | None = Field(None, max_length=100)
    hobby: str | None = Field(None, max_length=100)


class CardStateResponse(BaseSchema):
    """Snapshot of the card feed."""

    name: str
    hobby: str
    generation: int
    loading: bool
    photo_count: int = Field(..., alias="photoCount")
    error: str | None = None
