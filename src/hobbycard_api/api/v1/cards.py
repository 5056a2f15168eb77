"""Card API endpoints."""

from fastapi import APIRouter

from hobbycard_api.core.logging import ActionType, event_logger
from hobbycard_api.deps import CardFeedDep
from hobbycard_api.schemas.base import ApiResponse
from hobbycard_api.schemas.card import CardStateResponse, PhotoCard, ProfileUpdateRequest
from hobbycard_api.services.card_feed import CardState

router = APIRouter(prefix="/cards", tags=["Cards"])


def _state_response(state: CardState) -> CardStateResponse:
    return CardStateResponse(
        name=state.name,
        hobby=state.hobby,
        generation=state.generation,
        loading=state.loading,
        photo_count=len(state.photos),
        error=state.error,
    )


@router.get("", response_model=ApiResponse[list[PhotoCard]])
async def get_cards(feed: CardFeedDep) -> ApiResponse[list[PhotoCard]]:
    """
    Get the cards for the current name and hobby.

    Waits for a pending photo fetch first. When the fetch failed the
    previous cards are returned; no cards are shown without a hobby.
    """
    await feed.wait()
    cards = feed.cards()
    event_logger.log(ActionType.CARD_VIEW, {"card_count": len(cards)}, generation=feed.state.generation)
    return ApiResponse.ok(cards)


@router.get("/state", response_model=ApiResponse[CardStateResponse])
async def get_state(feed: CardFeedDep) -> ApiResponse[CardStateResponse]:
    """Get the current name, hobby and fetch status without waiting."""
    return ApiResponse.ok(_state_response(feed.state))


@router.put("/profile", response_model=ApiResponse[CardStateResponse])
async def update_profile(
    data: ProfileUpdateRequest,
    feed: CardFeedDep,
) -> ApiResponse[CardStateResponse]:
    """
    Change the name and/or hobby.

    A new hobby starts a photo fetch in the background; poll
    ``/cards/state`` or call ``/cards`` to get the result.
    """
    if data.name is not None:
        feed.set_name(data.name)
    if data.hobby is not None:
        feed.set_hobby(data.hobby)
    return ApiResponse.ok(_state_response(feed.state))


@router.post("/refresh", response_model=ApiResponse[CardStateResponse])
async def refresh_cards(feed: CardFeedDep) -> ApiResponse[CardStateResponse]:
    """Fetch a new random photo for the current hobby."""
    feed.refresh()
    return ApiResponse.ok(_state_response(feed.state))
