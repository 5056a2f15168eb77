"""API v1 router - combines all endpoint routers."""

from fastapi import APIRouter

from hobbycard_api.api.v1.cards import router as cards_router
from hobbycard_api.api.v1.color import router as color_router
from hobbycard_api.api.v1.photos import router as photos_router

router = APIRouter()

# Include all routers
router.include_router(color_router)
router.include_router(cards_router)
router.include_router(photos_router)
