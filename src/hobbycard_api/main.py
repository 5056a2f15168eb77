"""HobbyCard API - photo cards colored from their dominant color."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hobbycard_api.api.v1 import router as api_v1_router
from hobbycard_api.config import get_settings
from hobbycard_api.core.exceptions import HobbyCardException
from hobbycard_api.services import CardFeed

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    "INVALID_FORMAT": status.HTTP_400_BAD_REQUEST,
    "MISSING_ARGUMENT": status.HTTP_400_BAD_REQUEST,
    "HTTP_STATUS_ERROR": status.HTTP_502_BAD_GATEWAY,
    "NETWORK_FAILURE": status.HTTP_502_BAD_GATEWAY,
}


def build_http_client() -> httpx.AsyncClient:
    """Create the HTTP client shared by the photo requests."""
    return httpx.AsyncClient(timeout=settings.http_timeout)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting HobbyCard API...")
    app.state.http_client = build_http_client()
    app.state.card_feed = CardFeed(settings, app.state.http_client)

    # First photos for the default hobby
    app.state.card_feed.set_hobby(settings.default_hobby)
    logger.info(f"Card feed started for hobby '{settings.default_hobby}'")

    yield
    # Shutdown
    logger.info("Shutting down HobbyCard API...")
    await app.state.card_feed.aclose()
    await app.state.http_client.aclose()
    logger.info("HTTP client closed")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
HobbyCard API

Serves "My name is ... / I love ..." cards built around a random photo
for a hobby:
- Frame, text and divider colors derived from the photo's dominant color
- Hex / RGB / HSL conversion, complementary and inverted colors
- Photographer attribution with Unsplash referral links
    """,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(HobbyCardException)
async def hobbycard_exception_handler(request: Request, exc: HobbyCardException) -> JSONResponse:
    """Handle custom HobbyCard exceptions."""
    status_code = ERROR_STATUS_CODES.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {
                "code": exc.code,
                "message": exc.message,
                "details": exc.details,
            },
        },
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {
                "code": "HTTP_ERROR",
                "message": exc.detail,
            },
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Unexpected error occurred")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
            },
        },
    )


# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.app_version,
    }


# Root endpoint
@app.get("/", tags=["Root"])
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Hobby photo cards with colors derived from the photo",
        "docs": "/docs" if settings.debug else "Disabled in production",
        "health": "/health",
    }


# Include API routers
# Mount at /api for frontend compatibility
app.include_router(api_v1_router, prefix="/api")

# Also mount without prefix for direct access
app.include_router(api_v1_router, prefix="")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hobbycard_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
