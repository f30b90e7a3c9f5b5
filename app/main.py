import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings
from app.exceptions.custom import ApiKeyNotConfiguredError, GoogleMapsError, RateLimitError
from app.exceptions.handlers import (
    api_key_not_configured_handler,
    google_maps_error_handler,
    rate_limit_error_handler,
)
from app.routers.booking import router as booking_router
from app.routers.directions import router as directions_router
from app.routers.geocode import router as geocode_router
from app.routers.meta import router as meta_router
from app.routers.places import router as places_router
from app.services.google_maps import GoogleMapsService
from app.services.route_planner import RoutePlannerService
from app.services.venue_details import VenueDetailsService
from app.services.venue_search import VenueSearchService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if not settings.google_api_key:
        logger.warning("GOOGLE_API_KEY not set; map endpoints will return 503")

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        google_maps = GoogleMapsService(client, settings.google_api_key)

        app.state.google_maps = google_maps
        app.state.venue_search_service = VenueSearchService(google_maps)
        app.state.venue_details_service = VenueDetailsService(google_maps)
        app.state.route_planner_service = RoutePlannerService(google_maps)

        yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GoogleMapsError, google_maps_error_handler)
    app.add_exception_handler(RateLimitError, rate_limit_error_handler)
    app.add_exception_handler(ApiKeyNotConfiguredError, api_key_not_configured_handler)

    app.include_router(geocode_router)
    app.include_router(places_router)
    app.include_router(directions_router)
    app.include_router(booking_router)
    app.include_router(meta_router)
    return app


app = create_app()
