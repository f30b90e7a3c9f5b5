from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from app.exceptions.custom import ApiKeyNotConfiguredError
from app.services.google_maps import GoogleMapsService
from app.services.route_planner import RoutePlannerService
from app.services.venue_details import VenueDetailsService
from app.services.venue_search import VenueSearchService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_api_key(request: Request) -> None:
    """Reject upstream-dependent requests when no Google API key is set."""
    if not request.app.state.settings.google_api_key:
        raise ApiKeyNotConfiguredError("Google Maps")


def get_google_maps(request: Request) -> GoogleMapsService:
    return request.app.state.google_maps


def get_venue_search_service(request: Request) -> VenueSearchService:
    return request.app.state.venue_search_service


def get_venue_details_service(request: Request) -> VenueDetailsService:
    return request.app.state.venue_details_service


def get_route_planner_service(request: Request) -> RoutePlannerService:
    return request.app.state.route_planner_service


SettingsDep = Annotated[Settings, Depends(get_settings)]
GoogleMapsDep = Annotated[GoogleMapsService, Depends(get_google_maps)]
VenueSearchDep = Annotated[VenueSearchService, Depends(get_venue_search_service)]
VenueDetailsDep = Annotated[VenueDetailsService, Depends(get_venue_details_service)]
RoutePlannerDep = Annotated[RoutePlannerService, Depends(get_route_planner_service)]
