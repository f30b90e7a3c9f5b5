import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.exceptions.custom import GoogleMapsError, RateLimitError
from app.schemas.google_maps import ComputeRoutesResponse, RawPlace, TextSearchResponse
from app.schemas.venues import Coordinate, SearchQuery

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
SEARCH_URL = "https://places.googleapis.com/v1/places:searchText"
DETAILS_URL = "https://places.googleapis.com/v1/places"
ROUTES_URL = "https://routes.googleapis.com/directions/v2:computeRoutes"

MAX_SEARCH_RESULTS = 20

_PLACE_FIELDS = (
    "id",
    "displayName",
    "formattedAddress",
    "location",
    "rating",
    "userRatingCount",
    "priceLevel",
    "currentOpeningHours",
    "types",
    "primaryType",
    "internationalPhoneNumber",
    "websiteUri",
    "googleMapsUri",
)

SEARCH_FIELD_MASK = ",".join(f"places.{f}" for f in _PLACE_FIELDS)
DETAILS_FIELD_MASK = ",".join(_PLACE_FIELDS)

ROUTES_FIELD_MASK = (
    "routes.duration,"
    "routes.distanceMeters,"
    "routes.polyline.encodedPolyline,"
    "routes.legs.duration,"
    "routes.legs.distanceMeters"
)


def _waypoint(coord: Coordinate) -> dict:
    return {
        "location": {
            "latLng": {"latitude": coord.latitude, "longitude": coord.longitude}
        }
    }


def build_routes_payload(
    origin: Coordinate,
    destination: Coordinate,
    waypoints: list[Coordinate],
) -> dict:
    payload: dict[str, Any] = {
        "origin": _waypoint(origin),
        "destination": _waypoint(destination),
        "travelMode": "DRIVE",
    }
    if waypoints:
        payload["intermediates"] = [_waypoint(wp) for wp in waypoints]
    return payload


def build_search_payload(query: SearchQuery) -> dict:
    return {
        "textQuery": query.keyword,
        "maxResultCount": MAX_SEARCH_RESULTS,
        "locationBias": {
            "circle": {
                "center": {
                    "latitude": query.coordinate.latitude,
                    "longitude": query.coordinate.longitude,
                },
                "radius": query.radius_meters,
            }
        },
    }


class GoogleMapsService:
    """Thin client over the Geocoding, Places (New) and Routes APIs.

    Every method makes exactly one upstream call. A non-2xx status, a
    transport failure or an unreadable body raises GoogleMapsError (429
    raises RateLimitError); domain-level errors reported inside a 2xx body
    are returned to the caller untouched.
    """

    def __init__(self, client: httpx.AsyncClient, api_key: str):
        self._client = client
        self._api_key = api_key

    def _headers(self, field_mask: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self._api_key,
            "X-Goog-FieldMask": field_mask,
        }

    async def _send(self, api: str, method: str, url: str, **kwargs) -> Any:
        try:
            resp = await self._client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise GoogleMapsError(f"request failed: {exc!r}", api=api) from exc

        if resp.status_code == 429:
            raise RateLimitError(api)
        if resp.status_code >= 400:
            raise GoogleMapsError(resp.text, status_code=resp.status_code, api=api)

        try:
            return resp.json()
        except ValueError as exc:
            raise GoogleMapsError(
                "invalid JSON in response", status_code=resp.status_code, api=api
            ) from exc

    async def geocode(self, address: str) -> dict:
        data = await self._send(
            "Geocoding",
            "GET",
            GEOCODE_URL,
            params={"address": address, "key": self._api_key},
        )
        if not isinstance(data, dict):
            raise GoogleMapsError("unexpected geocode response", api="Geocoding")
        logger.info("Geocoded %r: status=%s", address, data.get("status"))
        return data

    async def search_text(self, query: SearchQuery) -> TextSearchResponse:
        data = await self._send(
            "Google Places",
            "POST",
            SEARCH_URL,
            json=build_search_payload(query),
            headers=self._headers(SEARCH_FIELD_MASK),
        )
        try:
            return TextSearchResponse.model_validate(data)
        except ValidationError as exc:
            raise GoogleMapsError(f"unexpected search response: {exc}", api="Google Places") from exc

    async def get_place(self, place_id: str) -> RawPlace:
        data = await self._send(
            "Google Places",
            "GET",
            f"{DETAILS_URL}/{quote(place_id, safe='')}",
            headers=self._headers(DETAILS_FIELD_MASK),
        )
        if isinstance(data, dict) and data.get("error"):
            error = data["error"]
            raise GoogleMapsError(
                str(error.get("message", error)) if isinstance(error, dict) else str(error),
                status_code=error.get("code") if isinstance(error, dict) else None,
                api="Google Places",
            )
        try:
            return RawPlace.model_validate(data)
        except ValidationError as exc:
            raise GoogleMapsError(f"unexpected place payload: {exc}", api="Google Places") from exc

    async def compute_routes(
        self,
        origin: Coordinate,
        destination: Coordinate,
        waypoints: list[Coordinate],
    ) -> ComputeRoutesResponse:
        data = await self._send(
            "Google Routes",
            "POST",
            ROUTES_URL,
            json=build_routes_payload(origin, destination, waypoints),
            headers=self._headers(ROUTES_FIELD_MASK),
        )
        try:
            return ComputeRoutesResponse.model_validate(data)
        except ValidationError as exc:
            raise GoogleMapsError(f"unexpected routes response: {exc}", api="Google Routes") from exc
