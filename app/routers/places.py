from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import VenueDetailsDep, VenueSearchDep, require_api_key
from app.mappers.geo_input import parse_finite_float, parse_positive_float
from app.schemas.responses import NearbySearchResponse, VenueDetailsResponse
from app.schemas.venues import DEFAULT_KEYWORD, DEFAULT_RADIUS_METERS, Coordinate, SearchQuery
from app.services.venue_details import sanitize_place_ids

router = APIRouter(prefix="/api/places", dependencies=[Depends(require_api_key)])


@router.get("/nearby", response_model=NearbySearchResponse)
async def nearby_venues(
    service: VenueSearchDep,
    lat: str | None = None,
    lng: str | None = None,
    radius: str | None = None,
    keyword: str | None = None,
) -> NearbySearchResponse:
    latitude = parse_finite_float(lat)
    longitude = parse_finite_float(lng)
    if latitude is None or longitude is None:
        raise HTTPException(status_code=400, detail="lat and lng must be finite numbers")

    query = SearchQuery(
        coordinate=Coordinate(latitude=latitude, longitude=longitude),
        radius_meters=parse_positive_float(radius, DEFAULT_RADIUS_METERS),
        keyword=(keyword or "").strip() or DEFAULT_KEYWORD,
    )
    return await service.search(query)


@router.get("/details", response_model=VenueDetailsResponse)
async def venue_details(
    service: VenueDetailsDep,
    ids: str | None = None,
) -> VenueDetailsResponse:
    place_ids = sanitize_place_ids(ids)
    if not place_ids:
        raise HTTPException(status_code=400, detail="Missing ids parameter")

    venues = await service.fetch_details(place_ids)
    return VenueDetailsResponse(results=venues)
