from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import RoutePlannerDep, require_api_key
from app.mappers.geo_input import parse_coordinate, parse_coordinate_list
from app.schemas.responses import DirectionsResponse

router = APIRouter(prefix="/api", dependencies=[Depends(require_api_key)])


@router.get("/directions", response_model=DirectionsResponse)
async def directions(
    service: RoutePlannerDep,
    origin: str | None = None,
    destination: str | None = None,
    waypoints: str | None = None,
) -> DirectionsResponse:
    start = parse_coordinate(origin)
    end = parse_coordinate(destination)
    if start is None or end is None:
        raise HTTPException(
            status_code=400,
            detail="origin and destination must be 'lat,lng' pairs",
        )

    return await service.compute_route(start, end, parse_coordinate_list(waypoints))
