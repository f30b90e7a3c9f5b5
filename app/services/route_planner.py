import logging

from app.mappers.geo_input import MAX_WAYPOINTS
from app.mappers.route_mapper import map_route
from app.schemas.responses import DirectionsResponse
from app.schemas.venues import Coordinate
from app.services.google_maps import GoogleMapsService

logger = logging.getLogger(__name__)


class RoutePlannerService:
    def __init__(self, google_maps: GoogleMapsService):
        self._google_maps = google_maps

    async def compute_route(
        self,
        origin: Coordinate,
        destination: Coordinate,
        waypoints: list[Coordinate] | None = None,
    ) -> DirectionsResponse:
        """Driving route through the stops in the given order.

        Only the first upstream route is kept. No route at all is returned as
        an empty `routes` list with the upstream error attached.
        """
        stops = list(waypoints or [])[:MAX_WAYPOINTS]
        data = await self._google_maps.compute_routes(origin, destination, stops)

        if not data.routes:
            logger.info("No route found (%d waypoints): %s", len(stops), data.error)
            return DirectionsResponse(routes=[], error=data.error)

        return DirectionsResponse(routes=[map_route(data.routes[0])])
