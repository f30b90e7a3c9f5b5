import logging

from app.mappers.nightlife import is_nightlife_venue
from app.mappers.venue_mapper import normalize_place
from app.schemas.responses import NearbySearchResponse, SearchStatus
from app.schemas.venues import SearchQuery
from app.services.google_maps import MAX_SEARCH_RESULTS, GoogleMapsService

logger = logging.getLogger(__name__)


class VenueSearchService:
    def __init__(self, google_maps: GoogleMapsService):
        self._google_maps = google_maps

    async def search(self, query: SearchQuery) -> NearbySearchResponse:
        """Text search biased to the query coordinate, filtered to bar-like places.

        Upstream relevance order is kept. Transport/status failures propagate
        as GoogleMapsError; a 2xx body without a place list becomes
        ZERO_RESULTS, or ERROR when the body carries an error object.
        """
        data = await self._google_maps.search_text(query)

        if data.places is None:
            if data.error:
                logger.warning("Places search returned an error: %s", data.error)
                return NearbySearchResponse(status=SearchStatus.error, error=data.error)
            logger.info("No places for %r near %s", query.keyword, query.coordinate)
            return NearbySearchResponse(status=SearchStatus.zero_results)

        venues = [
            normalize_place(place)
            for place in data.places
            if is_nightlife_venue(place)
        ][:MAX_SEARCH_RESULTS]

        logger.info(
            "Search %r: %d candidates, %d nightlife venues",
            query.keyword, len(data.places), len(venues),
        )
        return NearbySearchResponse(results=venues, status=SearchStatus.ok)
