import asyncio
import logging

from pydantic import BaseModel

from app.exceptions.custom import GoogleMapsError, RateLimitError
from app.mappers.venue_mapper import normalize_place
from app.schemas.venues import Venue
from app.services.google_maps import GoogleMapsService

logger = logging.getLogger(__name__)

MAX_DETAIL_IDS = 10


def sanitize_place_ids(raw: str | None, limit: int = MAX_DETAIL_IDS) -> list[str]:
    """Split a comma-separated id list, dropping blanks, keeping the first `limit`."""
    if not raw:
        return []
    ids = [part.strip() for part in raw.split(",")]
    return [pid for pid in ids if pid][:limit]


class PlaceLookup(BaseModel):
    place_id: str
    venue: Venue | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.venue is not None


class VenueDetailsService:
    def __init__(self, google_maps: GoogleMapsService):
        self._google_maps = google_maps

    async def _lookup(self, place_id: str) -> PlaceLookup:
        try:
            place = await self._google_maps.get_place(place_id)
        except (GoogleMapsError, RateLimitError) as exc:
            return PlaceLookup(place_id=place_id, error=str(exc))
        return PlaceLookup(place_id=place_id, venue=normalize_place(place))

    async def lookup_all(self, place_ids: list[str]) -> list[PlaceLookup]:
        """Look up every id concurrently. One tagged result per id, in input order."""
        return list(await asyncio.gather(*(self._lookup(pid) for pid in place_ids)))

    async def fetch_details(self, place_ids: list[str]) -> list[Venue]:
        lookups = await self.lookup_all(place_ids[:MAX_DETAIL_IDS])

        venues: list[Venue] = []
        for lookup in lookups:
            if lookup.ok:
                venues.append(lookup.venue)
            else:
                logger.warning("Dropping place %s: %s", lookup.place_id, lookup.error)
        return venues
