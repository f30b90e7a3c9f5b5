from app.schemas.google_maps import RawPlace
from app.schemas.venues import Geometry, GeometryLocation, Venue, VenueOpeningHours

DEFAULT_PRICE_LEVEL = 3

_PRICE_LEVELS = {
    "PRICE_LEVEL_FREE": 0,
    "PRICE_LEVEL_INEXPENSIVE": 1,
    "PRICE_LEVEL_MODERATE": 2,
    "PRICE_LEVEL_EXPENSIVE": 3,
    "PRICE_LEVEL_VERY_EXPENSIVE": 4,
}


def parse_price_level(token: str | int | None) -> int:
    """Map a Places price tier ("PRICE_LEVEL_MODERATE", "2", 2, ...) to 0-4.

    Missing, unspecified or unrecognized tiers fall back to 3.
    """
    if isinstance(token, int):
        return token if 0 <= token <= 4 else DEFAULT_PRICE_LEVEL
    if not token:
        return DEFAULT_PRICE_LEVEL
    token = token.strip().upper()
    if token in _PRICE_LEVELS:
        return _PRICE_LEVELS[token]
    suffix = token.removeprefix("PRICE_LEVEL_")
    if suffix.isdigit() and 0 <= int(suffix) <= 4:
        return int(suffix)
    return DEFAULT_PRICE_LEVEL


def _geometry(place: RawPlace) -> Geometry | None:
    loc = place.location
    if loc is None or loc.latitude is None or loc.longitude is None:
        return None
    return Geometry(location=GeometryLocation(lat=loc.latitude, lng=loc.longitude))


def normalize_place(place: RawPlace) -> Venue:
    name = place.displayName.text if place.displayName else None
    open_now = place.currentOpeningHours.openNow if place.currentOpeningHours else None

    return Venue(
        place_id=place.id,
        name=name or "Unknown",
        geometry=_geometry(place),
        rating=max(place.rating or 0.0, 0.0),
        user_ratings_total=max(place.userRatingCount or 0, 0),
        price_level=parse_price_level(place.priceLevel),
        vicinity=place.formattedAddress or "",
        types=list(place.types or []),
        opening_hours=VenueOpeningHours(open_now=open_now),
        phone=place.internationalPhoneNumber or None,
        website=place.websiteUri or None,
        maps_url=place.googleMapsUri or None,
    )
