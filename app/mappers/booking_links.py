from urllib.parse import quote

from app.schemas.responses import BookingLinksResponse

GOOGLE_SEARCH_URL = "https://www.google.com/search?q={query}"
SEVENROOMS_SEARCH_URL = "https://www.sevenrooms.com/explore/search/{name}"

# Marks browsers leave unescaped in URI components
_URI_SAFE = "!~*'()"


def build_booking_links(name: str, location: str | None = None) -> BookingLinksResponse:
    """Reservation shortcuts for a venue. Pure templating, no lookups."""
    name = name.strip()
    location = (location or "").strip()
    search_query = f"{name} {location}" if location else name

    return BookingLinksResponse(
        venue=name,
        googleSearchUrl=GOOGLE_SEARCH_URL.format(
            query=quote(f"{search_query} reservations", safe=_URI_SAFE)
        ),
        sevenroomsUrl=SEVENROOMS_SEARCH_URL.format(name=quote(name, safe=_URI_SAFE)),
        whatsappMsg=f"Hi, I'd like to make a reservation at {name}. Do you have availability?",
    )
