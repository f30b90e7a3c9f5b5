import math

from pydantic import BaseModel, ConfigDict, field_validator


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    @field_validator("latitude", "longitude")
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("coordinate components must be finite")
        return value


class GeometryLocation(BaseModel):
    lat: float
    lng: float


class Geometry(BaseModel):
    location: GeometryLocation


class VenueOpeningHours(BaseModel):
    open_now: bool | None = None


class Venue(BaseModel):
    """Nightlife venue as returned to the client."""

    model_config = ConfigDict(frozen=True)

    place_id: str | None = None
    name: str = "Unknown"
    geometry: Geometry | None = None
    rating: float = 0.0
    user_ratings_total: int = 0
    price_level: int = 3
    vicinity: str = ""
    types: list[str] = []
    opening_hours: VenueOpeningHours = VenueOpeningHours()
    phone: str | None = None
    website: str | None = None
    maps_url: str | None = None


class TextValue(BaseModel):
    value: int
    text: str


class RouteLeg(BaseModel):
    duration: TextValue
    distance: TextValue


class OverviewPolyline(BaseModel):
    points: str = ""


class Route(BaseModel):
    legs: list[RouteLeg] = []
    overview_polyline: OverviewPolyline = OverviewPolyline()


DEFAULT_RADIUS_METERS = 5000.0
DEFAULT_KEYWORD = "bar lounge nightclub"


class SearchQuery(BaseModel):
    coordinate: Coordinate
    radius_meters: float = DEFAULT_RADIUS_METERS
    keyword: str = DEFAULT_KEYWORD
