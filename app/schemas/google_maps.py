import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)


class RawModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class LatLng(RawModel):
    latitude: float | None = None
    longitude: float | None = None


class DisplayName(RawModel):
    text: str | None = None


class OpeningHours(RawModel):
    openNow: bool | None = None


class RawPlace(RawModel):
    id: str | None = None
    displayName: DisplayName | None = None
    formattedAddress: str | None = None
    location: LatLng | None = None
    rating: float | None = None
    userRatingCount: int | None = None
    priceLevel: str | int | None = None
    currentOpeningHours: OpeningHours | None = None
    types: list[str] | None = None
    primaryType: str | None = None
    internationalPhoneNumber: str | None = None
    websiteUri: str | None = None
    googleMapsUri: str | None = None

    @field_validator("types", mode="before")
    @classmethod
    def _string_types_only(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [t for t in value if isinstance(t, str)]
        return value


class TextSearchResponse(RawModel):
    places: list[RawPlace] | None = None
    error: dict[str, Any] | None = None

    @field_validator("places", mode="before")
    @classmethod
    def _drop_malformed_places(cls, value: Any) -> Any:
        """Validate candidates one by one so a single bad record is skipped."""
        if not isinstance(value, list):
            return value
        places = []
        for index, item in enumerate(value):
            try:
                places.append(RawPlace.model_validate(item))
            except ValidationError as exc:
                logger.warning("Skipping malformed place #%d: %s", index, exc)
        return places


class EncodedPolyline(RawModel):
    encodedPolyline: str | None = None


class RawRouteLeg(RawModel):
    duration: str | None = None
    distanceMeters: int | None = None


class RawRoute(RawModel):
    legs: list[RawRouteLeg] = []
    duration: str | None = None
    distanceMeters: int | None = None
    polyline: EncodedPolyline | None = None


class ComputeRoutesResponse(RawModel):
    routes: list[RawRoute] = []
    error: dict[str, Any] | None = None
