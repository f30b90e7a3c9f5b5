from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from app.schemas.venues import Route, Venue


class SearchStatus(StrEnum):
    ok = "OK"
    zero_results = "ZERO_RESULTS"
    error = "ERROR"


class NearbySearchResponse(BaseModel):
    results: list[Venue] = []
    status: SearchStatus
    error: dict[str, Any] | None = None


class VenueDetailsResponse(BaseModel):
    results: list[Venue] = []
    status: SearchStatus = SearchStatus.ok


class DirectionsResponse(BaseModel):
    routes: list[Route] = []
    error: dict[str, Any] | None = None  # set only when upstream returned no route


class BookingLinksResponse(BaseModel):
    venue: str
    googleSearchUrl: str
    sevenroomsUrl: str
    whatsappMsg: str


class HealthResponse(BaseModel):
    status: str
    has_api_key: bool
    key_preview: str
