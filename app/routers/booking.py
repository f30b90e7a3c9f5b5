from fastapi import APIRouter, HTTPException

from app.mappers.booking_links import build_booking_links
from app.schemas.responses import BookingLinksResponse

router = APIRouter(prefix="/api/booking")


@router.get("/search", response_model=BookingLinksResponse)
async def booking_search(
    name: str | None = None,
    location: str | None = None,
) -> BookingLinksResponse:
    if not name or not name.strip():
        raise HTTPException(status_code=400, detail="Venue name is required")
    return build_booking_links(name, location)
