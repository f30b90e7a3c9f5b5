from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import GoogleMapsDep, require_api_key

router = APIRouter(prefix="/api", dependencies=[Depends(require_api_key)])


@router.get("/geocode")
async def geocode(google_maps: GoogleMapsDep, address: str | None = None) -> dict:
    if not address or not address.strip():
        raise HTTPException(status_code=400, detail="Missing address parameter")
    return await google_maps.geocode(address.strip())
