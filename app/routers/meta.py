from fastapi import APIRouter

from app.dependencies import SettingsDep
from app.schemas.responses import HealthResponse

router = APIRouter()


@router.get("/api/health", response_model=HealthResponse)
async def health(settings: SettingsDep) -> HealthResponse:
    key = settings.google_api_key
    return HealthResponse(
        status="ok",
        has_api_key=bool(key),
        key_preview=f"{key[:8]}..." if key else "NOT SET",
    )


@router.get("/manifest.json")
async def manifest(settings: SettingsDep) -> dict:
    return {
        "name": settings.app_name,
        "short_name": settings.app_name,
        "description": "Bar crawl planner for any city",
        "start_url": "/",
        "display": "standalone",
        "background_color": "#0a0a0f",
        "theme_color": "#0a0a0f",
        "icons": [{"src": "/icon-192.svg", "sizes": "192x192", "type": "image/svg+xml"}],
    }
