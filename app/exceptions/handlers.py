import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import ApiKeyNotConfiguredError, GoogleMapsError, RateLimitError

logger = logging.getLogger(__name__)


async def google_maps_error_handler(_request: Request, exc: GoogleMapsError) -> JSONResponse:
    logger.error("%s error: %s (status=%s)", exc.api, exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"{exc.api} error: {exc.message}"},
    )


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )


async def api_key_not_configured_handler(
    _request: Request, exc: ApiKeyNotConfiguredError
) -> JSONResponse:
    logger.warning("Rejected request: %s", exc)
    return JSONResponse(
        status_code=503,
        content={"detail": str(exc)},
    )
