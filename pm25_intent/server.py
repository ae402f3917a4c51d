import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .classifier import get_profile
from .config import (
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    LOCATION_ATTEMPTS,
    LOCATION_INTERVAL,
    PM25_API_URL,
    PM25_LOCALE,
    PM25_PORT,
    PM25_PROFILE,
    REQUEST_TIMEOUT,
)
from .intent import run
from .locales import INTENTS, get_text
from .location import CoordinateProvider, StaticLocationService
from .models import (
    Coordinate,
    HealthResponse,
    IntentDescriptor,
    IntentResponse,
    PerformRequest,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _default_coordinate() -> Coordinate | None:
    if DEFAULT_LATITUDE is None or DEFAULT_LONGITUDE is None:
        return None
    return Coordinate(latitude=DEFAULT_LATITUDE, longitude=DEFAULT_LONGITUDE)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail at startup, not on the first invocation
    get_profile(PM25_PROFILE)
    get_text(PM25_LOCALE)
    if _default_coordinate() is None:
        logger.warning(
            "PM25_DEFAULT_LATITUDE/PM25_DEFAULT_LONGITUDE are not set. "
            "Intents invoked without a coordinate will report a location failure."
        )
    yield


app = FastAPI(
    title="PM2.5 Intent Server",
    description="Shortcut actions reporting the current PM2.5 level.",
    version="1.0.0",
    lifespan=lifespan,
)


# ── Custom exception handlers ────────────────────────────────────────────────

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return 400 (not FastAPI's default 422) for invalid request bodies."""
    return JSONResponse(status_code=400, content={"error": "Invalid request parameters."})


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Normalise all HTTP errors to {"error": "..."} instead of {"detail": ...}."""
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        content = exc.detail
    else:
        content = {"error": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content)


# ── Endpoints ────────────────────────────────────────────────────────────────

@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", api_url=PM25_API_URL, profile=PM25_PROFILE)


@app.get("/intents", response_model=list[IntentDescriptor])
async def list_intents() -> list[IntentDescriptor]:
    return [
        IntentDescriptor(id=intent_id, title=get_text(locale).title, locale=locale.value)
        for intent_id, locale in INTENTS.items()
    ]


@app.post("/intents/{intent_id}/perform", response_model=IntentResponse)
async def perform(intent_id: str, body: PerformRequest | None = None) -> IntentResponse:
    locale = INTENTS.get(intent_id)
    if locale is None:
        raise HTTPException(status_code=404, detail={"error": f"Unknown intent '{intent_id}'."})

    coordinate = body.coordinate() if body is not None else None
    if coordinate is None:
        coordinate = _default_coordinate()
    logger.info(
        "Incoming intent: id=%s locale=%s device_fix=%s",
        intent_id,
        locale.value,
        body is not None and body.latitude is not None,
    )

    provider = CoordinateProvider(
        StaticLocationService(coordinate),
        attempts=LOCATION_ATTEMPTS,
        interval=LOCATION_INTERVAL,
    )
    dialog = await run(
        locale,
        provider=provider,
        profile=get_profile(PM25_PROFILE),
        base_url=PM25_API_URL,
        timeout=REQUEST_TIMEOUT,
    )
    return IntentResponse(intent=intent_id, dialog=dialog)


def main() -> None:
    uvicorn.run(
        "pm25_intent.server:app",
        host="0.0.0.0",
        port=PM25_PORT,
        reload=False,
    )


if __name__ == "__main__":
    main()
