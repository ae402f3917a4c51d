import asyncio
import logging

import httpx
from pydantic import ValidationError

from .config import PM25_API_URL, REQUEST_TIMEOUT
from .errors import DataError, NetworkError
from .models import PM25Envelope, PMReading

logger = logging.getLogger(__name__)


def build_params(lat: float, lng: float) -> dict:
    # Fixed precision keeps equivalent coordinates on the same server cache key
    return {"lat": f"{lat:.6f}", "lng": f"{lng:.6f}"}


async def _get(
    client: httpx.AsyncClient | None, base_url: str, params: dict, timeout: float
) -> httpx.Response:
    if client is None:
        async with httpx.AsyncClient() as owned_client:
            return await owned_client.get(base_url, params=params, timeout=timeout)
    return await client.get(base_url, params=params, timeout=timeout)


async def fetch_reading(
    lat: float,
    lng: float,
    base_url: str = PM25_API_URL,
    timeout: float = REQUEST_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> PMReading:
    """GET the PM2.5 reading for a coordinate.

    Raises NetworkError for transport failures and any non-200 status, and
    DataError when the body is not the expected ``{"data": {"pm25": [...]}}``
    envelope.
    """
    params = build_params(lat, lng)
    logger.info("Fetching PM2.5: url=%s lat=%s lng=%s", base_url, params["lat"], params["lng"])

    try:
        # httpx timeouts apply per phase; wait_for bounds the whole exchange
        response = await asyncio.wait_for(
            _get(client, base_url, params, timeout), timeout
        )
    except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
        logger.error("PM2.5 request timed out after %.1fs: %s", timeout, exc)
        raise NetworkError("timeout", "request timed out") from exc
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
        logger.error("Invalid PM2.5 API URL %r: %s", base_url, exc)
        raise NetworkError("bad_url", "invalid server URL") from exc
    except httpx.RequestError as exc:
        logger.error("PM2.5 API unreachable: %s", exc)
        raise NetworkError("unreachable", "server is unreachable") from exc

    if response.status_code != 200:
        logger.error("PM2.5 API HTTP error %s", response.status_code)
        raise NetworkError("bad_status", "server returned an error")

    try:
        envelope = PM25Envelope.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        # Field-level details stay in the log
        logger.error("Malformed PM2.5 response: %s", exc)
        raise DataError("invalid_data", "unable to parse response data") from exc

    logger.info("PM2.5 samples received: %r", envelope.data.pm25[:3])
    return envelope.data
