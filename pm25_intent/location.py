"""
Coordinate provider for the PM2.5 action.

The platform positioning service is consumed through the narrow
``LocationService`` capability. ``CoordinateProvider`` turns it into a single
awaitable request: it checks or requests authorization, starts a location
request and polls for the fix a bounded number of times before giving up.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from enum import Enum

from .config import LOCATION_ATTEMPTS, LOCATION_INTERVAL
from .errors import LocationFailure
from .models import Coordinate

logger = logging.getLogger(__name__)


class AuthorizationStatus(str, Enum):
    not_determined = "not_determined"
    authorized = "authorized"
    denied = "denied"
    restricted = "restricted"


class LocationService(ABC):
    """Capability interface over a platform positioning service."""

    @abstractmethod
    def authorization_status(self) -> AuthorizationStatus: ...

    @abstractmethod
    async def request_authorization(self) -> AuthorizationStatus:
        """Ask the user for permission. May show an OS prompt."""

    @abstractmethod
    def request_location(self) -> None:
        """Start (or reuse) a location request; the fix arrives later."""

    @abstractmethod
    def latest_fix(self) -> Coordinate | None: ...

    def stop_updating(self) -> None:
        pass


class StaticLocationService(LocationService):
    """A location service backed by a known coordinate.

    Used when the caller already holds a fix (the device sends it with the
    request) or a default coordinate is configured. Without a coordinate it
    behaves like a denied permission.
    """

    def __init__(self, coordinate: Coordinate | None):
        self._coordinate = coordinate
        self._requested = False

    def authorization_status(self) -> AuthorizationStatus:
        if self._coordinate is None:
            return AuthorizationStatus.denied
        return AuthorizationStatus.authorized

    async def request_authorization(self) -> AuthorizationStatus:
        return self.authorization_status()

    def request_location(self) -> None:
        self._requested = True

    def latest_fix(self) -> Coordinate | None:
        return self._coordinate if self._requested else None


class CoordinateProvider:
    def __init__(
        self,
        service: LocationService,
        attempts: int = LOCATION_ATTEMPTS,
        interval: float = LOCATION_INTERVAL,
    ):
        self.service = service
        self.attempts = attempts
        self.interval = interval

    async def get_coordinate(self) -> Coordinate:
        status = self.service.authorization_status()
        if status == AuthorizationStatus.not_determined:
            logger.info("Location permission not determined; requesting it.")
            status = await self.service.request_authorization()

        if status != AuthorizationStatus.authorized:
            logger.warning("Location permission unavailable: %s", status.value)
            raise LocationFailure("permission_denied", f"authorization {status.value}")

        self.service.request_location()
        try:
            for attempt in range(self.attempts):
                fix = self.service.latest_fix()
                if fix is not None:
                    logger.info(
                        "Location fix after %d attempt(s): %.6f, %.6f",
                        attempt + 1,
                        fix.latitude,
                        fix.longitude,
                    )
                    return fix
                if attempt < self.attempts - 1:
                    await asyncio.sleep(self.interval)
        finally:
            self.service.stop_updating()

        logger.warning(
            "No location fix after %d attempts (%.1fs apart)", self.attempts, self.interval
        )
        raise LocationFailure("no_fix", "no location fix within the wait bound")
