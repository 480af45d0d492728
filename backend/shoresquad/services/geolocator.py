from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from shoresquad.domain.errors import GeoError, PositionError
from shoresquad.domain.models import LocationFix, Severity
from shoresquad.providers.location.base import PositionSource

from .notifications import NotificationCenter

logger = logging.getLogger(__name__)

LOCATION_FOUND_MESSAGE = "Location found! ✨"

GEO_ERROR_MESSAGES = {
    GeoError.UNSUPPORTED: "Geolocation not supported in your browser",
    GeoError.PERMISSION_DENIED: "Location permission denied. Using default location.",
    GeoError.POSITION_UNAVAILABLE: "Unable to determine your location. Using default location.",
    GeoError.TIMEOUT: "Location request timed out. Using default location.",
}


@dataclass(frozen=True)
class GeoResult:
    fix: Optional[LocationFix] = None
    error: Optional[GeoError] = None

    @property
    def ok(self) -> bool:
        return self.fix is not None


class GeoLocator:
    def __init__(
        self,
        notifications: NotificationCenter,
        source: Optional[PositionSource] = None,
        *,
        timeout: float = 10.0,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.notifications = notifications
        self.source = source
        self.timeout = timeout
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def acquire(self, source: Optional[PositionSource] = None) -> GeoResult:
        """Request a fresh fix. Never raises; failures come back as ``GeoResult.error``."""
        source = source or self.source
        if source is None:
            return self._fail(GeoError.UNSUPPORTED)
        try:
            lat, lon = await asyncio.wait_for(
                source.current_position(high_accuracy=True, timeout=self.timeout, maximum_age=0),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            return self._fail(GeoError.TIMEOUT)
        except PositionError as exc:
            return self._fail(exc.reason)
        fix = LocationFix(latitude=float(lat), longitude=float(lon), acquired_at=self._clock())
        logger.info("[geo] fix acquired lat=%.5f lon=%.5f", fix.latitude, fix.longitude)
        self.notifications.toast(LOCATION_FOUND_MESSAGE, Severity.SUCCESS)
        return GeoResult(fix=fix)

    def _fail(self, reason: GeoError) -> GeoResult:
        logger.warning("[geo] location unavailable: %s", reason.value)
        severity = Severity.ERROR if reason is GeoError.UNSUPPORTED else Severity.WARNING
        self.notifications.toast(GEO_ERROR_MESSAGES[reason], severity)
        return GeoResult(error=reason)
