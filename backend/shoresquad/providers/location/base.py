from __future__ import annotations

from typing import Optional, Protocol, Tuple

from shoresquad.domain.errors import GeoError, PositionError


class PositionSource(Protocol):
    """Contract for the platform's location capability."""

    async def current_position(
        self,
        *,
        high_accuracy: bool = True,
        timeout: float = 10.0,
        maximum_age: float = 0,
    ) -> Tuple[float, float]:
        """Return ``(latitude, longitude)`` or raise ``PositionError``."""
        raise NotImplementedError


class StaticPositionSource(PositionSource):
    """Position pinned by configuration, for hosts without a GPS."""

    def __init__(self, lat: float, lon: float):
        if not -90 <= lat <= 90 or not -180 <= lon <= 180:
            raise ValueError(f"invalid coordinates ({lat}, {lon})")
        self.lat = lat
        self.lon = lon

    async def current_position(self, *, high_accuracy=True, timeout=10.0, maximum_age=0):
        return self.lat, self.lon


class ReportedPosition(PositionSource):
    """A single reading pushed to us by a client (e.g. a browser)."""

    def __init__(
        self,
        lat: Optional[float] = None,
        lon: Optional[float] = None,
        error: Optional[GeoError] = None,
    ):
        if error is None and (lat is None or lon is None):
            raise ValueError("either coordinates or an error code is required")
        self.lat = lat
        self.lon = lon
        self.error = error

    async def current_position(self, *, high_accuracy=True, timeout=10.0, maximum_age=0):
        if self.error is not None:
            raise PositionError(self.error)
        return self.lat, self.lon
