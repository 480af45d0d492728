from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

from shoresquad.domain.models import ORGANIZING_LOCATION, LocationFix

EMBED_BASE_URL = "https://www.google.com/maps"
DEFAULT_ZOOM = 15
USER_ZOOM = 13


@dataclass
class MapWidget:
    """State of the embedded third-party map. We only ever move its centre."""

    lat: float = ORGANIZING_LOCATION[0]
    lon: float = ORGANIZING_LOCATION[1]
    zoom: int = DEFAULT_ZOOM
    centered_on_user: bool = False

    def center_on(self, fix: Optional[LocationFix]) -> None:
        if fix is None:
            return
        self.lat = fix.latitude
        self.lon = fix.longitude
        self.zoom = USER_ZOOM
        self.centered_on_user = True

    @property
    def embed_url(self) -> str:
        query = urlencode({"q": f"{self.lat},{self.lon}", "z": self.zoom, "output": "embed"})
        return f"{EMBED_BASE_URL}?{query}"

    def to_dict(self) -> dict:
        return {
            "lat": self.lat,
            "lon": self.lon,
            "zoom": self.zoom,
            "centered_on_user": self.centered_on_user,
            "embed_url": self.embed_url,
        }
