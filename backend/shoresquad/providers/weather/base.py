from __future__ import annotations

from typing import List, Protocol, Tuple

from shoresquad.domain.models import ForecastDay

DEFAULT_ICON = "🌤️"

# Checked in order, first keyword hit wins.
ICON_TABLE: List[Tuple[Tuple[str, ...], str]] = [
    (("rain",), "🌧️"),
    (("thunderstorm",), "⛈️"),
    (("cloudy", "overcast"), "☁️"),
    (("partly", "fair"), "⛅"),
    (("clear", "sunny"), "☀️"),
    (("windy",), "💨"),
    (("haze",), "😶"),
]


def weather_icon(forecast: str) -> str:
    text = (forecast or "").lower()
    for keywords, icon in ICON_TABLE:
        if any(keyword in text for keyword in keywords):
            return icon
    return DEFAULT_ICON


class ForecastSource(Protocol):
    """Contract for live forecast sources."""

    async def fetch_days(self) -> List[ForecastDay]:
        """Return the soonest-first forecast, raising ``NetworkFailure`` when unusable."""
        raise NotImplementedError
