from __future__ import annotations

from typing import List, Optional

from shoresquad.domain.errors import NetworkFailure
from shoresquad.domain.models import ForecastDay
from shoresquad.infra.weather.nea_client import NeaForecastClient

from .base import ForecastSource, weather_icon

FORECAST_DAYS = 4


class NeaForecastSource(ForecastSource):
    def __init__(self, client: Optional[NeaForecastClient] = None):
        self.client = client or NeaForecastClient()

    async def fetch_days(self) -> List[ForecastDay]:
        items = await self.client.fetch_items()
        days: List[ForecastDay] = []
        for item in items[:FORECAST_DAYS]:
            try:
                days.append(self._map_item(item))
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                raise NetworkFailure(f"malformed forecast item: {exc!r}") from exc
        return days

    def _map_item(self, item: dict) -> ForecastDay:
        start = self.client.parse_time(item["valid_period"]["start"])
        condition = item["forecast"]
        return ForecastDay(
            date=start.date(),
            label=start.strftime("%a"),
            condition=condition,
            temp_low=float(item["temperature"]["low"]),
            temp_high=float(item["temperature"]["high"]),
            humidity_low=float(item["relative_humidity"]["low"]),
            humidity_high=float(item["relative_humidity"]["high"]),
            icon=weather_icon(condition),
        )
