from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Callable, List, Optional

from shoresquad.domain.errors import NetworkFailure
from shoresquad.domain.models import ForecastDay, Severity
from shoresquad.providers.weather.base import ForecastSource
from shoresquad.providers.weather.demo import demo_forecast
from shoresquad.providers.weather.nea import NeaForecastSource

from .notifications import NotificationCenter

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Using demo weather data"


class WeatherProvider:
    """Fetch the 4-day forecast, substituting demo data on any failure.

    ``fetch_forecast`` never raises; callers always get a renderable sequence.
    ``last_was_fallback`` tells whether the latest result came from demo data.
    """

    def __init__(
        self,
        notifications: NotificationCenter,
        source: Optional[ForecastSource] = None,
        *,
        timeout: float = 10.0,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.notifications = notifications
        self.source = source or NeaForecastSource()
        self.timeout = timeout
        self._today = today or date.today
        self.last_was_fallback = False

    async def fetch_forecast(self) -> List[ForecastDay]:
        try:
            days = await asyncio.wait_for(self.source.fetch_days(), timeout=self.timeout)
            if not days:
                raise NetworkFailure("forecast source returned no days")
        except asyncio.TimeoutError:
            logger.warning("[weather] no response within %.1fs; using fallback", self.timeout)
            return self._fallback()
        except NetworkFailure as exc:
            logger.warning("[weather] %s; using fallback", exc)
            return self._fallback()
        except Exception:
            logger.exception("[weather] unexpected error; using fallback")
            return self._fallback()
        self.last_was_fallback = False
        return days

    def _fallback(self) -> List[ForecastDay]:
        self.last_was_fallback = True
        self.notifications.toast(FALLBACK_MESSAGE, Severity.WARNING)
        return demo_forecast(self._today())
