from __future__ import annotations

import asyncio
from datetime import date

import httpx

from shoresquad.domain.errors import NetworkFailure
from shoresquad.domain.models import ForecastDay, Severity
from shoresquad.infra.weather.nea_client import NeaForecastClient
from shoresquad.providers.weather.demo import demo_forecast
from shoresquad.providers.weather.nea import NeaForecastSource
from shoresquad.services.notifications import NotificationCenter
from shoresquad.services.weather import FALLBACK_MESSAGE, WeatherProvider

TODAY = date(2026, 3, 10)


class _StaticForecastSource:
    def __init__(self, days=None, fail: bool = False):
        self.days = days or []
        self.fail = fail
        self.calls = 0

    async def fetch_days(self):
        self.calls += 1
        if self.fail:
            raise NetworkFailure("upstream unavailable")
        return list(self.days)


class _HangingForecastSource:
    def __init__(self):
        self.cancelled = False

    async def fetch_days(self):
        try:
            await asyncio.sleep(3600)
        except asyncio.CancelledError:
            self.cancelled = True
            raise


def _provider(source, timeout=10.0):
    notifications = NotificationCenter()
    return WeatherProvider(notifications, source, timeout=timeout, today=lambda: TODAY), notifications


def _live_day() -> ForecastDay:
    return ForecastDay(
        date=TODAY,
        label="Tue",
        condition="Thundery Showers",
        temp_low=24,
        temp_high=31,
        humidity_low=60,
        humidity_high=95,
        icon="🌤️",
    )


def test_demo_forecast_is_deterministic():
    days = demo_forecast(TODAY)
    assert [day.label for day in days] == ["Today", "Tomorrow", "Day 3", "Day 4"]
    assert [day.condition for day in days] == ["Partly Cloudy", "Light Rain", "Cloudy", "Sunny"]
    assert [(day.temp_low, day.temp_high) for day in days] == [(24, 32), (23, 31), (22, 30), (25, 33)]
    assert [day.icon for day in days] == ["⛅", "🌧️", "☁️", "☀️"]
    assert days[3].date == date(2026, 3, 13)
    assert demo_forecast(TODAY) == days


def test_live_forecast_passes_through():
    provider, notifications = _provider(_StaticForecastSource([_live_day()]))
    days = asyncio.run(provider.fetch_forecast())
    assert days == [_live_day()]
    assert provider.last_was_fallback is False
    assert notifications.emitted() == []


def test_timeout_cancels_and_falls_back_once():
    source = _HangingForecastSource()
    provider, notifications = _provider(source, timeout=0.05)

    days = asyncio.run(provider.fetch_forecast())

    assert days == demo_forecast(TODAY)
    assert source.cancelled is True
    assert provider.last_was_fallback is True
    warnings = notifications.emitted(severity=Severity.WARNING)
    assert [note.message for note in warnings] == [FALLBACK_MESSAGE]


def test_network_failure_falls_back():
    provider, notifications = _provider(_StaticForecastSource(fail=True))
    assert asyncio.run(provider.fetch_forecast()) == demo_forecast(TODAY)
    assert len(notifications.emitted(channel="toast", severity=Severity.WARNING)) == 1


def test_unexpected_error_still_falls_back():
    class _Broken:
        async def fetch_days(self):
            raise RuntimeError("boom")

    provider, _ = _provider(_Broken())
    assert asyncio.run(provider.fetch_forecast()) == demo_forecast(TODAY)


def test_empty_items_payload_falls_back():
    client = NeaForecastClient(
        url="https://weather.test/forecast",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"items": []})),
    )
    provider, notifications = _provider(NeaForecastSource(client))
    assert asyncio.run(provider.fetch_forecast()) == demo_forecast(TODAY)
    assert len(notifications.emitted(severity=Severity.WARNING)) == 1


def test_endpoint_that_never_answers_falls_back():
    async def handler(request):
        await asyncio.sleep(3600)

    client = NeaForecastClient(url="https://weather.test/forecast", transport=httpx.MockTransport(handler))
    provider, notifications = _provider(NeaForecastSource(client), timeout=0.05)

    assert asyncio.run(provider.fetch_forecast()) == demo_forecast(TODAY)
    assert len(notifications.emitted(severity=Severity.WARNING)) == 1
