from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from shoresquad.api.main import create_app
from shoresquad.config import Settings
from shoresquad.domain.errors import NetworkFailure
from shoresquad.domain.models import ForecastDay
from shoresquad.services.app_controller import AppController
from shoresquad.services.notifications import NotificationCenter
from shoresquad.services.weather import WeatherProvider

API_NOW = datetime(2026, 3, 10, 9, 0)


class _StaticForecastSource:
    def __init__(self, fail: bool = False):
        self.fail = fail

    async def fetch_days(self):
        if self.fail:
            raise NetworkFailure("offline")
        return [
            ForecastDay(
                date=API_NOW.date() + timedelta(days=i),
                label=(API_NOW + timedelta(days=i)).strftime("%a"),
                condition="Fair and Warm",
                temp_low=25,
                temp_high=33,
                humidity_low=55,
                humidity_high=90,
                icon="⛅",
            )
            for i in range(4)
        ]


def _build_api_client(*, weather_fails: bool):
    notifications = NotificationCenter()
    controller = AppController(
        settings=Settings(),
        notifications=notifications,
        weather=WeatherProvider(
            notifications,
            _StaticForecastSource(fail=weather_fails),
            today=lambda: API_NOW.date(),
        ),
        clock=lambda: API_NOW,
    )
    app = create_app(controller=controller, settings=Settings(), wait_for_background=True)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture()
def api_client():
    yield from _build_api_client(weather_fails=False)


@pytest.fixture()
def api_client_offline():
    yield from _build_api_client(weather_fails=True)
