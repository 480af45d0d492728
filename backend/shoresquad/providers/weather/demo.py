from __future__ import annotations

from datetime import date, timedelta
from typing import List

from shoresquad.domain.models import ForecastDay

# (label, condition, temp low/high, humidity low/high, icon) per day offset.
_DEMO_DAYS = [
    ("Today", "Partly Cloudy", (24, 32), (60, 80), "⛅"),
    ("Tomorrow", "Light Rain", (23, 31), (65, 85), "🌧️"),
    ("Day 3", "Cloudy", (22, 30), (70, 90), "☁️"),
    ("Day 4", "Sunny", (25, 33), (50, 70), "☀️"),
]


def demo_forecast(today: date) -> List[ForecastDay]:
    days = []
    for offset, (label, condition, temp, humidity, icon) in enumerate(_DEMO_DAYS):
        days.append(
            ForecastDay(
                date=today + timedelta(days=offset),
                label=label,
                condition=condition,
                temp_low=float(temp[0]),
                temp_high=float(temp[1]),
                humidity_low=float(humidity[0]),
                humidity_high=float(humidity[1]),
                icon=icon,
            )
        )
    return days
