from __future__ import annotations

from datetime import date, timedelta
from typing import List

from .models import Event

# Dates are stored as offsets from the day the app starts so the demo list
# always has something under "week" and "month".
DEMO_EVENTS = [
    {
        "id": 1,
        "name": "Santa Monica Cleanup",
        "location": "Santa Monica Beach",
        "days_ahead": 2,
        "time": "09:00",
        "icon": "🌊",
        "participants": 24,
        "description": "Join us for a morning cleanup at Santa Monica Beach!",
        "lat": 34.0195,
        "lon": -118.4912,
    },
    {
        "id": 2,
        "name": "Venice Beach Eco-Drive",
        "location": "Venice Beach",
        "days_ahead": 4,
        "time": "10:00",
        "icon": "🏖️",
        "participants": 31,
        "description": "Weekend cleanup and ocean awareness event",
        "lat": 33.9850,
        "lon": -118.4695,
    },
    {
        "id": 3,
        "name": "Malibu Beach Revival",
        "location": "Malibu Beach",
        "days_ahead": 7,
        "time": "08:00",
        "icon": "🌅",
        "participants": 18,
        "description": "Early morning cleanup before the crowds",
        "lat": 34.0314,
        "lon": -118.6819,
    },
]


def load_demo_events(today: date) -> List[Event]:
    events = []
    for item in DEMO_EVENTS:
        events.append(
            Event(
                id=item["id"],
                name=item["name"],
                location=item["location"],
                date=today + timedelta(days=item["days_ahead"]),
                time=item["time"],
                icon=item["icon"],
                participants=item["participants"],
                description=item.get("description"),
                lat=float(item["lat"]),
                lon=float(item["lon"]),
                category=item.get("category", "beach"),
            )
        )
    return events
