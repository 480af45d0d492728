from __future__ import annotations

import math
from datetime import datetime, time
from typing import Optional, Tuple

from .geo import format_event_date, haversine_km
from .models import DisplayRecord, Event

SECONDS_PER_DAY = 86_400


def urgency_badge(event: Event, reference_now: datetime) -> str:
    if event.date == reference_now.date():
        return "TODAY"
    event_start = datetime.combine(event.date, time.min, tzinfo=reference_now.tzinfo)
    days_until = math.ceil((event_start - reference_now).total_seconds() / SECONDS_PER_DAY)
    return f"{days_until}d"


def present(
    event: Event,
    reference_now: datetime,
    origin: Optional[Tuple[float, float]] = None,
) -> DisplayRecord:
    """Map an event to the record a card is drawn from. No I/O, no mutation."""
    distance = None
    if origin is not None:
        km = haversine_km(origin[0], origin[1], event.lat, event.lon)
        distance = round(km, 1) if km is not None else None
    return DisplayRecord(
        event_id=event.id,
        name=event.name,
        location=event.location,
        icon=event.icon,
        date=event.date.isoformat(),
        formatted_date=format_event_date(event.date),
        time=event.time,
        participants_label=f"{event.participants} volunteers interested",
        urgency_badge=urgency_badge(event, reference_now),
        distance_km=distance,
    )
