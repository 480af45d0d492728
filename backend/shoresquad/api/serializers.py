from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from shoresquad.domain.models import Event, ForecastDay, LocationFix
from shoresquad.services.app_controller import EventListing
from shoresquad.services.notifications import Notification


def event_to_dict(event: Event) -> dict:
    payload = asdict(event)
    payload["date"] = event.date.isoformat()
    return payload


def listing_to_dict(listing: EventListing) -> dict:
    return {
        "filter": listing.selected_filter.value,
        "events": [asdict(record) for record in listing.records],
        "empty_message": listing.empty_message,
    }


def forecast_day_to_dict(day: ForecastDay) -> dict:
    payload = asdict(day)
    payload["date"] = day.date.isoformat()
    return payload


def fix_to_dict(fix: Optional[LocationFix]) -> Optional[dict]:
    if fix is None:
        return None
    return {
        "latitude": fix.latitude,
        "longitude": fix.longitude,
        "acquired_at": fix.acquired_at.isoformat(),
    }


def notification_to_dict(note: Notification) -> dict:
    return {
        "channel": note.channel,
        "message": note.message,
        "severity": note.severity.value,
        "color": note.color,
        "created_at": note.created_at.isoformat(),
        "expires_at": note.expires_at.isoformat(),
    }
