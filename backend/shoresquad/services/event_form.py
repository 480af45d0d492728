from __future__ import annotations

from datetime import date
from typing import Dict, Mapping, Optional

from shoresquad.domain.errors import ValidationFailure
from shoresquad.domain.models import ORGANIZING_LOCATION, EventDraft, LocationFix

MIN_TEXT_LENGTH = 3


def _text(form: Mapping, key: str) -> str:
    value = form.get(key)
    return str(value).strip() if value is not None else ""


def validate_event_form(
    form: Mapping,
    *,
    today: date,
    location: Optional[LocationFix] = None,
) -> EventDraft:
    """Turn raw form fields into an ``EventDraft``.

    Every failing field is reported at once through ``ValidationFailure``.
    Coordinates come from the creator's fix, or the organising location.
    """
    errors: Dict[str, str] = {}
    name = _text(form, "name")
    place = _text(form, "location")
    raw_date = _text(form, "date")

    if len(name) < MIN_TEXT_LENGTH:
        errors["name"] = f"Event name must be at least {MIN_TEXT_LENGTH} characters"
    if len(place) < MIN_TEXT_LENGTH:
        errors["location"] = f"Location must be at least {MIN_TEXT_LENGTH} characters"

    event_date = None
    if not raw_date:
        errors["date"] = "Event date is required"
    else:
        try:
            event_date = date.fromisoformat(raw_date)
        except ValueError:
            errors["date"] = "Event date must be in YYYY-MM-DD format"
        else:
            if event_date < today:
                errors["date"] = "Event date cannot be in the past"

    if errors:
        raise ValidationFailure(errors)

    lat, lon = ORGANIZING_LOCATION
    if location is not None:
        lat, lon = location.latitude, location.longitude
    return EventDraft(
        name=name,
        location=place,
        date=event_date,
        time=_text(form, "time"),
        description=_text(form, "description") or None,
        lat=lat,
        lon=lon,
    )
