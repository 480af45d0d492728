from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterable, List, Union

from .models import Event, FilterSelector

EMPTY_STATE_MESSAGE = "No events found. Create one to get started! 🌊"


def parse_selector(value: Union[str, FilterSelector, None]) -> FilterSelector:
    if value is None or value == "":
        return FilterSelector.ALL
    if isinstance(value, FilterSelector):
        return value
    try:
        return FilterSelector(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(s.value for s in FilterSelector)
        raise ValueError(f"Unknown filter '{value}'. Expected one of: {allowed}") from exc


def add_one_month(day: date) -> date:
    year = day.year + (1 if day.month == 12 else 0)
    month = 1 if day.month == 12 else day.month + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def matches(event: Event, selector: FilterSelector, reference_now: datetime) -> bool:
    today = reference_now.date()
    if selector is FilterSelector.ALL:
        return True
    if selector is FilterSelector.TODAY:
        return event.date == today
    if selector is FilterSelector.WEEK:
        return today <= event.date <= today + timedelta(days=7)
    if selector is FilterSelector.MONTH:
        return today <= event.date <= add_one_month(today)
    return True


def filter_events(
    events: Iterable[Event],
    selector: Union[str, FilterSelector],
    reference_now: datetime,
) -> List[Event]:
    """Return the events matching ``selector`` in their original order.

    All comparisons are calendar-day comparisons against ``reference_now``;
    the time-of-day of an event never takes part in filtering.
    """
    selector = parse_selector(selector)
    return [event for event in events if matches(event, selector, reference_now)]
