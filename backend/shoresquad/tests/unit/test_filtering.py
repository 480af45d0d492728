import dataclasses
from datetime import date, datetime, timedelta

import pytest

from shoresquad.domain.filtering import add_one_month, filter_events, parse_selector
from shoresquad.domain.models import Event, FilterSelector

NOW = datetime(2026, 3, 10, 14, 30)


def make_event(event_id: int, offset_days: int) -> Event:
    return Event(
        id=event_id,
        name=f"Cleanup {event_id}",
        location="East Coast Park",
        date=NOW.date() + timedelta(days=offset_days),
        time="09:00",
        participants=5,
    )


def ids(events):
    return [event.id for event in events]


def test_all_returns_everything_in_order():
    events = [make_event(3, 40), make_event(1, -2), make_event(2, 0)]
    assert ids(filter_events(events, "all", NOW)) == [3, 1, 2]


def test_today_matches_calendar_day_only():
    events = [make_event(1, 0), make_event(2, 1), make_event(3, -1), make_event(4, 0)]
    assert ids(filter_events(events, FilterSelector.TODAY, NOW)) == [1, 4]


def test_today_includes_event_earlier_the_same_day():
    event = dataclasses.replace(make_event(1, 0), time="06:00")
    late_now = NOW.replace(hour=23)
    assert ids(filter_events([event], "today", late_now)) == [1]
    assert ids(filter_events([event], "week", late_now)) == [1]


def test_week_window_is_inclusive():
    events = [make_event(1, 0), make_event(2, 7), make_event(3, 8), make_event(4, -1), make_event(5, 3)]
    assert ids(filter_events(events, "week", NOW)) == [1, 2, 5]


def test_month_window_uses_calendar_month():
    # 2026-03-10 + 1 month = 2026-04-10
    events = [make_event(1, 31), make_event(2, 32), make_event(3, -3), make_event(4, 10)]
    assert ids(filter_events(events, "month", NOW)) == [1, 4]


def test_empty_result_is_not_an_error():
    assert filter_events([make_event(1, 30)], "today", NOW) == []


def test_add_one_month_clamps_short_months():
    assert add_one_month(date(2026, 1, 31)) == date(2026, 2, 28)
    assert add_one_month(date(2026, 12, 15)) == date(2027, 1, 15)


def test_parse_selector_defaults_and_rejects_unknown():
    assert parse_selector(None) is FilterSelector.ALL
    assert parse_selector(" Week ") is FilterSelector.WEEK
    with pytest.raises(ValueError):
        parse_selector("year")
