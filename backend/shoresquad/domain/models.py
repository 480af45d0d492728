from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional

# Pasir Ris Beach, where the squad organises its cleanups.
ORGANIZING_LOCATION = (1.381497, 103.955574)


class FilterSelector(str, Enum):
    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"


class Severity(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


_FIXED_EVENT_FIELDS = ("date", "time")


@dataclass
class Event:
    """A scheduled cleanup. Only ``participants`` changes once it exists;
    ``date`` and ``time`` are set at creation and refuse reassignment."""

    id: int
    name: str
    location: str
    date: date
    time: str
    icon: str = "🌊"
    participants: int = 0
    description: Optional[str] = None
    lat: float = ORGANIZING_LOCATION[0]
    lon: float = ORGANIZING_LOCATION[1]
    category: str = "beach"

    def __post_init__(self):
        if self.participants < 0:
            raise ValueError("participants must be >= 0")

    def __setattr__(self, name, value):
        if name in _FIXED_EVENT_FIELDS and name in self.__dict__:
            raise AttributeError(f"Event.{name} cannot change after creation")
        super().__setattr__(name, value)


@dataclass(frozen=True)
class EventDraft:
    """Validated user input waiting for an id from the store."""

    name: str
    location: str
    date: date
    time: str
    description: Optional[str] = None
    lat: float = ORGANIZING_LOCATION[0]
    lon: float = ORGANIZING_LOCATION[1]
    icon: str = "🌊"
    participants: int = 1
    category: str = "beach"


@dataclass(frozen=True)
class LocationFix:
    latitude: float
    longitude: float
    acquired_at: datetime


@dataclass(frozen=True)
class ForecastDay:
    date: date
    label: str
    condition: str
    temp_low: float
    temp_high: float
    humidity_low: float
    humidity_high: float
    icon: str


@dataclass(frozen=True)
class DisplayRecord:
    event_id: int
    name: str
    location: str
    icon: str
    date: str
    formatted_date: str
    time: str
    participants_label: str
    urgency_badge: str
    distance_km: Optional[float] = None
