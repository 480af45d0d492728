from __future__ import annotations

from dataclasses import asdict
from threading import Lock
from typing import Iterable, List, Optional

from shoresquad.domain.models import Event, EventDraft


class EventStore:
    """Ordered in-memory collection of cleanup events.

    Newest user-created events sit at the front. Events are never removed, so
    ``len(store) + 1`` is always a fresh id; the lock keeps id assignment and
    insertion together when more than one writer is around.
    """

    def __init__(self) -> None:
        self._events: List[Event] = []
        self._lock = Lock()

    def seed(self, events: Iterable[Event]) -> None:
        events = list(events)
        ids = sorted(event.id for event in events)
        if len(ids) != len(set(ids)):
            raise ValueError("seed events must have unique ids")
        if ids != list(range(1, len(ids) + 1)):
            raise ValueError("seed event ids must run 1..n without gaps")
        with self._lock:
            self._events = events

    def insert_front(self, draft: EventDraft) -> Event:
        with self._lock:
            event = Event(id=len(self._events) + 1, **asdict(draft))
            self._events.insert(0, event)
        return event

    def increment_participants(self, event_id: int) -> bool:
        with self._lock:
            event = self._find(event_id)
            if event is None:
                return False
            event.participants += 1
            return True

    def get(self, event_id: int) -> Optional[Event]:
        return self._find(event_id)

    def all(self) -> List[Event]:
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def _find(self, event_id: int) -> Optional[Event]:
        for event in self._events:
            if event.id == event_id:
                return event
        return None
