from __future__ import annotations

from enum import Enum
from typing import Dict


class NetworkFailure(Exception):
    """A remote data source could not produce a usable payload."""


class GeoError(str, Enum):
    UNSUPPORTED = "unsupported"
    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"


class PositionError(Exception):
    def __init__(self, reason: GeoError, detail: str = "") -> None:
        super().__init__(detail or reason.value)
        self.reason = reason


class ValidationFailure(Exception):
    """Bad user input, keyed by the offending field."""

    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in errors.items()))
        self.errors = dict(errors)


class EventNotFound(LookupError):
    def __init__(self, event_id: int) -> None:
        super().__init__(f"Event {event_id} not found")
        self.event_id = event_id


class ActionFailed(RuntimeError):
    """A user action hit an unexpected error that was already reported to the user."""

    def __init__(self, action: str) -> None:
        super().__init__(f"Action '{action}' failed")
        self.action = action
