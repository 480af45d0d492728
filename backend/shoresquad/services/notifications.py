from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Deque, List, Optional

from shoresquad.domain.models import Severity

logger = logging.getLogger(__name__)

SEVERITY_COLORS = {
    Severity.SUCCESS: "#2ECC71",
    Severity.WARNING: "#FFB81C",
    Severity.ERROR: "#E74C3C",
}

TOAST_DURATION_MS = 3000
INLINE_ERROR_DURATION_MS = 5000
INLINE_SUCCESS_DURATION_MS = 3000
HISTORY_SIZE = 200


@dataclass(frozen=True)
class Notification:
    channel: str
    message: str
    severity: Severity
    color: str
    created_at: datetime
    expires_at: datetime

    def is_active(self, now: datetime) -> bool:
        return now < self.expires_at


@dataclass
class LoadingOverlay:
    active: bool = False
    message: str = "Loading..."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NotificationCenter:
    """One-shot user-facing messages that dismiss themselves.

    Dismissal is clock based: nothing is scheduled, expired entries are simply
    dropped the next time the active set is read. There is one toast slot,
    a stack of inline messages (newest on top) and one loading overlay.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or _utcnow
        self._toast: Optional[Notification] = None
        self._inline: List[Notification] = []
        self._overlay: Optional[LoadingOverlay] = None
        self.history: Deque[Notification] = deque(maxlen=HISTORY_SIZE)

    def toast(self, message: str, severity: Severity = Severity.SUCCESS) -> Notification:
        self._toast = self._emit("toast", message, Severity(severity), TOAST_DURATION_MS)
        return self._toast

    def inline_error(self, message: str, duration_ms: int = INLINE_ERROR_DURATION_MS) -> Notification:
        note = self._emit("inline_error", message, Severity.ERROR, duration_ms)
        self._inline.insert(0, note)
        return note

    def inline_success(self, message: str, duration_ms: int = INLINE_SUCCESS_DURATION_MS) -> Notification:
        note = self._emit("inline_success", message, Severity.SUCCESS, duration_ms)
        self._inline.insert(0, note)
        return note

    def loading_overlay(self, show: bool, message: Optional[str] = None) -> LoadingOverlay:
        if self._overlay is None:
            self._overlay = LoadingOverlay()
        self._overlay.active = bool(show)
        if message:
            self._overlay.message = message
        return self._overlay

    @property
    def overlay(self) -> Optional[LoadingOverlay]:
        return self._overlay

    def active(self) -> List[Notification]:
        now = self._clock()
        self._inline = [note for note in self._inline if note.is_active(now)]
        if self._toast is not None and not self._toast.is_active(now):
            self._toast = None
        current = list(self._inline)
        if self._toast is not None:
            current.append(self._toast)
        return current

    def emitted(self, channel: Optional[str] = None, severity: Optional[Severity] = None) -> List[Notification]:
        return [
            note
            for note in self.history
            if (channel is None or note.channel == channel) and (severity is None or note.severity == severity)
        ]

    def _emit(self, channel: str, message: str, severity: Severity, duration_ms: int) -> Notification:
        created = self._clock()
        note = Notification(
            channel=channel,
            message=message,
            severity=severity,
            color=SEVERITY_COLORS[severity],
            created_at=created,
            expires_at=created + timedelta(milliseconds=duration_ms),
        )
        self.history.append(note)
        logger.debug("[notify] %s/%s: %s", channel, severity.value, message)
        return note
