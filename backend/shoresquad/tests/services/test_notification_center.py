from __future__ import annotations

from datetime import datetime, timedelta

from shoresquad.domain.models import Severity
from shoresquad.services.notifications import SEVERITY_COLORS, NotificationCenter


class _Clock:
    def __init__(self):
        self.now = datetime(2026, 3, 10, 12, 0, 0)

    def __call__(self):
        return self.now

    def advance(self, ms: int):
        self.now += timedelta(milliseconds=ms)


def test_toast_dismisses_after_three_seconds():
    clock = _Clock()
    center = NotificationCenter(clock=clock)
    center.toast("Location found! ✨")
    clock.advance(2999)
    assert [note.message for note in center.active()] == ["Location found! ✨"]
    clock.advance(1)
    assert center.active() == []


def test_new_toast_replaces_current():
    center = NotificationCenter(clock=_Clock())
    center.toast("first")
    center.toast("second", Severity.WARNING)
    [note] = center.active()
    assert note.message == "second"
    assert note.color == SEVERITY_COLORS[Severity.WARNING]


def test_severity_colors():
    assert SEVERITY_COLORS == {
        Severity.SUCCESS: "#2ECC71",
        Severity.WARNING: "#FFB81C",
        Severity.ERROR: "#E74C3C",
    }


def test_inline_messages_stack_newest_first_and_expire():
    clock = _Clock()
    center = NotificationCenter(clock=clock)
    center.inline_error("bad name")
    center.inline_success("saved")
    assert [note.message for note in center.active()] == ["saved", "bad name"]
    clock.advance(3000)
    assert [note.message for note in center.active()] == ["bad name"]
    clock.advance(2000)
    assert center.active() == []


def test_inline_custom_duration():
    clock = _Clock()
    center = NotificationCenter(clock=clock)
    center.inline_error("short", duration_ms=100)
    clock.advance(100)
    assert center.active() == []


def test_loading_overlay_is_a_singleton():
    center = NotificationCenter()
    assert center.overlay is None
    first = center.loading_overlay(True, "Fetching weather...")
    second = center.loading_overlay(False)
    assert first is second
    assert second.active is False
    assert second.message == "Fetching weather..."


def test_history_filters():
    center = NotificationCenter()
    center.toast("ok")
    center.toast("careful", Severity.WARNING)
    center.inline_error("broken")
    assert [n.message for n in center.emitted(severity=Severity.WARNING)] == ["careful"]
    assert [n.message for n in center.emitted(channel="inline_error")] == ["broken"]
