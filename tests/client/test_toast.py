"""Tests for toast timing."""

from __future__ import annotations

from jobportal.client import LoggingToaster, Toast


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_toast_expires_after_four_seconds() -> None:
    clock = FakeClock()
    toast = Toast(title="New job", clock=clock)

    clock.now += 3.5
    assert toast.remaining() == 0.5
    assert toast.expired is False

    clock.now += 0.5
    assert toast.expired is True


def test_paused_toast_does_not_count_down() -> None:
    clock = FakeClock()
    toast = Toast(title="New job", clock=clock)

    clock.now += 1.0
    toast.pause()
    clock.now += 60.0
    assert toast.paused is True
    assert toast.remaining() == 3.0

    toast.resume()
    clock.now += 2.0
    assert toast.remaining() == 1.0
    assert toast.expired is False


def test_toaster_drops_expired_toasts() -> None:
    clock = FakeClock()
    toaster = LoggingToaster()
    short = Toast(title="Short", duration=1.0, clock=clock)
    hovered = Toast(title="Hovered", duration=1.0, clock=clock)
    toaster.show(short)
    toaster.show(hovered)

    hovered.pause()
    clock.now += 2.0

    assert toaster.visible() == [hovered]
