"""Transient on-screen messages raised by push events and failures."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_TOAST_SECONDS = 4.0


@dataclass
class Toast:
    """A message that dismisses itself after ``duration`` seconds.

    The countdown stops while the toast is paused (pointer hovering) and
    continues from where it was when resumed.
    """

    title: str
    level: str = "info"
    duration: float = DEFAULT_TOAST_SECONDS
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    _started_at: float = field(default=0.0, init=False, repr=False)
    _elapsed: float = field(default=0.0, init=False, repr=False)
    _paused: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self._started_at = self.clock()

    @property
    def paused(self) -> bool:
        return self._paused

    def pause(self) -> None:
        if self._paused:
            return
        self._elapsed += self.clock() - self._started_at
        self._paused = True

    def resume(self) -> None:
        if not self._paused:
            return
        self._started_at = self.clock()
        self._paused = False

    def remaining(self) -> float:
        elapsed = self._elapsed
        if not self._paused:
            elapsed += self.clock() - self._started_at
        return max(0.0, self.duration - elapsed)

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0


class Toaster(Protocol):
    def show(self, toast: Toast) -> None:
        ...


class LoggingToaster:
    """Toaster that records toasts and writes them to the log."""

    def __init__(self) -> None:
        self.toasts: list[Toast] = []

    def show(self, toast: Toast) -> None:
        self.toasts.append(toast)
        log = logger.error if toast.level == "error" else logger.info
        log("[toast:%s] %s", toast.level, toast.title)

    def visible(self) -> list[Toast]:
        """Drop expired toasts and return the ones still on screen."""

        self.toasts = [toast for toast in self.toasts if not toast.expired]
        return list(self.toasts)


__all__ = ["DEFAULT_TOAST_SECONDS", "LoggingToaster", "Toast", "Toaster"]
