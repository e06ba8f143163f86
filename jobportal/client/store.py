"""Client-side container for the notification list and dropdown state."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from jobportal.interfaces.api.schemas import NotificationRead

Listener = Callable[["NotificationStore"], None]


class NotificationStore:
    """Hold the notifications currently known to the client.

    The unread counter is derived from the local copy, so it always equals the
    number of unread notifications held here even when the server has more.
    """

    def __init__(self) -> None:
        self._notifications: list[NotificationRead] = []
        self._dropdown_open = False
        self._listeners: list[Listener] = []

    @property
    def notifications(self) -> tuple[NotificationRead, ...]:
        return tuple(self._notifications)

    @property
    def unread_count(self) -> int:
        return sum(1 for notification in self._notifications if not notification.is_read)

    @property
    def dropdown_open(self) -> bool:
        return self._dropdown_open

    def get(self, notification_id: int) -> NotificationRead | None:
        for notification in self._notifications:
            if notification.id == notification_id:
                return notification
        return None

    def load(self, notifications: Iterable[NotificationRead]) -> None:
        """Replace the local copy with the server's list."""

        self._notifications = list(notifications)
        self._notify()

    def mark_read(self, notification_id: int) -> bool:
        """Flag one local notification as read; ``False`` if unknown or already read."""

        for index, notification in enumerate(self._notifications):
            if notification.id != notification_id:
                continue
            if notification.is_read:
                return False
            self._notifications[index] = notification.model_copy(update={"is_read": True})
            self._notify()
            return True
        return False

    def mark_all_read(self) -> int:
        changed = 0
        for index, notification in enumerate(self._notifications):
            if not notification.is_read:
                self._notifications[index] = notification.model_copy(update={"is_read": True})
                changed += 1
        if changed:
            self._notify()
        return changed

    def toggle_dropdown(self) -> bool:
        self._dropdown_open = not self._dropdown_open
        self._notify()
        return self._dropdown_open

    def close_dropdown(self) -> None:
        if self._dropdown_open:
            self._dropdown_open = False
            self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every change; returns an unsubscribe callback."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)


__all__ = ["NotificationStore"]
