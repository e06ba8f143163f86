"""Glue between the notification store, the HTTP API and the push channel."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .api import NotificationApiClient
from .channel import PushChannel, PushTransport, WebSocketTransport, push_channel_url
from .config import ClientSettings, get_client_settings
from .errors import NotificationClientError
from .navigation import resolve_route
from .session import ClientSession
from .store import NotificationStore
from .toast import LoggingToaster, Toast, Toaster

logger = logging.getLogger(__name__)

Navigator = Callable[[str], None]


class NotificationCenter:
    """Client behaviour of the notification dropdown.

    Pushed payloads never go into the store directly: each push raises a toast
    and triggers a full refetch, so the server list is always what is shown.
    """

    def __init__(
        self,
        session: ClientSession,
        api: NotificationApiClient,
        *,
        store: NotificationStore | None = None,
        toaster: Toaster | None = None,
        navigate: Navigator | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        self.session = session
        self.api = api
        self.store = store or NotificationStore()
        self.toaster = toaster or LoggingToaster()
        self._navigate = navigate
        self.settings = settings or get_client_settings()
        self._channel: PushChannel | None = None

    def refresh(self) -> bool:
        """Reload the list from the server; failures keep the stale list."""

        try:
            result = self.api.fetch()
        except NotificationClientError as exc:
            logger.warning("Failed to fetch notifications: %s", exc)
            return False
        self.store.load(result.notifications)
        return True

    def handle_push(self, payload: dict[str, Any]) -> None:
        """React to a ``notification`` event from the push channel."""

        self.toaster.show(
            Toast(
                title=str(payload.get("message") or "New notification"),
                duration=self.settings.toast_seconds,
            )
        )
        self.refresh()

    def open_notification(self, notification_id: int) -> str | None:
        """Mark the clicked notification read and navigate to its target."""

        notification = self.store.get(notification_id)
        if notification is None:
            return None

        if not notification.is_read:
            try:
                self.api.mark_read(notification_id)
            except NotificationClientError as exc:
                logger.warning("Failed to mark notification %s read: %s", notification_id, exc)
                self._show_error("Could not mark the notification as read")
                return None
            self.store.mark_read(notification_id)

        route = resolve_route(
            notification, is_admin=self.session.is_admin(self.settings.admin_role_alias)
        )
        self.store.close_dropdown()
        if route is not None and self._navigate is not None:
            self._navigate(route)
        return route

    def mark_all_read(self) -> bool:
        try:
            self.api.mark_all_read()
        except NotificationClientError as exc:
            logger.warning("Failed to mark all notifications read: %s", exc)
            self._show_error("Could not mark notifications as read")
            return False
        self.store.mark_all_read()
        return True

    def build_channel(
        self,
        connect: Callable[[], PushTransport] | None = None,
        *,
        sleep: Callable[[float], None] | None = None,
    ) -> PushChannel:
        """Return a push channel joined to this session's rooms."""

        if connect is None:
            url = push_channel_url(self.settings.server_url, self.session.token)

            def connect() -> PushTransport:
                return WebSocketTransport(url)

        options: dict[str, Any] = {}
        if sleep is not None:
            options["sleep"] = sleep
        self._channel = PushChannel(
            connect,
            self.session.rooms(
                self.settings.admin_room, admin_role_alias=self.settings.admin_role_alias
            ),
            on_notification=self.handle_push,
            on_reconnect=self.refresh,
            reconnect_delay=self.settings.reconnect_delay_seconds,
            **options,
        )
        return self._channel

    def close(self) -> None:
        """Close the push channel and the HTTP client."""

        if self._channel is not None:
            self._channel.close()
            self._channel = None
        self.api.close()

    def _show_error(self, title: str) -> None:
        self.toaster.show(Toast(title=title, level="error", duration=self.settings.toast_seconds))


def create_notification_center(
    session: ClientSession,
    *,
    settings: ClientSettings | None = None,
    toaster: Toaster | None = None,
    navigate: Navigator | None = None,
) -> NotificationCenter:
    """Build a center talking to the configured server over HTTP."""

    settings = settings or get_client_settings()
    api = NotificationApiClient.create(settings.resolved_api_url, token=session.token)
    return NotificationCenter(
        session, api, toaster=toaster, navigate=navigate, settings=settings
    )


__all__ = ["NotificationCenter", "create_notification_center"]
