"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from anyio import from_thread

from jobportal.domain.entities import Notification

from .manager import RoomConnectionManager, notification_manager
from .rooms import admin_room, user_room

NOTIFICATION_EVENT = "notification"

logger = logging.getLogger(__name__)


class NotificationPublisher:
    """Serialize notifications and schedule their delivery to rooms."""

    def __init__(self, manager: RoomConnectionManager) -> None:
        self._manager = manager

    def dispatch(self, notification: Notification) -> None:
        """Schedule ``notification`` for the room of its recipient."""

        self.dispatch_to_room(
            user_room(notification.recipient_id), serialize_notification(notification)
        )

    def dispatch_to_admins(self, payload: dict[str, Any]) -> None:
        """Schedule ``payload`` for the shared administrators room."""

        self.dispatch_to_room(admin_room(), payload)

    def dispatch_to_room(self, room: str, payload: dict[str, Any]) -> None:
        """Schedule a ``notification`` event carrying ``payload`` for ``room``."""

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run(self._manager.emit, room, NOTIFICATION_EVENT, payload)
            except RuntimeError:
                # Called outside the server (scripts, plain threads): the row is
                # persisted and will be picked up by the next client fetch.
                logger.info("No event loop reachable, skipping push to room %s", room)
        else:
            loop.create_task(self._manager.emit(room, NOTIFICATION_EVENT, payload))


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the JSON payload pushed to clients for ``notification``."""

    return {
        "id": notification.id,
        "recipientId": notification.recipient_id,
        "senderId": notification.sender_id,
        "type": notification.type.value,
        "message": notification.message,
        "relatedId": notification.related_id,
        "relatedModel": notification.related_model.value
        if notification.related_model
        else None,
        "isRead": notification.is_read,
        "createdAt": notification.created_at.isoformat()
        if notification.created_at
        else None,
        "readAt": notification.read_at.isoformat() if notification.read_at else None,
    }


notification_publisher = NotificationPublisher(notification_manager)


def dispatch_notification(notification: Notification) -> None:
    """Public helper that delegates to the shared publisher instance."""

    notification_publisher.dispatch(notification)


def dispatch_admin_notification(payload: dict[str, Any]) -> None:
    """Push ``payload`` once to the administrators room."""

    notification_publisher.dispatch_to_admins(payload)


__all__ = [
    "NOTIFICATION_EVENT",
    "NotificationPublisher",
    "notification_publisher",
    "dispatch_notification",
    "dispatch_admin_notification",
    "serialize_notification",
]
