"""Realtime notification helpers for the infrastructure layer."""

from .manager import RoomConnectionManager, notification_manager
from .publisher import (
    NOTIFICATION_EVENT,
    NotificationPublisher,
    dispatch_admin_notification,
    dispatch_notification,
    notification_publisher,
    serialize_notification,
)
from .rooms import admin_room, allowed_rooms, user_room

__all__ = [
    "RoomConnectionManager",
    "notification_manager",
    "NOTIFICATION_EVENT",
    "NotificationPublisher",
    "notification_publisher",
    "dispatch_notification",
    "dispatch_admin_notification",
    "serialize_notification",
    "admin_room",
    "allowed_rooms",
    "user_room",
]
