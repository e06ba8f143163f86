"""Consumer side of the notification flow."""

from .api import NotificationApiClient
from .center import NotificationCenter, create_notification_center
from .channel import PushChannel, PushTransport, WebSocketTransport, push_channel_url
from .config import ClientSettings, get_client_settings
from .errors import (
    AuthenticationRequired,
    NetworkFailure,
    NotificationClientError,
    NotificationNotFound,
    ValidationFailure,
)
from .navigation import resolve_route
from .session import ClientSession
from .store import NotificationStore
from .toast import LoggingToaster, Toast, Toaster

__all__ = [
    "NotificationApiClient",
    "NotificationCenter",
    "create_notification_center",
    "PushChannel",
    "PushTransport",
    "WebSocketTransport",
    "push_channel_url",
    "ClientSettings",
    "get_client_settings",
    "AuthenticationRequired",
    "NetworkFailure",
    "NotificationClientError",
    "NotificationNotFound",
    "ValidationFailure",
    "resolve_route",
    "ClientSession",
    "NotificationStore",
    "LoggingToaster",
    "Toast",
    "Toaster",
]
