from .auth import Token
from .notification import (
    MarkAllReadResponse,
    NotificationCreate,
    NotificationListResponse,
    NotificationRead,
)

__all__ = [
    "Token",
    "MarkAllReadResponse",
    "NotificationCreate",
    "NotificationListResponse",
    "NotificationRead",
]
