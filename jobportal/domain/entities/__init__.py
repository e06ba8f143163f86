"""Domain entities exposed by the application."""

from .notification import Notification, NotificationType, RelatedModel
from .role import ROLE_ADMIN, ROLE_EMPLOYER, ROLE_JOB_SEEKER, Role
from .user import User

__all__ = [
    "Notification",
    "NotificationType",
    "RelatedModel",
    "Role",
    "ROLE_ADMIN",
    "ROLE_EMPLOYER",
    "ROLE_JOB_SEEKER",
    "User",
]
