"""Public helpers for reading and emitting notifications."""

from .events import (
    notify_admins,
    notify_contact_form,
    notify_issue_reported,
    notify_issue_updated,
    notify_job_alert,
    notify_new_application,
    notify_new_message,
    notify_user,
    notify_verification_submitted,
)
from .read_state import (
    NotificationFeed,
    NotificationNotFoundError,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from .retention import purge_notifications

__all__ = [
    "notify_admins",
    "notify_contact_form",
    "notify_issue_reported",
    "notify_issue_updated",
    "notify_job_alert",
    "notify_new_application",
    "notify_new_message",
    "notify_user",
    "notify_verification_submitted",
    "NotificationFeed",
    "NotificationNotFoundError",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "purge_notifications",
]
