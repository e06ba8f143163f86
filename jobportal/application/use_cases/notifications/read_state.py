"""Use cases for fetching notifications and reconciling their read state."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from jobportal.config import get_settings
from jobportal.domain.entities import Notification, User
from jobportal.infrastructure.repositories import NotificationRepository


class NotificationNotFoundError(LookupError):
    """Raised when a notification does not exist or belongs to someone else."""


@dataclass(frozen=True)
class NotificationFeed:
    """Newest notifications of a user along with the total unread count."""

    notifications: Sequence[Notification]
    unread_count: int


def list_notifications(
    session: Session, user: User, *, limit: int | None = None
) -> NotificationFeed:
    """Return the most recent notifications owned by ``user``."""

    repository = NotificationRepository(session)
    notifications = repository.list_for_recipient(
        user.id, limit=limit or get_settings().notification_list_limit
    )
    return NotificationFeed(
        notifications=notifications,
        unread_count=repository.count_unread(user.id),
    )


def mark_notification_read(
    session: Session, user: User, notification_id: int
) -> Notification:
    """Mark one of ``user``'s notifications as read.

    Marking an already read notification is a no-op. Unknown identifiers and
    identifiers owned by other users raise the same error.
    """

    repository = NotificationRepository(session)
    if repository.get_for_recipient(notification_id, recipient_id=user.id) is None:
        raise NotificationNotFoundError("Notification not found")

    repository.mark_as_read(notification_id, recipient_id=user.id)
    return repository.get_for_recipient(notification_id, recipient_id=user.id)


def mark_all_notifications_read(session: Session, user: User) -> int:
    """Mark every unread notification of ``user`` as read and return how many changed."""

    return NotificationRepository(session).mark_all_as_read(user.id)
