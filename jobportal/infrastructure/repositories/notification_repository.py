"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from jobportal.domain.entities import Notification
from jobportal.infrastructure.models import NotificationModel
from jobportal.utils import ensure_app_timezone, ensure_utc_naive_datetime, now_utc


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects.

    Every read and write is scoped by ``recipient_id`` so that one user can
    never observe or change another user's notifications.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_recipient(
        self,
        recipient_id: int,
        *,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.recipient_id == recipient_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_unread(self, recipient_id: int) -> int:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.recipient_id == recipient_id)
            .filter(NotificationModel.is_read.is_(False))
            .count()
        )

    def get_for_recipient(
        self, notification_id: int, *, recipient_id: int
    ) -> Notification | None:
        model = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .filter(NotificationModel.recipient_id == recipient_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, notification: Notification) -> Notification:
        return self.create_many([notification])[0]

    def create_many(self, notifications: Sequence[Notification]) -> list[Notification]:
        models = [self._build_model(notification) for notification in notifications]
        if not models:
            return []
        self.session.add_all(models)
        self.session.commit()
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def mark_as_read(self, notification_id: int, *, recipient_id: int) -> bool:
        """Flag one unread notification as read; ``False`` when nothing changed."""

        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.recipient_id == recipient_id,
                NotificationModel.is_read.is_(False),
            )
            .update(
                {
                    NotificationModel.is_read: True,
                    NotificationModel.read_at: ensure_utc_naive_datetime(now_utc()),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return bool(updated)

    def mark_all_as_read(self, recipient_id: int) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.recipient_id == recipient_id,
                NotificationModel.is_read.is_(False),
            )
            .update(
                {
                    NotificationModel.is_read: True,
                    NotificationModel.read_at: ensure_utc_naive_datetime(now_utc()),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def delete_expired(self, *, read_before: datetime, any_before: datetime) -> int:
        """Delete read rows older than ``read_before`` and any row older than ``any_before``."""

        deleted = (
            self.session.query(NotificationModel)
            .filter(
                or_(
                    and_(
                        NotificationModel.is_read.is_(True),
                        NotificationModel.created_at < ensure_utc_naive_datetime(read_before),
                    ),
                    NotificationModel.created_at < ensure_utc_naive_datetime(any_before),
                )
            )
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted

    @staticmethod
    def _build_model(notification: Notification) -> NotificationModel:
        return NotificationModel(
            recipient_id=notification.recipient_id,
            sender_id=notification.sender_id,
            type=notification.type,
            message=notification.message,
            related_id=notification.related_id,
            related_model=notification.related_model,
            is_read=notification.is_read,
            created_at=ensure_utc_naive_datetime(notification.created_at or now_utc()),
            read_at=ensure_utc_naive_datetime(notification.read_at),
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.recipient_id,
            sender_id=model.sender_id,
            type=model.type,
            message=model.message,
            related_id=model.related_id,
            related_model=model.related_model,
            is_read=model.is_read,
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationRepository"]
