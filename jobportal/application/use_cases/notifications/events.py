"""Utility helpers to generate and dispatch domain notifications.

Each helper persists the notification first and then pushes it over the
realtime channel. The persisted rows are the source of truth; the push is a
hint for connected clients to refetch.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from jobportal.config import get_settings
from jobportal.domain.entities import Notification, NotificationType, RelatedModel
from jobportal.infrastructure.notifications import (
    dispatch_admin_notification,
    dispatch_notification,
    serialize_notification,
)
from jobportal.infrastructure.repositories import NotificationRepository, UserRepository
from jobportal.utils import now_utc

logger = logging.getLogger(__name__)


def notify_user(
    session: Session,
    *,
    recipient_id: int,
    type: NotificationType,
    message: str,
    sender_id: int | None = None,
    related_id: str | None = None,
    related_model: RelatedModel | None = None,
) -> Notification:
    """Persist a notification for ``recipient_id`` and push it to their room."""

    notification = Notification(
        id=None,
        recipient_id=recipient_id,
        sender_id=sender_id,
        type=type,
        message=message,
        related_id=related_id,
        related_model=related_model,
        created_at=now_utc(),
    )
    saved = NotificationRepository(session).create(notification)
    dispatch_notification(saved)
    return saved


def notify_admins(
    session: Session,
    *,
    type: NotificationType,
    message: str,
    sender_id: int | None = None,
    related_id: str | None = None,
    related_model: RelatedModel | None = None,
) -> list[Notification]:
    """Persist one notification per active administrator and push it once.

    The push goes to the shared admin room rather than to each administrator's
    own room so that a connected administrator sees a single toast.
    """

    admin_ids = UserRepository(session).list_ids_by_role_alias(
        get_settings().admin_role_alias
    )
    if not admin_ids:
        logger.info("No administrators to notify about %s", type.value)
        return []

    created_at = now_utc()
    saved = NotificationRepository(session).create_many(
        [
            Notification(
                id=None,
                recipient_id=admin_id,
                sender_id=sender_id,
                type=type,
                message=message,
                related_id=related_id,
                related_model=related_model,
                created_at=created_at,
            )
            for admin_id in admin_ids
        ]
    )
    payload = serialize_notification(saved[0])
    payload.update({"id": None, "recipientId": None})
    dispatch_admin_notification(payload)
    return saved


def notify_job_alert(
    session: Session, *, recipient_id: int, job_id: str, job_title: str
) -> Notification:
    """Tell a job seeker about a job matching their alerts."""

    return notify_user(
        session,
        recipient_id=recipient_id,
        type=NotificationType.JOB_ALERT,
        message=f"New job matching your profile: {job_title}",
        related_id=job_id,
        related_model=RelatedModel.JOB,
    )


def notify_new_application(
    session: Session,
    *,
    employer_id: int,
    applicant_id: int,
    applicant_name: str,
    application_id: str,
    job_title: str,
) -> Notification:
    """Tell an employer that someone applied to one of their jobs."""

    return notify_user(
        session,
        recipient_id=employer_id,
        sender_id=applicant_id,
        type=NotificationType.NEW_APPLICATION,
        message=f"{applicant_name} applied for {job_title}",
        related_id=application_id,
        related_model=RelatedModel.APPLICATION,
    )


def notify_new_message(
    session: Session,
    *,
    receiver_id: int,
    sender_id: int,
    sender_name: str | None,
    message_id: str,
) -> Notification:
    """Tell ``receiver_id`` that a chat message arrived."""

    return notify_user(
        session,
        recipient_id=receiver_id,
        sender_id=sender_id,
        type=NotificationType.NEW_MESSAGE,
        message=f"{sender_name or 'Someone'} sent you a message",
        related_id=message_id,
        related_model=RelatedModel.MESSAGE,
    )


def notify_issue_updated(
    session: Session,
    *,
    reporter_id: int,
    admin_id: int,
    issue_id: str,
    status: str,
    reply: str | None = None,
) -> Notification:
    """Tell the reporter of an issue that an administrator updated it."""

    return notify_user(
        session,
        recipient_id=reporter_id,
        sender_id=admin_id,
        type=NotificationType.ISSUE_UPDATE,
        message=f"Issue Resolved: {reply or status}",
        related_id=issue_id,
        related_model=RelatedModel.ISSUE,
    )


def notify_issue_reported(
    session: Session,
    *,
    issue_id: str,
    issue_type: str,
    reporter_name: str,
    reporter_id: int | None = None,
) -> list[Notification]:
    """Tell administrators that a new issue was reported."""

    return notify_admins(
        session,
        sender_id=reporter_id,
        type=NotificationType.NEW_ISSUE,
        message=f"New Issue Reported: {issue_type} - {reporter_name}",
        related_id=issue_id,
        related_model=RelatedModel.ISSUE,
    )


def notify_contact_form(
    session: Session, *, contact_id: str, name: str, subject: str
) -> list[Notification]:
    """Tell administrators about a public contact form submission."""

    return notify_admins(
        session,
        type=NotificationType.CONTACT_FORM,
        message=f"New Inquiry from {name}: {subject}",
        related_id=contact_id,
        related_model=RelatedModel.CONTACT,
    )


def notify_verification_submitted(
    session: Session, *, employer_id: int, company_name: str, document_type: str
) -> list[Notification]:
    """Tell administrators that an employer uploaded a verification document."""

    return notify_admins(
        session,
        sender_id=employer_id,
        type=NotificationType.SYSTEM,
        message=f"New verification document ({document_type}) uploaded by {company_name}",
        related_id=str(employer_id),
        related_model=RelatedModel.USER,
    )
