"""Tests for the click navigation table."""

from __future__ import annotations

import pytest

from jobportal.client import resolve_route
from jobportal.domain.entities import NotificationType, RelatedModel
from jobportal.interfaces.api.schemas import NotificationRead


def _notification(type, message="Something happened", related_id=None, related_model=None):
    return NotificationRead(
        id=1,
        type=type,
        message=message,
        related_id=related_id,
        related_model=related_model,
    )


@pytest.mark.parametrize(
    ("notification", "expected"),
    [
        (_notification(NotificationType.SYSTEM, "Your Verification was approved"), "/employer/verification"),
        (_notification(NotificationType.SYSTEM, "Maintenance tonight"), None),
        (_notification(NotificationType.NEW_APPLICATION), "/employer/my-jobs"),
        (_notification(NotificationType.JOB_ALERT, related_id="job42"), "/job/job42"),
        (_notification(NotificationType.JOB_ALERT), None),
        (_notification(NotificationType.NEW_MESSAGE), "/messages"),
        (_notification(NotificationType.FOLLOW), None),
        (_notification(NotificationType.ISSUE_UPDATE), None),
        (_notification(NotificationType.COMPANY_UPDATE), None),
    ],
)
def test_user_routes(notification: NotificationRead, expected) -> None:
    assert resolve_route(notification) == expected


@pytest.mark.parametrize(
    ("notification", "expected"),
    [
        (_notification(NotificationType.NEW_ISSUE), "/admin/support"),
        (_notification(NotificationType.ISSUE_UPDATE), "/admin/support"),
        (_notification(NotificationType.CONTACT_FORM), "/admin/messages"),
        (_notification(NotificationType.SYSTEM, "New verification document"), "/admin/verifications"),
        (
            _notification(NotificationType.SYSTEM, "New employer", related_model=RelatedModel.USER),
            "/admin/users",
        ),
        (_notification(NotificationType.SYSTEM, "Backup done"), None),
        (_notification(NotificationType.JOB_ALERT, related_id="job42"), "/admin/dashboard"),
        (_notification(NotificationType.COMPANY_UPDATE), "/admin/company-updates"),
        (_notification(NotificationType.NEW_MESSAGE), None),
    ],
)
def test_admin_routes(notification: NotificationRead, expected) -> None:
    assert resolve_route(notification, is_admin=True) == expected
