"""Tests for purging old notifications."""

from __future__ import annotations

import argparse
from datetime import timedelta

import pytest

from jobportal.application.use_cases.notifications import purge_notifications
from jobportal.domain.entities import Notification, NotificationType
from jobportal.infrastructure.repositories import NotificationRepository
from jobportal.utils import now_utc
from scripts.purge_notifications import positive_days


def _store(db_session, recipient_id: int, *, age_days: int, is_read: bool) -> Notification:
    created_at = now_utc() - timedelta(days=age_days)
    return NotificationRepository(db_session).create(
        Notification(
            id=None,
            recipient_id=recipient_id,
            type=NotificationType.SYSTEM,
            message=f"{age_days} days old",
            is_read=is_read,
            created_at=created_at,
            read_at=created_at if is_read else None,
        )
    )


def test_purge_removes_old_read_and_expired_notifications(db_session, make_user) -> None:
    user = make_user("seeker@example.com")
    fresh_read = _store(db_session, user.id, age_days=5, is_read=True)
    old_unread = _store(db_session, user.id, age_days=45, is_read=False)
    _store(db_session, user.id, age_days=45, is_read=True)
    _store(db_session, user.id, age_days=120, is_read=False)

    deleted = purge_notifications(db_session)

    assert deleted == 2
    remaining = NotificationRepository(db_session).list_for_recipient(user.id, limit=None)
    assert sorted(n.id for n in remaining) == sorted([fresh_read.id, old_unread.id])


def test_purge_accepts_explicit_retention(db_session, make_user) -> None:
    user = make_user("seeker@example.com")
    _store(db_session, user.id, age_days=5, is_read=True)
    kept = _store(db_session, user.id, age_days=5, is_read=False)

    deleted = purge_notifications(db_session, read_retention_days=1, max_retention_days=10)

    assert deleted == 1
    remaining = NotificationRepository(db_session).list_for_recipient(user.id)
    assert [n.id for n in remaining] == [kept.id]


def test_purge_honours_zero_read_retention(db_session, make_user) -> None:
    user = make_user("seeker@example.com")
    _store(db_session, user.id, age_days=1, is_read=True)
    kept = _store(db_session, user.id, age_days=1, is_read=False)

    deleted = purge_notifications(db_session, read_retention_days=0)

    assert deleted == 1
    remaining = NotificationRepository(db_session).list_for_recipient(user.id)
    assert [n.id for n in remaining] == [kept.id]


@pytest.mark.parametrize("value", ["0", "-3", "abc"])
def test_purge_script_rejects_invalid_day_counts(value: str) -> None:
    with pytest.raises((argparse.ArgumentTypeError, ValueError)):
        positive_days(value)


def test_purge_script_accepts_positive_day_counts() -> None:
    assert positive_days("7") == 7
