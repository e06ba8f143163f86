"""Retention policy for persisted notifications."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from jobportal.config import get_settings
from jobportal.infrastructure.repositories import NotificationRepository
from jobportal.utils import now_utc

logger = logging.getLogger(__name__)


def purge_notifications(
    session: Session,
    *,
    now: datetime | None = None,
    read_retention_days: int | None = None,
    max_retention_days: int | None = None,
) -> int:
    """Delete read notifications past their retention and anything too old."""

    settings = get_settings()
    reference = now or now_utc()
    read_days = (
        settings.notification_read_retention_days
        if read_retention_days is None
        else read_retention_days
    )
    max_days = (
        settings.notification_max_retention_days
        if max_retention_days is None
        else max_retention_days
    )

    deleted = NotificationRepository(session).delete_expired(
        read_before=reference - timedelta(days=read_days),
        any_before=reference - timedelta(days=max_days),
    )
    logger.info(
        "Purged %d notifications (read > %d days, any > %d days)",
        deleted,
        read_days,
        max_days,
    )
    return deleted
