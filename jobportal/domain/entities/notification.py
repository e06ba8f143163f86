"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    """Closed set of events a notification can describe."""

    SYSTEM = "SYSTEM"
    NEW_APPLICATION = "NEW_APPLICATION"
    JOB_ALERT = "JOB_ALERT"
    FOLLOW = "FOLLOW"
    NEW_ISSUE = "NEW_ISSUE"
    ISSUE_UPDATE = "ISSUE_UPDATE"
    CONTACT_FORM = "CONTACT_FORM"
    NEW_MESSAGE = "NEW_MESSAGE"
    COMPANY_UPDATE = "COMPANY_UPDATE"


class RelatedModel(str, Enum):
    """Kind of entity referenced by ``Notification.related_id``."""

    JOB = "Job"
    APPLICATION = "Application"
    USER = "User"
    ISSUE = "Issue"
    CONTACT = "Contact"
    MESSAGE = "Message"
    COMPANY = "Company"


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    recipient_id: int
    type: NotificationType
    message: str
    sender_id: int | None = None
    related_id: str | None = None
    related_model: RelatedModel | None = None
    is_read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None


__all__ = ["Notification", "NotificationType", "RelatedModel"]
