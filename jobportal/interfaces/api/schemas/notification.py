"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from jobportal.domain.entities import NotificationType, RelatedModel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NotificationRead(_CamelModel):
    """Representation of a notification delivered to the client."""

    id: int | None = None
    recipient_id: int | None = None
    sender_id: int | None = None
    type: NotificationType
    message: str
    related_id: str | None = None
    related_model: RelatedModel | None = None
    is_read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None


class NotificationListResponse(_CamelModel):
    """Response of ``GET /notifications``."""

    notifications: list[NotificationRead]
    unread_count: int


class MarkAllReadResponse(_CamelModel):
    message: str
    updated: int


class NotificationCreate(_CamelModel):
    """Payload used by administrators to emit a notification."""

    recipient_id: int | None = Field(default=None, description="Target user identifier")
    audience: Literal["user", "admins"] = "user"
    type: NotificationType = NotificationType.SYSTEM
    message: str = Field(..., min_length=1, max_length=2000)
    related_id: str | None = Field(default=None, max_length=64)
    related_model: RelatedModel | None = None

    @model_validator(mode="after")
    def _require_recipient_for_user_audience(self) -> "NotificationCreate":
        if self.audience == "user" and self.recipient_id is None:
            raise ValueError("recipientId is required when audience is 'user'")
        return self


__all__ = [
    "MarkAllReadResponse",
    "NotificationCreate",
    "NotificationListResponse",
    "NotificationRead",
]
