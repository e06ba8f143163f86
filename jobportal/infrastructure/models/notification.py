"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.sql import expression

from jobportal.domain.entities import NotificationType, RelatedModel
from jobportal.infrastructure.database import Base


def _enum_values(enum_class) -> list[str]:
    return [member.value for member in enum_class]


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    recipient_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    sender_id = Column(Integer, ForeignKey("user.id"), nullable=True)
    type = Column(
        Enum(
            NotificationType,
            native_enum=False,
            length=30,
            values_callable=_enum_values,
        ),
        nullable=False,
    )
    message = Column(Text, nullable=False)
    related_id = Column(String(64), nullable=True)
    related_model = Column(
        Enum(
            RelatedModel,
            native_enum=False,
            length=30,
            values_callable=_enum_values,
        ),
        nullable=True,
    )
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(DateTime(), nullable=False, index=True)
    read_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationModel"]
