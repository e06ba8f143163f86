"""Where a click on a notification takes the user."""

from __future__ import annotations

from jobportal.domain.entities import NotificationType, RelatedModel
from jobportal.interfaces.api.schemas import NotificationRead

VERIFICATION_PAGE = "/employer/verification"
EMPLOYER_JOBS_PAGE = "/employer/my-jobs"
MESSAGES_PAGE = "/messages"
JOB_DETAIL_PAGE = "/job/{job_id}"

ADMIN_SUPPORT_PAGE = "/admin/support"
ADMIN_MESSAGES_PAGE = "/admin/messages"
ADMIN_VERIFICATIONS_PAGE = "/admin/verifications"
ADMIN_USERS_PAGE = "/admin/users"
ADMIN_DASHBOARD_PAGE = "/admin/dashboard"
ADMIN_COMPANY_UPDATES_PAGE = "/admin/company-updates"


def _mentions_verification(notification: NotificationRead) -> bool:
    # FIXME: intent is inferred from the message text; SYSTEM notifications
    # need a dedicated field to tell verification events apart.
    return "verification" in notification.message.lower()


def resolve_route(notification: NotificationRead, *, is_admin: bool = False) -> str | None:
    """Return the page for ``notification`` or ``None`` when it has no target."""

    if is_admin:
        return _resolve_admin_route(notification)

    kind = notification.type
    if kind is NotificationType.SYSTEM:
        if _mentions_verification(notification):
            return VERIFICATION_PAGE
        return None
    if kind is NotificationType.NEW_APPLICATION:
        return EMPLOYER_JOBS_PAGE
    if kind is NotificationType.JOB_ALERT:
        if not notification.related_id:
            return None
        return JOB_DETAIL_PAGE.format(job_id=notification.related_id)
    if kind is NotificationType.NEW_MESSAGE:
        return MESSAGES_PAGE
    return None


def _resolve_admin_route(notification: NotificationRead) -> str | None:
    kind = notification.type
    if kind in (NotificationType.NEW_ISSUE, NotificationType.ISSUE_UPDATE):
        return ADMIN_SUPPORT_PAGE
    if kind is NotificationType.CONTACT_FORM:
        return ADMIN_MESSAGES_PAGE
    if kind is NotificationType.SYSTEM:
        if _mentions_verification(notification):
            return ADMIN_VERIFICATIONS_PAGE
        if notification.related_model is RelatedModel.USER:
            return ADMIN_USERS_PAGE
        return None
    if kind is NotificationType.JOB_ALERT:
        return ADMIN_DASHBOARD_PAGE
    if kind is NotificationType.COMPANY_UPDATE:
        return ADMIN_COMPANY_UPDATES_PAGE
    return None


__all__ = ["resolve_route"]
