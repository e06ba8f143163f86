"""Errors raised by the notification client."""


class NotificationClientError(Exception):
    """Base class for failures talking to the notification server."""


class AuthenticationRequired(NotificationClientError):
    """The server rejected the caller's credentials."""


class NotificationNotFound(NotificationClientError):
    """The notification does not exist or is not owned by the caller."""


class NetworkFailure(NotificationClientError):
    """The request or the push channel could not reach the server."""


class ValidationFailure(NotificationClientError):
    """The server answered with a body that is not the expected payload."""


__all__ = [
    "NotificationClientError",
    "AuthenticationRequired",
    "NotificationNotFound",
    "NetworkFailure",
    "ValidationFailure",
]
