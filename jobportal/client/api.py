"""HTTP client for the notification read-state API."""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from jobportal.interfaces.api.schemas import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationRead,
)

from .errors import (
    AuthenticationRequired,
    NetworkFailure,
    NotificationNotFound,
    ValidationFailure,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class NotificationApiClient:
    """Thin wrapper over :class:`httpx.Client` for the notification endpoints."""

    def __init__(self, http: httpx.Client, *, token: str) -> None:
        self._http = http
        self._token = token

    @classmethod
    def create(cls, base_url: str, *, token: str, timeout: float = 10.0) -> "NotificationApiClient":
        return cls(httpx.Client(base_url=base_url, timeout=timeout), token=token)

    def fetch(self) -> NotificationListResponse:
        response = self._request("GET", "/notifications")
        return _parse(response, NotificationListResponse)

    def mark_read(self, notification_id: int) -> NotificationRead:
        response = self._request("PUT", f"/notifications/{notification_id}/read")
        return _parse(response, NotificationRead)

    def mark_all_read(self) -> int:
        response = self._request("PUT", "/notifications/read-all")
        return _parse(response, MarkAllReadResponse).updated

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, url: str) -> httpx.Response:
        try:
            response = self._http.request(
                method, url, headers={"Authorization": f"Bearer {self._token}"}
            )
        except httpx.HTTPError as exc:
            raise NetworkFailure(f"{method} {url} failed: {exc}") from exc

        if response.status_code in (401, 403):
            raise AuthenticationRequired(_detail(response))
        if response.status_code == 404:
            raise NotificationNotFound(_detail(response))
        if response.is_error:
            raise NetworkFailure(
                f"{method} {url} returned {response.status_code}: {_detail(response)}"
            )
        return response


def _parse(response: httpx.Response, model: type[ModelT]) -> ModelT:
    try:
        return model.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        raise ValidationFailure(
            f"Unexpected {model.__name__} payload from {response.request.url}: {exc}"
        ) from exc


def _detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)


__all__ = ["NotificationApiClient"]
