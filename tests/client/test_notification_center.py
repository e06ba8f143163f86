"""Tests for the notification center behaviour on failures and pushes."""

from __future__ import annotations

import httpx

from jobportal.client import (
    ClientSession,
    LoggingToaster,
    NotificationApiClient,
    NotificationCenter,
)
from jobportal.client.config import ClientSettings


def _item(notification_id: int, *, type: str = "NEW_MESSAGE", is_read: bool = False) -> dict:
    return {
        "id": notification_id,
        "recipientId": 1,
        "type": type,
        "message": f"Notification {notification_id}",
        "isRead": is_read,
    }


class FakeServer:
    """Minimal in-memory stand-in for the read-state API."""

    def __init__(self, items: list[dict]) -> None:
        self.items = items
        self.fail_with: int | None = None
        self.html_body = False
        self.requests: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(f"{request.method} {request.url.path}")
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"detail": "boom"})
        if self.html_body:
            return httpx.Response(200, text="<html>proxy error page</html>")
        path = request.url.path
        if request.method == "GET":
            unread = sum(1 for item in self.items if not item["isRead"])
            return httpx.Response(200, json={"notifications": self.items, "unreadCount": unread})
        if path == "/notifications/read-all":
            updated = 0
            for item in self.items:
                updated += not item["isRead"]
                item["isRead"] = True
            return httpx.Response(200, json={"message": "All marked as read", "updated": updated})
        notification_id = int(path.split("/")[2])
        for item in self.items:
            if item["id"] == notification_id:
                item["isRead"] = True
                return httpx.Response(200, json=item)
        return httpx.Response(404, json={"detail": "Notification not found"})


def _center(server: FakeServer, *, role: str = "job_seeker", visited=None, settings=None):
    api = NotificationApiClient(
        httpx.Client(transport=httpx.MockTransport(server), base_url="http://api.test"),
        token="abc",
    )
    toaster = LoggingToaster()
    center = NotificationCenter(
        ClientSession(identity="1", role=role, token="abc"),
        api,
        toaster=toaster,
        navigate=visited.append if visited is not None else None,
        settings=settings or ClientSettings(),
    )
    return center, toaster


def test_refresh_failure_keeps_stale_list() -> None:
    server = FakeServer([_item(1), _item(2)])
    center, _ = _center(server)
    assert center.refresh() is True

    server.fail_with = 500

    assert center.refresh() is False
    assert [n.id for n in center.store.notifications] == [1, 2]
    assert center.store.unread_count == 2


def test_push_raises_toast_and_refetches_instead_of_merging() -> None:
    server = FakeServer([_item(1)])
    center, toaster = _center(server)
    center.refresh()
    server.items.insert(0, _item(2))

    center.handle_push({"id": 99, "message": "Someone sent you a message"})

    assert [toast.title for toast in toaster.toasts] == ["Someone sent you a message"]
    assert [n.id for n in center.store.notifications] == [2, 1]
    assert server.requests == ["GET /notifications", "GET /notifications"]


def test_open_read_notification_skips_api_call() -> None:
    visited: list[str] = []
    server = FakeServer([_item(1, is_read=True)])
    center, _ = _center(server, visited=visited)
    center.refresh()

    assert center.open_notification(1) == "/messages"
    assert visited == ["/messages"]
    assert server.requests == ["GET /notifications"]


def test_failed_mark_read_shows_error_and_keeps_state() -> None:
    visited: list[str] = []
    server = FakeServer([_item(1)])
    center, toaster = _center(server, visited=visited)
    center.refresh()
    server.fail_with = 401

    assert center.open_notification(1) is None
    assert visited == []
    assert center.store.unread_count == 1
    assert [toast.level for toast in toaster.toasts] == ["error"]


def test_notification_without_target_is_marked_but_not_navigated() -> None:
    visited: list[str] = []
    server = FakeServer([_item(1, type="FOLLOW")])
    center, _ = _center(server, visited=visited)
    center.refresh()

    assert center.open_notification(1) is None
    assert visited == []
    assert center.store.unread_count == 0


def test_mark_all_read_success_and_failure() -> None:
    server = FakeServer([_item(1), _item(2), _item(3, is_read=True)])
    center, toaster = _center(server)
    center.refresh()

    assert center.mark_all_read() is True
    assert center.store.unread_count == 0
    center.refresh()
    assert center.store.unread_count == 0

    server.items.append(_item(4))
    center.refresh()
    server.fail_with = 503
    assert center.mark_all_read() is False
    assert center.store.unread_count == 1
    assert toaster.toasts[-1].level == "error"


def test_admin_channel_joins_admin_room() -> None:
    server = FakeServer([])
    center, _ = _center(server, role="admin")
    sent: list[dict] = []

    class Transport:
        def send_json(self, data) -> None:
            sent.append(data)

        def receive_json(self):
            return {"event": "pong"}

        def close(self) -> None:
            pass

    channel = center.build_channel(Transport)
    channel.open()

    assert sent == [
        {"event": "join", "data": "1"},
        {"event": "join", "data": "admin-room"},
    ]


def test_close_stops_channel_and_http_client() -> None:
    server = FakeServer([])
    center, _ = _center(server)
    closed: list[bool] = []

    class Transport:
        def send_json(self, data) -> None:
            pass

        def receive_json(self):
            return {"event": "pong"}

        def close(self) -> None:
            closed.append(True)

    channel = center.build_channel(Transport)
    channel.open()
    center.close()

    assert closed == [True]
    assert channel.connected is False
    assert center.api._http.is_closed


def test_unreadable_fetch_body_keeps_stale_list() -> None:
    server = FakeServer([_item(1)])
    center, toaster = _center(server)
    center.refresh()
    server.html_body = True

    assert center.refresh() is False
    center.handle_push({"message": "Someone sent you a message"})

    assert [n.id for n in center.store.notifications] == [1]
    assert [toast.title for toast in toaster.toasts] == ["Someone sent you a message"]


def test_unreadable_mark_read_body_shows_error_toast() -> None:
    visited: list[str] = []
    server = FakeServer([_item(1)])
    center, toaster = _center(server, visited=visited)
    center.refresh()
    server.html_body = True

    assert center.open_notification(1) is None
    assert visited == []
    assert center.store.unread_count == 1
    assert [toast.level for toast in toaster.toasts] == ["error"]


def test_custom_admin_role_alias_joins_admin_room_and_uses_admin_routes() -> None:
    visited: list[str] = []
    server = FakeServer([_item(1, type="CONTACT_FORM")])
    center, _ = _center(
        server,
        role="superuser",
        visited=visited,
        settings=ClientSettings(admin_role_alias="superuser"),
    )
    center.refresh()
    sent: list[dict] = []

    class Transport:
        def send_json(self, data) -> None:
            sent.append(data)

        def receive_json(self):
            return {"event": "pong"}

        def close(self) -> None:
            pass

    center.build_channel(Transport).open()

    assert sent == [
        {"event": "join", "data": "1"},
        {"event": "join", "data": "admin-room"},
    ]
    assert center.open_notification(1) == "/admin/messages"
    assert visited == ["/admin/messages"]
