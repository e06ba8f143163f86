"""Unit tests for the room based connection manager and publisher."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

from jobportal.domain.entities import Notification, NotificationType, RelatedModel
from jobportal.infrastructure.notifications import (
    NOTIFICATION_EVENT,
    NotificationPublisher,
    RoomConnectionManager,
    serialize_notification,
)


class FakeWebSocket:
    def __init__(self, *, fail: bool = False) -> None:
        self.accepted = False
        self.sent: list[dict] = []
        self.fail = fail

    async def accept(self) -> None:
        self.accepted = True

    async def send_json(self, data) -> None:
        if self.fail:
            raise RuntimeError("connection closed")
        self.sent.append(data)


def test_emit_targets_only_room_members() -> None:
    manager = RoomConnectionManager()
    alice, bob = FakeWebSocket(), FakeWebSocket()

    async def scenario() -> int:
        await manager.connect(alice)
        await manager.connect(bob)
        manager.join("1", alice)
        manager.join("2", bob)
        return await manager.emit("1", "notification", {"message": "hello"})

    delivered = asyncio.run(scenario())

    assert alice.accepted and bob.accepted
    assert delivered == 1
    assert alice.sent == [{"event": "notification", "data": {"message": "hello"}}]
    assert bob.sent == []


def test_failed_send_drops_connection_from_every_room() -> None:
    manager = RoomConnectionManager()
    healthy, broken = FakeWebSocket(), FakeWebSocket(fail=True)

    async def scenario() -> int:
        await manager.connect(healthy)
        await manager.connect(broken)
        for websocket in (healthy, broken):
            manager.join("admin-room", websocket)
        manager.join("9", broken)
        return await manager.emit("admin-room", "notification", {"message": "x"})

    delivered = asyncio.run(scenario())

    assert delivered == 1
    assert manager.member_count("admin-room") == 1
    assert manager.member_count("9") == 0
    assert manager.rooms_of(broken) == set()


def test_leave_and_disconnect_discard_empty_rooms() -> None:
    manager = RoomConnectionManager()
    websocket = FakeWebSocket()
    asyncio.run(manager.connect(websocket))
    manager.join("1", websocket)
    manager.join("admin-room", websocket)

    manager.leave("1", websocket)
    assert manager.rooms_of(websocket) == {"admin-room"}
    assert manager.member_count("1") == 0

    manager.disconnect(websocket)
    assert manager.member_count("admin-room") == 0
    assert asyncio.run(manager.emit("admin-room", "notification")) == 0


def _notification() -> Notification:
    return Notification(
        id=5,
        recipient_id=3,
        sender_id=None,
        type=NotificationType.JOB_ALERT,
        message="New job",
        related_id="job42",
        related_model=RelatedModel.JOB,
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )


def test_serialize_notification_uses_wire_keys() -> None:
    payload = serialize_notification(_notification())

    assert payload == {
        "id": 5,
        "recipientId": 3,
        "senderId": None,
        "type": "JOB_ALERT",
        "message": "New job",
        "relatedId": "job42",
        "relatedModel": "Job",
        "isRead": False,
        "createdAt": "2024-05-01T12:00:00+00:00",
        "readAt": None,
    }


def test_publisher_schedules_on_running_loop() -> None:
    manager = RoomConnectionManager()
    publisher = NotificationPublisher(manager)
    websocket = FakeWebSocket()

    async def scenario() -> None:
        await manager.connect(websocket)
        manager.join("3", websocket)
        publisher.dispatch(_notification())
        await asyncio.sleep(0)

    asyncio.run(scenario())

    assert websocket.sent == [
        {"event": NOTIFICATION_EVENT, "data": serialize_notification(_notification())}
    ]


def test_publisher_without_event_loop_skips_delivery() -> None:
    manager = RoomConnectionManager()
    publisher = NotificationPublisher(manager)

    publisher.dispatch(_notification())

    assert manager.member_count("3") == 0
