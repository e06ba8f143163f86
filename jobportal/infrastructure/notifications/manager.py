"""Connection management helpers for the notification push channel."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, DefaultDict, Dict, Set

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class RoomConnectionManager:
    """Manage active websocket connections grouped by room.

    A connection may belong to several rooms at once (its own identity room
    and, for administrators, the shared admin room).
    """

    def __init__(self) -> None:
        self._rooms: DefaultDict[str, Set[WebSocket]] = defaultdict(set)
        self._memberships: Dict[WebSocket, Set[str]] = {}

    async def connect(self, websocket: WebSocket) -> None:
        """Accept the websocket connection and start tracking it."""

        await websocket.accept()
        self._memberships[websocket] = set()

    def join(self, room: str, websocket: WebSocket) -> None:
        """Add ``websocket`` to ``room``."""

        self._rooms[room].add(websocket)
        self._memberships.setdefault(websocket, set()).add(room)
        logger.debug("Connection joined room %s (%d members)", room, len(self._rooms[room]))

    def leave(self, room: str, websocket: WebSocket) -> None:
        """Remove ``websocket`` from ``room`` and drop the room once empty."""

        connections = self._rooms.get(room)
        if connections is not None:
            connections.discard(websocket)
            if not connections:
                self._rooms.pop(room, None)
        rooms = self._memberships.get(websocket)
        if rooms is not None:
            rooms.discard(room)

    def disconnect(self, websocket: WebSocket) -> None:
        """Forget ``websocket`` and remove it from every room it joined."""

        for room in list(self._memberships.pop(websocket, set())):
            self.leave(room, websocket)

    def rooms_of(self, websocket: WebSocket) -> set[str]:
        return set(self._memberships.get(websocket, set()))

    def member_count(self, room: str) -> int:
        return len(self._rooms.get(room, ()))

    async def emit(self, room: str, event: str, data: Any = None) -> int:
        """Send ``event`` to every connection in ``room``.

        Delivery is fire-and-forget: connections that fail are disconnected
        and nothing is retried. Returns the number of successful sends.
        """

        message: dict[str, Any] = {"event": event}
        if data is not None:
            message["data"] = data

        delivered = 0
        for connection in list(self._rooms.get(room, set())):
            try:
                await connection.send_json(message)
            except Exception:  # noqa: BLE001 - any transport failure drops the socket
                logger.warning("Dropping connection after failed send to room %s", room)
                self.disconnect(connection)
            else:
                delivered += 1
        return delivered


notification_manager = RoomConnectionManager()


__all__ = ["RoomConnectionManager", "notification_manager"]
