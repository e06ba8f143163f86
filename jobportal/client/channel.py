"""Client side of the notification push channel."""

from __future__ import annotations

import json
import logging
import threading
import time
from collections.abc import Callable, Sequence
from typing import Any, Protocol
from urllib.parse import urlencode, urlsplit, urlunsplit

from websockets.exceptions import WebSocketException
from websockets.sync.client import connect as websocket_connect

from .errors import NetworkFailure

logger = logging.getLogger(__name__)

NotificationHandler = Callable[[dict[str, Any]], None]


class PushTransport(Protocol):
    """Bidirectional JSON frame transport."""

    def send_json(self, data: Any) -> None:
        ...

    def receive_json(self) -> Any:
        ...

    def close(self) -> None:
        ...


def push_channel_url(server_url: str, token: str) -> str:
    """Return the websocket URL of the push channel for ``server_url``."""

    parts = urlsplit(server_url.rstrip("/"))
    scheme = {"http": "ws", "https": "wss"}.get(parts.scheme, parts.scheme)
    path = f"{parts.path}/notifications/ws"
    return urlunsplit((scheme, parts.netloc, path, urlencode({"token": token}), ""))


class WebSocketTransport:
    """:class:`PushTransport` backed by a ``websockets`` client connection."""

    def __init__(self, url: str, *, open_timeout: float = 10.0) -> None:
        try:
            self._connection = websocket_connect(url, open_timeout=open_timeout)
        except (OSError, TimeoutError, WebSocketException) as exc:
            raise NetworkFailure(f"Could not open push channel: {exc}") from exc

    def send_json(self, data: Any) -> None:
        try:
            self._connection.send(json.dumps(data))
        except (OSError, WebSocketException) as exc:
            raise NetworkFailure(f"Push channel send failed: {exc}") from exc

    def receive_json(self) -> Any:
        try:
            raw = self._connection.recv()
        except (OSError, WebSocketException) as exc:
            raise NetworkFailure(f"Push channel closed: {exc}") from exc
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Ignoring non-JSON push frame: %.200r", raw)
            return None

    def close(self) -> None:
        self._connection.close()


class PushChannel:
    """Keep a push channel open, joined to the client's rooms.

    ``notification`` frames are handed to ``on_notification``. When the
    transport fails the channel reconnects, joins its rooms again and calls
    ``on_reconnect``; events emitted while disconnected are not replayed.
    """

    def __init__(
        self,
        connect: Callable[[], PushTransport],
        rooms: Sequence[str],
        *,
        on_notification: NotificationHandler,
        on_reconnect: Callable[[], None] | None = None,
        reconnect_delay: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._connect = connect
        self._rooms = list(rooms)
        self._on_notification = on_notification
        self._on_reconnect = on_reconnect
        self._reconnect_delay = reconnect_delay
        self._sleep = sleep
        self._transport: PushTransport | None = None
        self._stop = threading.Event()
        self.joined_rooms: set[str] = set()

    @property
    def connected(self) -> bool:
        return self._transport is not None

    def open(self) -> None:
        """Connect and request membership of every room."""

        self._transport = self._connect()
        self.joined_rooms.clear()
        for room in self._rooms:
            self._transport.send_json({"event": "join", "data": room})

    def process_next(self) -> str | None:
        """Receive and handle one frame, returning its event name."""

        if self._transport is None:
            raise NetworkFailure("Push channel is not connected")

        frame = self._transport.receive_json()
        if not isinstance(frame, dict):
            logger.warning("Ignoring malformed push frame: %r", frame)
            return None

        event = frame.get("event")
        data = frame.get("data")
        if event == "notification":
            try:
                self._on_notification(data if isinstance(data, dict) else {})
            except Exception:  # noqa: BLE001 - a failing handler must not stop the channel
                logger.exception("Notification handler failed")
        elif event == "joined":
            self.joined_rooms.add(str(data))
        elif event == "left":
            self.joined_rooms.discard(str(data))
        elif event == "error":
            logger.warning("Push channel error: %s", data)
        return event

    def run(self) -> None:
        """Process frames until :meth:`close` is called, reconnecting on failure."""

        reconnecting = False
        while not self._stop.is_set():
            try:
                if self._transport is None:
                    self.open()
                    if reconnecting and self._on_reconnect is not None:
                        self._run_reconnect_hook()
                    reconnecting = False
                self.process_next()
            except NetworkFailure as exc:
                if self._stop.is_set():
                    break
                logger.warning(
                    "Push channel lost (%s), reconnecting in %.1fs", exc, self._reconnect_delay
                )
                self._drop_transport()
                reconnecting = True
                self._sleep(self._reconnect_delay)

    def _run_reconnect_hook(self) -> None:
        try:
            self._on_reconnect()
        except Exception:  # noqa: BLE001 - a failing handler must not stop the channel
            logger.exception("Reconnect handler failed")

    def close(self) -> None:
        """Stop :meth:`run` and close the underlying transport."""

        self._stop.set()
        self._drop_transport()

    def _drop_transport(self) -> None:
        transport, self._transport = self._transport, None
        self.joined_rooms.clear()
        if transport is not None:
            try:
                transport.close()
            except (OSError, WebSocketException):
                logger.debug("Ignoring error while closing push transport", exc_info=True)


__all__ = [
    "PushChannel",
    "PushTransport",
    "WebSocketTransport",
    "push_channel_url",
]
