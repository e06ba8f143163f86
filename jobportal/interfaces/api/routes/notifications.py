"""Endpoints and websocket handler for realtime notifications."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobportal.application.use_cases.notifications import (
    NotificationNotFoundError,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    notify_admins,
    notify_user,
)
from jobportal.domain.entities import Notification, User
from jobportal.infrastructure.database import SessionLocal, get_db
from jobportal.infrastructure.notifications import allowed_rooms, notification_manager
from jobportal.infrastructure.repositories import UserRepository
from jobportal.interfaces.api.dependencies import (
    get_current_active_user,
    require_admin,
    resolve_current_user,
)
from jobportal.interfaces.api.schemas import (
    MarkAllReadResponse,
    NotificationCreate,
    NotificationListResponse,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)

_POLICY_VIOLATION = 1008
_INTERNAL_ERROR = 1011


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id,
        recipient_id=notification.recipient_id,
        sender_id=notification.sender_id,
        type=notification.type,
        message=notification.message,
        related_id=notification.related_id,
        related_model=notification.related_model,
        is_read=notification.is_read,
        created_at=notification.created_at,
        read_at=notification.read_at,
    )


@router.get("", response_model=NotificationListResponse)
def get_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationListResponse:
    """Return the newest notifications of the caller and their unread count."""

    feed = list_notifications(db, current_user)
    return NotificationListResponse(
        notifications=[_notification_to_schema(n) for n in feed.notifications],
        unread_count=feed.unread_count,
    )


@router.put("/read-all", response_model=MarkAllReadResponse)
def read_all_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MarkAllReadResponse:
    """Mark every notification of the caller as read."""

    updated = mark_all_notifications_read(db, current_user)
    return MarkAllReadResponse(message="All marked as read", updated=updated)


@router.put("/{notification_id}/read", response_model=NotificationRead)
def read_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    """Mark one notification of the caller as read."""

    try:
        notification = mark_notification_read(db, current_user, notification_id)
    except NotificationNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return _notification_to_schema(notification)


@router.post(
    "",
    response_model=list[NotificationRead],
    status_code=status.HTTP_201_CREATED,
)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> list[NotificationRead]:
    """Emit a notification to one user or to every administrator."""

    if payload.audience == "admins":
        created = notify_admins(
            db,
            sender_id=current_user.id,
            type=payload.type,
            message=payload.message,
            related_id=payload.related_id,
            related_model=payload.related_model,
        )
    else:
        if UserRepository(db).get(payload.recipient_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Recipient not found"
            )
        created = [
            notify_user(
                db,
                recipient_id=payload.recipient_id,
                sender_id=current_user.id,
                type=payload.type,
                message=payload.message,
                related_id=payload.related_id,
                related_model=payload.related_model,
            )
        ]
    return [_notification_to_schema(notification) for notification in created]


async def _send_error(websocket: WebSocket, message: str) -> None:
    await websocket.send_json({"event": "error", "data": {"message": message}})


async def _handle_frame(
    websocket: WebSocket, message: Any, *, user: User, rooms: set[str]
) -> None:
    if not isinstance(message, dict):
        await _send_error(websocket, "Frames must be JSON objects")
        return

    event = message.get("event")
    data = message.get("data")

    if event == "ping":
        await websocket.send_json({"event": "pong"})
    elif event == "join":
        room = str(data) if data is not None else ""
        if room not in rooms:
            logger.warning("User %s tried to join room %r", user.id, room)
            await _send_error(websocket, f"Not allowed to join room '{room}'")
            return
        notification_manager.join(room, websocket)
        await websocket.send_json({"event": "joined", "data": room})
    elif event == "leave":
        room = str(data) if data is not None else ""
        notification_manager.leave(room, websocket)
        await websocket.send_json({"event": "left", "data": room})
    else:
        await _send_error(websocket, f"Unknown event '{event}'")


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint that pushes notification events to joined rooms."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=_POLICY_VIOLATION)
        return

    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
    except HTTPException:
        await websocket.close(code=_POLICY_VIOLATION)
        return
    except SQLAlchemyError:
        logger.exception("Could not resolve the push channel user")
        await websocket.close(code=_INTERNAL_ERROR)
        return
    finally:
        session.close()

    if not user.is_active:
        await websocket.close(code=_POLICY_VIOLATION)
        return

    rooms = allowed_rooms(user)
    await notification_manager.connect(websocket)
    logger.info("User %s connected to the push channel", user.id)
    try:
        while True:
            try:
                message = await websocket.receive_json()
            except (ValueError, KeyError):
                await _send_error(websocket, "Malformed frame")
                continue
            await _handle_frame(websocket, message, user=user, rooms=rooms)
    except WebSocketDisconnect:
        logger.info("User %s disconnected from the push channel", user.id)
    finally:
        notification_manager.disconnect(websocket)
