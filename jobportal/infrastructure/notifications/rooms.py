"""Naming rules for push channel rooms."""

from __future__ import annotations

from jobportal.config import get_settings
from jobportal.domain.entities import User


def user_room(user_id: int | str) -> str:
    """Return the room that carries events for a single identity."""

    return str(user_id)


def admin_room() -> str:
    """Return the room shared by every connected administrator."""

    return get_settings().admin_room


def allowed_rooms(user: User) -> set[str]:
    """Return the rooms ``user`` may join on the push channel."""

    rooms = {user_room(user.id)}
    if user.is_admin(get_settings().admin_role_alias):
        rooms.add(admin_room())
    return rooms


__all__ = ["user_room", "admin_room", "allowed_rooms"]
