"""Identity of the logged-in user as seen by the client."""

from __future__ import annotations

from dataclasses import dataclass

from jobportal.domain.entities import ROLE_ADMIN


@dataclass(frozen=True)
class ClientSession:
    """Identity, role and bearer token supplied by the login flow."""

    identity: str
    role: str
    token: str

    def is_admin(self, alias: str = ROLE_ADMIN) -> bool:
        """Return ``True`` when the session's role matches the admin ``alias``."""

        return self.role.lower() == alias.lower()

    def rooms(
        self, admin_room: str = "admin-room", *, admin_role_alias: str = ROLE_ADMIN
    ) -> list[str]:
        """Rooms to join on the push channel, own identity first."""

        rooms = [self.identity]
        if self.is_admin(admin_role_alias):
            rooms.append(admin_room)
        return rooms


__all__ = ["ClientSession"]
