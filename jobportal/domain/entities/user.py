"""Domain entity representing a portal user."""

from dataclasses import dataclass
from datetime import datetime

from .role import ROLE_ADMIN, Role


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: Role
    name: str
    email: str
    password: str
    is_active: bool
    created_at: datetime | None = None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.alias.lower() == alias.lower()

    def is_admin(self, alias: str = ROLE_ADMIN) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(alias)

    @property
    def identity(self) -> str:
        """Reference used both as data owner key and as push channel room."""

        return str(self.id)


__all__ = ["User"]
