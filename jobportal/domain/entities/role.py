"""Domain entity representing a user role."""

from dataclasses import dataclass

ROLE_ADMIN = "admin"
ROLE_EMPLOYER = "employer"
ROLE_JOB_SEEKER = "job_seeker"


@dataclass
class Role:
    """Core attributes describing a role that can be assigned to a user."""

    id: int
    name: str
    alias: str


__all__ = ["Role", "ROLE_ADMIN", "ROLE_EMPLOYER", "ROLE_JOB_SEEKER"]
