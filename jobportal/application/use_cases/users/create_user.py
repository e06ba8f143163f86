"""Use case for creating users."""

from sqlalchemy.orm import Session

from jobportal.domain.entities import ROLE_ADMIN, ROLE_EMPLOYER, ROLE_JOB_SEEKER, User
from jobportal.infrastructure.repositories import RoleRepository, UserRepository
from jobportal.infrastructure.security import get_password_hash
from jobportal.utils import now_utc

ROLE_NAMES = {
    ROLE_ADMIN: "Administrator",
    ROLE_EMPLOYER: "Employer",
    ROLE_JOB_SEEKER: "Job Seeker",
}


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_alias: str = ROLE_JOB_SEEKER,
) -> User:
    """Create a new user ensuring unique email addresses."""

    alias = role_alias.lower()
    if alias not in ROLE_NAMES:
        raise ValueError(f"Unknown role '{role_alias}'")

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise ValueError("Email address is already registered")

    role = RoleRepository(session).get_or_create(alias=alias, name=ROLE_NAMES[alias])
    user = User(
        id=None,
        role=role,
        name=name,
        email=email,
        password=get_password_hash(password),
        is_active=True,
        created_at=now_utc(),
    )
    return repository.create(user)
