"""Shared fixtures: a temporary SQLite database and authenticated users."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "jobportal_notifications_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"

from jobportal.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from fastapi.testclient import TestClient  # noqa: E402

from jobportal.application.use_cases.users import create_user  # noqa: E402
from jobportal.domain.entities import ROLE_JOB_SEEKER, User  # noqa: E402
from jobportal.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from jobportal.infrastructure.models import UserModel  # noqa: E402
from jobportal.infrastructure.security import create_access_token  # noqa: E402
from jobportal.main import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    """Return a test client bound to a fresh application instance."""

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session):
    """Factory creating users with a known password."""

    def _make(email: str, *, role: str = ROLE_JOB_SEEKER, name: str = "Test User") -> User:
        return create_user(
            db_session,
            name=name,
            email=email,
            password="Secret123",
            role_alias=role,
        )

    return _make


@pytest.fixture()
def deactivate(db_session):
    def _deactivate(user: User) -> None:
        db_session.query(UserModel).filter_by(id=user.id).update({"is_active": False})
        db_session.commit()

    return _deactivate


@pytest.fixture()
def token_for():
    """Return a function issuing a bearer token for a user."""

    def _token_for(user: User) -> str:
        return create_access_token(data={"sub": user.identity, "role": user.role.alias})

    return _token_for


@pytest.fixture()
def auth_headers(token_for):
    def _auth_headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_for(user)}"}

    return _auth_headers
