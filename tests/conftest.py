"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from orchard import models  # noqa: F401
from orchard.config import Settings, get_settings
from orchard.database import Base, engine_options, get_db
from orchard.main import app


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id, email and raw token."""

    def __init__(self, *args, user_id: int | None = None, email: str = "", token: str = "", **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email
        self.token = token


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/orchard", "/orchard_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(SQLALCHEMY_DATABASE_URL, **engine_options(SQLALCHEMY_DATABASE_URL))
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_settings(client):
    """Swap the application settings for the rest of the test."""

    def apply(**overrides) -> Settings:
        settings = get_settings().model_copy(update=overrides)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    return apply


def _register(client, email: str, password: str = "testpass123", name: str | None = None):
    """Register a user through the API and return auth headers for them."""
    response = client.post(
        "/api/users",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201
    data = response.json()
    token = data["access_token"]

    return AuthHeaders(
        {"Authorization": f"Bearer {token}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
        token=token,
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return _register(client, "test@example.com", name="Test User")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return _register(client, "other@example.com", name="Other User")


@pytest.fixture
def open_session():
    """Factory for extra sessions, as used by concurrent requests."""
    sessions = []

    def make_session():
        session = TestingSessionLocal()
        sessions.append(session)
        return session

    yield make_session

    for session in sessions:
        session.close()
