"""Pytest configuration and fixtures."""

import os

# Cheap hashes and a non-production environment before any settings are read
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from sneakervault.database import Base, get_db
from sneakervault.main import app


class AuthUser(dict):
    """Dict of the signup payload that also stores the created user's id."""

    def __init__(self, *args, user_id: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/sneakervault", "/sneakervault_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

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
def other_client(client):
    """A second browser sharing the same app and database."""
    with TestClient(app) as test_client:
        yield test_client


def _signup(test_client: TestClient, **overrides) -> AuthUser:
    payload = {"email": "test@example.com", "password": "testpass123", "username": "tester"}
    payload.update(overrides)
    response = test_client.post("/api/signup", json=payload)
    assert response.status_code == 201, response.text
    return AuthUser(payload, user_id=response.json()["user"]["id"])


@pytest.fixture
def auth_user(client):
    """Sign up through the API; ``client`` then carries the session cookie."""
    return _signup(client)


@pytest.fixture
def signup():
    """Helper that signs up through the API on any client."""
    return _signup
