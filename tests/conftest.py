"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Bearer tokens and auth headers
- Sample job payloads
"""

import os
from typing import Optional

# Settings are read at import time, so configure them before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["JSON_LOGS"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from jobtracker.core.database import Base, get_db  # noqa: E402
from jobtracker.core.security import create_access_token, get_password_hash  # noqa: E402
from jobtracker.models.user import User  # noqa: E402
from main import app  # noqa: E402


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _make_token(subject_id: str = "user-123", role: Optional[str] = "user") -> str:
    """Mint a token the built-in identity provider accepts"""
    claims = {"sub": subject_id}
    if role is not None:
        claims["role"] = role
    return create_access_token(claims)


@pytest.fixture
def auth_headers():
    """Headers for a caller with the 'user' role"""
    return {"Authorization": f"Bearer {_make_token('user-123', 'user')}"}


@pytest.fixture
def admin_headers():
    """Headers for a caller with the 'admin' role"""
    return {"Authorization": f"Bearer {_make_token('admin-1', 'admin')}"}


@pytest.fixture
def stored_user(db_session):
    """A user that exists in the users table"""
    user = User(
        id="stored-user-1",
        email="jane@example.com",
        hashed_password=get_password_hash("CorrectHorse1!"),
        role="user",
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "backend developer",
        "company": "abc",
        "location": "canada",
        "url": "http://www.abc.com",
        "description": "Entry level backend developer with 1 year experience needed",
        "level": "ENTRY_LEVEL",
        "mode": "FULL_TIME",
        "stage": "NOT_APPLIED",
        "date_posted": "2025-03-28",
        "active": True,
    }


@pytest.fixture
def token_factory():
    """Build tokens for arbitrary subjects and roles (role=None omits the claim)"""
    return _make_token
