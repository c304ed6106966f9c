"""
Pytest configuration and fixtures for backend tests.
"""

import os

# Must be set before the application modules read settings
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from portfolio_api.main import app
from portfolio_api.models import Base
from shared.infrastructure.db import get_db
from shared.security.auth import sign_jwt


OWNER_ID = "owner-alice"
OTHER_OWNER_ID = "owner-bob"


# SQLite in-memory database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Uses SQLite in-memory for isolation.
    """
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database session override.
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


def bearer(owner_id: str) -> dict[str, str]:
    """Authorization header for owner_id."""
    return {"Authorization": f"Bearer {sign_jwt({'sub': owner_id})}"}


@pytest.fixture
def auth_headers():
    """Headers of the primary test owner."""
    return bearer(OWNER_ID)


@pytest.fixture
def other_auth_headers():
    """Headers of a second owner, for cross-owner checks."""
    return bearer(OTHER_OWNER_ID)
