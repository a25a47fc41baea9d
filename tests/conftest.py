"""
Test configuration and fixtures for the Codeed API.

Every test gets its own in-memory SQLite database, so nothing leaks between
tests and no external database is needed.
"""

import os
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Importing codeed.main builds the module-level app; keep it off postgres and disk.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("LOG_TO_FILE", "false")

from codeed.features.users.models.user import User, UserRole  # noqa: E402
from codeed.main import create_app  # noqa: E402
from codeed.platform.config import Settings  # noqa: E402
from codeed.platform.db.session import Database  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=TEST_DATABASE_URL,
        AUTO_CREATE_TABLES=True,
        ACCESS_TOKEN_SECRET="test-access-secret",
        REFRESH_TOKEN_SECRET="test-refresh-secret",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        LOG_TO_FILE=False,
    )


@pytest.fixture
def test_app(settings):
    """Create a FastAPI application bound to the test settings."""
    return create_app(settings)


@pytest.fixture
def client(test_app) -> Generator[TestClient, None, None]:
    """
    Test client for making HTTP requests. Entering the context runs the
    lifespan, which creates the tables.
    """
    with TestClient(test_app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def database(settings):
    database = Database.from_settings(settings)
    await database.create_all()
    yield database
    await database.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture
async def user(db_session) -> User:
    user = User(
        telegram_username="john_doe",
        username="john",
        first_name="John",
        last_name="Doe",
        role=UserRole.student,
    )
    db_session.add(user)
    await db_session.commit()
    return user


@pytest.fixture
def create_user(client):
    """Create a user through the API and return its JSON representation."""

    def _create_user(telegram_username: str = "john_doe", **fields) -> dict:
        payload = {"telegram_username": telegram_username, "username": telegram_username, **fields}
        response = client.post("/api/v1/users", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create_user
