# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Binds an in-memory MongoDB (mongomock-motor) in place of a real server
# - Provides a TestClient that skips the startup connection
# =============================================================================

import asyncio
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/tweteroo_test")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from lib.mongo_client import Database


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def database():
    """Fresh in-memory database bound as the shared handle."""
    db = AsyncMongoMockClient()["tweteroo_test"]
    Database.bind(db)
    asyncio.run(Database.ensure_indexes())
    yield db
    Database._client = None
    Database._database = None


@pytest.fixture
def client(database):
    """
    API client backed by the in-memory database.

    Not used as a context manager, so the lifespan (real connection) never runs.
    """
    from app.main import app

    return TestClient(app)


@pytest.fixture
def signed_up(client):
    """Sign up a user and return its handle."""
    def _sign_up(username: str, avatar: str | None = None) -> str:
        body = {"username": username}
        if avatar is not None:
            body["avatar"] = avatar
        response = client.post("/sign-up", json=body)
        assert response.status_code == 201
        return username

    return _sign_up


@pytest.fixture
def sample_tweet_payload():
    """A valid POST /tweets body."""
    return {"username": "ana", "tweet": "hello world"}
