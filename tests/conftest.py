# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a fresh store and test client per test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SEED_DEMO_POSTS", "false")

from datetime import datetime, timezone
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.models import Author, Post
from core.services import PostStore


SAMPLE_UUID = "ed8729be-f33e-4395-b1c0-f5673668f89e"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings with demo seeding disabled, so the feed starts empty."""
    return Settings(ENVIRONMENT="development", SEED_DEMO_POSTS=False)


@pytest.fixture
def store():
    """An empty post store."""
    return PostStore()


@pytest.fixture
def client(test_settings, store):
    """Test client for an app serving the `store` fixture."""
    app = create_app(app_settings=test_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def author():
    """Sample author."""
    return Author(handle="mathieu")


@pytest.fixture
def sample_post(author):
    """Sample post with a fixed id and timestamp."""
    return Post.new(
        "s",
        "c",
        author,
        datetime(2024, 1, 1, tzinfo=timezone.utc),
        UUID(SAMPLE_UUID),
    )


@pytest.fixture
def sample_payload():
    """JSON body a client would send to POST /post."""
    return (
        '{"summary":"s","contents":"c","author_handle":"mathieu",'
        f'"date_time":"2024-01-01T00:00:00Z","uuid":"{SAMPLE_UUID}"}}'
    )
