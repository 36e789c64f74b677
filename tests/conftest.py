# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Backs the store with an in-memory mongomock client
# - Provides a TestClient wired to that store
# =============================================================================

import os
from datetime import datetime

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("MONGODB_URI", "mongodb://test-cluster.invalid:27017")
os.environ.setdefault("DB_NAME", "contenthub_test")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import mongomock
import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from app.config import settings
from app.main import app
from lib.mongo_client import MongoConnection, get_mongo_connection


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def mock_client():
    """In-memory MongoDB client."""
    return mongomock.MongoClient(tz_aware=True)


@pytest.fixture
def connection(mock_client):
    """Lazily-connected store handle backed by mongomock."""
    return MongoConnection(
        uri=settings.MONGODB_URI,
        database_name=settings.DB_NAME,
        client_factory=lambda uri, **kwargs: mock_client,
    )


@pytest.fixture
def db(mock_client):
    """Direct access to the test database for seeding and assertions."""
    return mock_client[settings.DB_NAME]


@pytest.fixture
def unreachable_connection():
    """Store handle whose every connect attempt times out."""

    def refuse(uri, **kwargs):
        raise ServerSelectionTimeoutError("test-cluster.invalid:27017: connection refused")

    return MongoConnection(
        uri=settings.MONGODB_URI,
        database_name=settings.DB_NAME,
        client_factory=refuse,
    )


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def client(connection):
    """TestClient with the store dependency pointed at mongomock."""
    app.dependency_overrides[get_mongo_connection] = lambda: connection
    with TestClient(app) as tc:
        yield tc
    app.dependency_overrides.clear()


@pytest.fixture
def offline_client(unreachable_connection):
    """TestClient whose database can never be reached."""
    app.dependency_overrides[get_mongo_connection] = lambda: unreachable_connection
    with TestClient(app) as tc:
        yield tc
    app.dependency_overrides.clear()


# =============================================================================
# Sample Data
# =============================================================================

@pytest.fixture
def sample_podcasts():
    """Podcasts deliberately inserted out of date order."""
    return [
        {"title": "Middle Episode", "date": datetime(2024, 2, 1), "duration": 1800},
        {"title": "Newest Episode", "date": datetime(2024, 3, 1), "duration": 2400, "tags": ["design"]},
        {"title": "Oldest Episode", "date": datetime(2024, 1, 1), "duration": 1200},
    ]


@pytest.fixture
def sample_videos():
    """Videos with string dates, as some ingestion runs store them."""
    return [
        {"title": "Launch Talk", "date": "2023-05-10", "url": "https://videos.example.com/launch"},
        {"title": "Year in Review", "date": "2023-12-20", "url": "https://videos.example.com/review"},
    ]


@pytest.fixture
def valid_contact():
    """A contact form body that passes validation."""
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "message": "Loved the last episode!",
    }
