# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets up environment variables before any application import and provides
# the repositories, settings and HTTP client used across the test modules.
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# Settings read the environment when constructed

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("TIMEZONE", "UTC")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("FRONTEND_ORIGIN", "http://localhost:3000")

import mongomock
import pytest
from fastapi.testclient import TestClient

from geomarker.core.config import Settings, reset_settings
from geomarker.infrastructure.db.mongo_marker_repository import MongoMarkerRepository
from geomarker.infrastructure.memory.memory_marker_repository import InMemoryMarkerRepository
from geomarker.main import create_application


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def _fresh_settings():
    """Make every test read settings from the current environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings():
    """Settings built from the test environment."""
    return Settings()


@pytest.fixture
def memory_repository():
    """Empty in-memory marker repository."""
    return InMemoryMarkerRepository()


@pytest.fixture
def mongo_repository():
    """Marker repository on a mongomock collection with indexes in place."""
    client = mongomock.MongoClient()
    repository = MongoMarkerRepository(client["geomarker_test"]["markers"])
    repository.ensure_indexes()
    yield repository
    client.close()


@pytest.fixture(params=["memory", "mongo"])
def repository(request):
    """Each marker repository implementation in turn."""
    if request.param == "memory":
        return request.getfixturevalue("memory_repository")
    return request.getfixturevalue("mongo_repository")


@pytest.fixture
def client(settings, memory_repository):
    """HTTP client for an application backed by the in-memory repository."""
    app = create_application(settings, repository=memory_repository)
    with TestClient(app) as test_client:
        yield test_client
