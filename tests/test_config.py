# =============================================================================
# tests/test_config.py - Settings and DI Container Tests
# =============================================================================

import pytest

from geomarker.application.services.marker_service import MarkerService
from geomarker.core.config import Settings, get_settings
from geomarker.di.container import DIContainer
from geomarker.domain.exceptions import StoreError
from geomarker.domain.repositories.marker_repository import MarkerRepository
from geomarker.infrastructure.db.mongo_marker_repository import MongoMarkerRepository
from geomarker.infrastructure.memory.memory_marker_repository import InMemoryMarkerRepository


class TestSettings:
    """Environment-derived settings."""

    def test_defaults(self, monkeypatch):
        for name in ("MONGODB_URI", "MONGO_URI", "PORT", "RATE_LIMIT", "MAX_BODY_BYTES", "DB_NAME"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.mongo_uri == "mongodb://localhost:27017"
        assert settings.mongo_database_name == "geomarker"
        assert settings.port == 3000
        assert settings.rate_limit == "100/minute"
        assert settings.max_body_bytes == 10240

    def test_mongodb_uri_wins_over_mongo_uri(self, monkeypatch):
        monkeypatch.setenv("MONGODB_URI", "mongodb://primary:27017")
        monkeypatch.setenv("MONGO_URI", "mongodb://fallback:27017")

        assert Settings().mongo_uri == "mongodb://primary:27017"

    def test_mongo_uri_fallback(self, monkeypatch):
        monkeypatch.delenv("MONGODB_URI", raising=False)
        monkeypatch.setenv("MONGO_URI", "mongodb://fallback:27017")

        assert Settings().mongo_uri == "mongodb://fallback:27017"

    def test_cors_origins_split(self, monkeypatch):
        monkeypatch.setenv("FRONTEND_ORIGIN", "http://a.example, http://b.example")

        assert Settings().cors_origins == ["http://a.example", "http://b.example"]

    def test_rate_limit_toggle(self, monkeypatch):
        monkeypatch.setenv("RATE_LIMIT_ENABLED", "no")

        assert Settings().rate_limit_enabled is False

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestDIContainer:
    """Repository selection and lifecycle."""

    def test_memory_backend(self, monkeypatch):
        monkeypatch.setenv("STORAGE_BACKEND", "memory")

        container = DIContainer(Settings())

        assert isinstance(container.get(MarkerRepository), InMemoryMarkerRepository)
        assert isinstance(container.get(MarkerService), MarkerService)

    def test_mongo_backend(self, monkeypatch):
        monkeypatch.setenv("STORAGE_BACKEND", "mongo")
        monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017")

        container = DIContainer(Settings())
        try:
            assert isinstance(container.get(MarkerRepository), MongoMarkerRepository)
        finally:
            container.shutdown()

    def test_unknown_backend(self, monkeypatch):
        monkeypatch.setenv("STORAGE_BACKEND", "sqlite")

        with pytest.raises(ValueError, match="STORAGE_BACKEND"):
            DIContainer(Settings())

    def test_explicit_repository_wins(self, monkeypatch, memory_repository):
        monkeypatch.setenv("STORAGE_BACKEND", "mongo")

        container = DIContainer(Settings(), repository=memory_repository)

        assert container.get(MarkerRepository) is memory_repository

    def test_missing_registration(self, settings):
        with pytest.raises(ValueError, match="No registration"):
            DIContainer(settings).get("postgres_client")

    def test_startup_propagates_store_errors(self, settings):
        class BrokenRepository(InMemoryMarkerRepository):
            def ensure_indexes(self):
                raise StoreError("failed to prepare marker indexes", cause=TimeoutError())

        with pytest.raises(StoreError):
            DIContainer(settings, repository=BrokenRepository()).startup()

    def test_startup_prepares_mongo_indexes(self, settings, mongo_repository):
        mongo_repository._collection.drop_indexes()

        DIContainer(settings, repository=mongo_repository).startup()

        assert "position_unique" in mongo_repository._collection.index_information()
