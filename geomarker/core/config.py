# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/Berlin", "Asia/Shanghai")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Storage Configuration
        # "mongo" for MongoDB, "memory" for a process-local store (development only)
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "mongo").lower()

        # Database Configuration
        self.mongo_uri: Final[str] = (
            os.getenv("MONGODB_URI")
            or os.getenv("MONGO_URI")
            or "mongodb://localhost:27017"
        )
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "geomarker")
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
        )

        # Collection Names
        self.markers_collection: Final[str] = os.getenv("MARKERS_COLLECTION", "markers")

        # HTTP Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))

        # Cross-origin requests are accepted from a single frontend origin
        self.frontend_origin: Final[str] = os.getenv(
            "FRONTEND_ORIGIN",
            "http://localhost:3000"
        )

        # Rate Limiting Configuration (per client IP)
        self.rate_limit: Final[str] = os.getenv("RATE_LIMIT", "100/minute")
        self.rate_limit_enabled: Final[bool] = os.getenv(
            "RATE_LIMIT_ENABLED", "true"
        ).lower() in ("true", "1", "yes")

        # Request body size limit in bytes (10 KB)
        self.max_body_bytes: Final[int] = int(os.getenv("MAX_BODY_BYTES", "10240"))

    @property
    def cors_origins(self) -> List[str]:
        """Allowed CORS origins as a list (comma separated values are accepted)."""
        return [origin.strip() for origin in self.frontend_origin.split(",") if origin.strip()]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
