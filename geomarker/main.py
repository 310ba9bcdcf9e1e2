"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.

Startup: build DI container → prepare marker store indexes
Shutdown: close the marker store connection
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from geomarker import __version__
from geomarker.api.exception_handlers import register_exception_handlers
from geomarker.api.v1 import marker_router
from geomarker.api.v1.dependencies import get_marker_service
from geomarker.application.services.marker_service import MarkerService
from geomarker.core.config import Settings, get_settings
from geomarker.core.limiter import create_limiter, rate_limit_exceeded_handler
from geomarker.core.logging_config import configure_logging
from geomarker.core.middleware import BodySizeLimitMiddleware, SecurityHeadersMiddleware
from geomarker.di.container import DIContainer
from geomarker.domain.repositories.marker_repository import MarkerRepository

logger = logging.getLogger(__name__)

SERVICE_NAME = "Geomarker API"


def create_application(
    settings: Optional[Settings] = None,
    repository: Optional[MarkerRepository] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - DI container (storage connection, repository, services)
    - Security headers, CORS, rate limiting and body size middleware
    - API route registration and exception handlers
    - Lifespan handler preparing and releasing the marker store

    Args:
        settings: Settings to use (environment-derived settings when omitted)
        repository: Marker repository overriding the configured backend

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    configure_logging(settings)

    container = DIContainer(settings, repository=repository)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Prepare the marker store on startup, release it on shutdown."""
        logger.info("Starting %s (storage backend: %s)", SERVICE_NAME, settings.storage_backend)
        try:
            container.startup()
        except Exception as e:
            logger.error("Marker store unavailable, aborting startup: %s", e)
            raise

        yield

        logger.info("Shutting down %s, releasing resources", SERVICE_NAME)
        container.shutdown()
        logger.info("%s stopped", SERVICE_NAME)

    # Create FastAPI app
    application = FastAPI(
        title=SERVICE_NAME,
        description="Store geographic markers (a position plus short text) and list them.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.container = container

    # Rate limiting (per client IP)
    application.state.limiter = create_limiter(settings)
    application.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # Middleware: the last one added runs first
    application.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)
    application.add_middleware(SlowAPIMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )
    application.add_middleware(SecurityHeadersMiddleware)

    register_exception_handlers(application)

    # Register API routers
    application.include_router(marker_router, prefix="/markers")

    @application.get("/")
    async def root():
        """Root endpoint - service information."""
        return {
            "status": "running",
            "service": SERVICE_NAME,
            "version": __version__,
            "docs": "/docs",
        }

    @application.get("/health")
    def health(service: MarkerService = Depends(get_marker_service)):
        """Health check endpoint."""
        if service.storage_available():
            return {"status": "healthy", "storage": "up"}
        return JSONResponse(status_code=503, content={"status": "unhealthy", "storage": "down"})

    return application
