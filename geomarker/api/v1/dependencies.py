"""
Dependency Accessors
====================

FastAPI dependencies that resolve services from the application's DI container.
The container is built by create_application() and kept on ``app.state``.
"""
from fastapi import Request

from geomarker.application.services.marker_service import MarkerService
from geomarker.di.container import DIContainer


def get_container(request: Request) -> DIContainer:
    """
    Get the DI container of the running application.

    Returns:
        DIContainer instance with all dependencies registered
    """
    return request.app.state.container


def get_marker_service(request: Request) -> MarkerService:
    """
    Get marker service instance (singleton per application).

    Returns:
        MarkerService instance
    """
    return get_container(request).get(MarkerService)
