"""
API v1 Package
===============

Version 1 API controllers.
"""
from .marker_controller import router as marker_router

__all__ = ["marker_router"]
