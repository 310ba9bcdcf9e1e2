"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .marker_provider import MarkerProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "MarkerProvider",
]
