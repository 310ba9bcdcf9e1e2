from .mongo_connection import MongoConnection
from .mongo_marker_repository import MongoMarkerRepository

__all__ = ["MongoConnection", "MongoMarkerRepository"]
