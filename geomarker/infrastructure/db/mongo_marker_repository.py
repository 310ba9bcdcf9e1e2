"""
MongoDB Marker Repository
=========================

Concrete implementation of MarkerRepository using MongoDB.

Position uniqueness is enforced by a unique compound index on
``position.lat`` + ``position.lng``: the server rejects the second insert
atomically, so concurrent creates at one position cannot both succeed.
"""
from typing import List, Optional
import logging
from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError, PyMongoError

from geomarker.domain.constants.marker_fields import MarkerFields
from geomarker.domain.exceptions import DuplicateKeyError, StoreError
from geomarker.domain.models.marker import Marker, MarkerDraft, Position
from geomarker.domain.repositories.marker_repository import MarkerRepository
from geomarker.infrastructure.db.mongo_connection import MongoConnection
from geomarker.utils.datetime_utils import as_app_timezone, now, truncate_to_millis

logger = logging.getLogger(__name__)

POSITION_INDEX_NAME = "position_unique"
CREATED_AT_INDEX_NAME = "created_at_desc"


class MongoMarkerRepository(MarkerRepository):
    """
    MongoDB implementation of MarkerRepository.

    Handles all marker persistence operations using MongoDB.
    """

    def __init__(self, collection: Collection, connection: Optional[MongoConnection] = None):
        """
        Initialize repository with a MongoDB collection.

        Args:
            collection: Collection holding marker documents
            connection: Owning connection, closed together with the repository
        """
        self._collection = collection
        self._connection = connection

    @classmethod
    def from_connection(cls, connection: MongoConnection, collection_name: str) -> "MongoMarkerRepository":
        """Build a repository on a named collection of ``connection``."""
        return cls(connection.get_collection(collection_name), connection=connection)

    def _to_entity(self, doc: dict) -> Marker:
        """Convert MongoDB document to Marker entity."""
        position = doc.get(MarkerFields.POSITION) or {}
        return Marker(
            id=str(doc[MarkerFields.MONGO_ID]),
            position=Position(
                lat=float(position[MarkerFields.LAT]),
                lng=float(position[MarkerFields.LNG]),
            ),
            content=doc[MarkerFields.CONTENT],
            created_at=as_app_timezone(doc[MarkerFields.CREATED_AT]),
        )

    def _to_document(self, draft: MarkerDraft) -> dict:
        """Convert a draft to a MongoDB document stamped with the creation time."""
        return {
            MarkerFields.POSITION: {
                MarkerFields.LAT: draft.lat,
                MarkerFields.LNG: draft.lng,
            },
            MarkerFields.CONTENT: draft.content,
            # BSON dates keep milliseconds only; truncate so the returned
            # entity matches what a later read yields
            MarkerFields.CREATED_AT: truncate_to_millis(now()),
        }

    def ensure_indexes(self) -> None:
        """Create the unique position index and the createdAt index."""
        try:
            self._collection.create_index(
                [(MarkerFields.POSITION_LAT, ASCENDING), (MarkerFields.POSITION_LNG, ASCENDING)],
                unique=True,
                name=POSITION_INDEX_NAME,
            )
            self._collection.create_index(
                [(MarkerFields.CREATED_AT, DESCENDING)],
                name=CREATED_AT_INDEX_NAME,
            )
        except PyMongoError as e:
            raise StoreError("failed to prepare marker indexes", cause=e) from e
        logger.info("Marker indexes ready on collection '%s'", self._collection.name)

    def create(self, draft: MarkerDraft) -> Marker:
        """Insert a new marker; the unique index rejects duplicate positions."""
        doc = self._to_document(draft)
        try:
            result = self._collection.insert_one(doc)
        except MongoDuplicateKeyError as e:
            raise DuplicateKeyError(draft.lat, draft.lng) from e
        except PyMongoError as e:
            raise StoreError("failed to save marker", cause=e) from e

        return Marker.from_draft(
            draft,
            id=str(result.inserted_id),
            created_at=as_app_timezone(doc[MarkerFields.CREATED_AT]),
        )

    def list_all(self) -> List[Marker]:
        """Find all markers, newest first."""
        try:
            # ObjectIds grow with insertion order and break createdAt ties
            docs = self._collection.find().sort(
                [(MarkerFields.CREATED_AT, DESCENDING), (MarkerFields.MONGO_ID, DESCENDING)]
            )
            return [self._to_entity(doc) for doc in docs]
        except PyMongoError as e:
            raise StoreError("failed to fetch markers", cause=e) from e
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed marker document in '%s': %r", self._collection.name, e)
            raise StoreError("failed to fetch markers", cause=e) from e

    def ping(self) -> bool:
        """Check that the server answers."""
        try:
            self._collection.database.command("ping")
            return True
        except PyMongoError as e:
            logger.warning("MongoDB ping failed: %s", e)
            return False

    def close(self) -> None:
        """Close the owning connection, if any."""
        if self._connection is not None:
            self._connection.close()
