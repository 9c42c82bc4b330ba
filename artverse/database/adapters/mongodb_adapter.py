# ==============================================================================
# MONGODB ADAPTER - Motor Async Driver Implementation
# ==============================================================================
# Document-oriented database adapter with full async support
# Uses Motor for non-blocking MongoDB operations
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from artverse.core.settings import Settings
from artverse.core.exceptions import AlreadyExistsError, DatabaseError
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.utils.helpers import utc_now

logger = logging.getLogger(__name__)


class MongoDBAdapter(BaseDatabaseAdapter[Dict[str, Any]]):
    """
    MongoDB database adapter using Motor async driver.

    Features:
        - Async MongoDB operations using Motor
        - Recursive ObjectId -> string conversion (``_id`` becomes ``id``
          at every nesting level, so embedded line items and messages
          expose their ids too)
        - Automatic ``created_at`` / ``updated_at`` stamping
        - Conditional atomic updates and aggregation pipelines

    Attributes:
        _settings: Application settings
        _client: Motor async client (or any Motor-compatible client)
        _database: Target database instance

    Example:
        >>> adapter = MongoDBAdapter(settings)
        >>> await adapter.connect()
        >>> doc = await adapter.create("users", {"email": "test@example.com"})
        >>> print(doc["id"])  # String ID
    """

    def __init__(
        self,
        settings: Settings,
        client: Optional[AsyncIOMotorClient] = None,
        database_name: Optional[str] = None,
    ) -> None:
        """
        Initialize MongoDB adapter.

        Args:
            settings: Application settings (URL, pool sizing)
            client: Pre-built client; skips URL based connection when given
            database_name: Database name (defaults to settings)
        """
        self._settings = settings
        self._database_name = database_name or settings.MONGODB_DB
        self._client: Optional[AsyncIOMotorClient] = client
        self._owns_client = client is None
        self._database: Optional[AsyncIOMotorDatabase] = None

    # ==========================================================================
    # ID SERIALIZATION HELPERS
    # ==========================================================================

    @classmethod
    def _serialize(cls, value: Any) -> Any:
        """
        Convert a stored document into its wire form.

        ``_id`` keys are renamed to ``id`` and every ObjectId becomes a
        string, recursively through embedded documents and arrays.
        """
        if isinstance(value, ObjectId):
            return str(value)
        if isinstance(value, list):
            return [cls._serialize(item) for item in value]
        if isinstance(value, dict):
            return {
                ("id" if key == "_id" else key): cls._serialize(item)
                for key, item in value.items()
            }
        return value

    @staticmethod
    def _deserialize_id(id_value: Any) -> ObjectId:
        """
        Convert string ID to MongoDB ObjectId.

        Args:
            id_value: String or ObjectId

        Returns:
            ObjectId instance
        """
        if isinstance(id_value, str):
            return ObjectId(id_value)
        return id_value

    def _build_query(
        self,
        filters: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Build MongoDB query from filter dictionary.

        Handles the id -> _id conversion; every other key, including
        operator dictionaries ($gt, $in, $regex...), passes through.

        Args:
            filters: Filter dictionary

        Returns:
            MongoDB query dictionary
        """
        if not filters:
            return {}

        query = {}
        for key, value in filters.items():
            if key == "id":
                query["_id"] = self._deserialize_id(value)
            else:
                query[key] = value

        return query

    def _collection(self, name: str):
        if self._database is None:
            raise RuntimeError("Database not connected")
        return self._database[name]

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    async def connect(self) -> None:
        """
        Initialize MongoDB connection.

        Creates Motor client (unless one was injected) and selects the
        target database.
        """
        if self._client is not None and not self._owns_client:
            self._database = self._client[self._database_name]
            logger.info(f"MongoDB adapter bound to injected client ({self._database_name})")
            return

        try:
            self._client = AsyncIOMotorClient(
                self._settings.MONGODB_URL,
                maxPoolSize=self._settings.DB_POOL_SIZE,
                minPoolSize=1,
                maxIdleTimeMS=self._settings.DB_POOL_TIMEOUT * 1000,
                tz_aware=True,
            )
            self._database = self._client[self._database_name]

            # Verify connection
            await self._client.admin.command("ping")

            logger.info(
                f"MongoDB adapter connected to {self._database_name}"
            )

        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise DatabaseError(f"MongoDB connection failed: {e}")

    async def disconnect(self) -> None:
        """Close MongoDB connection."""
        if self._client is not None and self._owns_client:
            self._client.close()
            logger.info("MongoDB adapter disconnected")
        self._database = None

    async def health_check(self) -> bool:
        """
        Verify database connectivity.

        Returns:
            True if connection is healthy
        """
        try:
            if self._database is None:
                return False
            await self._database.command("ping")
            return True
        except Exception as e:
            logger.warning(f"MongoDB health check failed: {e}")
            return False

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Create a new document."""
        now = utc_now()
        document = {k: v for k, v in data.items() if k != "id"}
        document.setdefault("_id", ObjectId())
        document.setdefault("created_at", now)
        document.setdefault("updated_at", now)

        try:
            await self._collection(collection).insert_one(document)
        except DuplicateKeyError as e:
            logger.info(f"Duplicate key rejected in {collection}: {e}")
            raise AlreadyExistsError(
                message=f"Duplicate {collection} record",
                resource_type=collection,
            )
        return self._serialize(document)

    async def get_by_id(
        self,
        collection: str,
        id: Any,
    ) -> Optional[Dict[str, Any]]:
        """Retrieve document by ID."""
        document = await self._collection(collection).find_one(
            {"_id": self._deserialize_id(id)}
        )
        return self._serialize(document) if document else None

    async def get_all(
        self,
        collection: str,
        skip: int = 0,
        limit: Optional[int] = 100,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: str = "asc",
    ) -> List[Dict[str, Any]]:
        """Retrieve multiple documents with pagination."""
        query = self._build_query(filters)
        cursor = self._collection(collection).find(query)

        # Apply sorting
        if sort_by:
            direction = ASCENDING if sort_order.lower() == "asc" else DESCENDING
            cursor = cursor.sort(sort_by, direction)

        # Apply pagination
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)

        documents = await cursor.to_list(length=limit)
        return [self._serialize(doc) for doc in documents]

    async def update(
        self,
        collection: str,
        id: Any,
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Update an existing document."""
        fields = {k: v for k, v in data.items() if k != "id"}
        return await self.update_one(
            collection,
            {"_id": self._deserialize_id(id)},
            {"$set": fields},
        )

    async def update_one(
        self,
        collection: str,
        filters: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False,
        touch: bool = True,
    ) -> Optional[Dict[str, Any]]:
        """Apply update operators to one document and return it."""
        now = utc_now()
        update = dict(update)
        if touch:
            update["$set"] = {"updated_at": now, **update.get("$set", {})}
        if upsert:
            update["$setOnInsert"] = {"created_at": now, **update.get("$setOnInsert", {})}

        result = await self._collection(collection).find_one_and_update(
            self._build_query(filters),
            update,
            upsert=upsert,
            return_document=ReturnDocument.AFTER,
        )
        return self._serialize(result) if result else None

    async def delete(
        self,
        collection: str,
        id: Any,
    ) -> bool:
        """Delete a document by ID."""
        result = await self._collection(collection).delete_one(
            {"_id": self._deserialize_id(id)}
        )
        return result.deleted_count > 0

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    async def count(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> int:
        """Count documents matching filters."""
        query = self._build_query(filters)
        return await self._collection(collection).count_documents(query)

    async def exists(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> bool:
        """Check if any document matches filters."""
        document = await self._collection(collection).find_one(
            self._build_query(filters),
            projection={"_id": 1},
        )
        return document is not None

    async def find_one(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Find a single document matching filters."""
        query = self._build_query(filters)
        document = await self._collection(collection).find_one(query)
        return self._serialize(document) if document else None

    async def aggregate(
        self,
        collection: str,
        pipeline: List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """Run an aggregation pipeline."""
        cursor = self._collection(collection).aggregate(pipeline)
        results = await cursor.to_list(length=None)
        return [self._serialize(doc) for doc in results]

    # ==========================================================================
    # SCHEMA OPERATIONS
    # ==========================================================================

    async def create_index(
        self,
        collection: str,
        keys: Sequence[Tuple[str, int]],
        unique: bool = False,
    ) -> str:
        """Ensure an index exists."""
        return await self._collection(collection).create_index(
            list(keys),
            unique=unique,
        )
