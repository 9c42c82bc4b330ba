# ==============================================================================
# BASE DATABASE ADAPTER - Abstract Interface
# ==============================================================================
# Defines the contract the services rely on for document storage
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import (
    Any,
    Dict,
    Generic,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

# Type variable for generic database records
T = TypeVar("T")


class BaseDatabaseAdapter(ABC, Generic[T]):
    """
    Abstract Base Class for Database Adapters.

    Provides a unified interface for document operations. Services only
    talk to this interface, which keeps them independent from the driver
    and lets tests swap in an in-memory client.

    Generic Parameters:
        T: The type of records returned by the adapter

    Atomicity:
        Every method touches a single document. Nothing here spans
        documents, so multi-step workflows are not transactional.

    Example:
        >>> adapter = MongoDBAdapter(settings)
        >>> await adapter.connect()
        >>> user = await adapter.create("users", {"email": "test@example.com"})
        >>> await adapter.disconnect()
    """

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    @abstractmethod
    async def connect(self) -> None:
        """
        Establish database connection.

        Must be called before any database operations.

        Raises:
            DatabaseError: If connection cannot be established
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Close database connection and release the pool."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if database connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        pass

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
    ) -> T:
        """
        Create a new record.

        ``created_at`` and ``updated_at`` are stamped unless supplied.

        Args:
            collection: Collection name
            data: Record data as dictionary

        Returns:
            Created record with generated ID

        Raises:
            AlreadyExistsError: If a unique index rejects the record
        """
        pass

    @abstractmethod
    async def get_by_id(
        self,
        collection: str,
        id: Any,
    ) -> Optional[T]:
        """
        Retrieve a record by its primary identifier.

        Args:
            collection: Collection name
            id: ObjectId or its string form

        Returns:
            Record if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(
        self,
        collection: str,
        skip: int = 0,
        limit: Optional[int] = 100,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: str = "asc",
    ) -> List[T]:
        """
        Retrieve multiple records with pagination and filtering.

        Args:
            collection: Collection name
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return (None for all)
            filters: Query document
            sort_by: Field name to sort by
            sort_order: Sort direction ("asc" or "desc")

        Returns:
            List of matching records
        """
        pass

    @abstractmethod
    async def update(
        self,
        collection: str,
        id: Any,
        data: Dict[str, Any],
    ) -> Optional[T]:
        """
        Set fields on an existing record.

        Args:
            collection: Collection name
            id: Identifier of record to update
            data: Fields to set (partial update)

        Returns:
            Updated record if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_one(
        self,
        collection: str,
        filters: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False,
        touch: bool = True,
    ) -> Optional[T]:
        """
        Apply update operators to the first record matching ``filters``.

        The filter doubles as a guard: conditional updates (for instance
        "push only if not already present") return None when the guard
        does not match.

        Args:
            collection: Collection name
            filters: Query document selecting the record
            update: Update document with operators ($set, $inc, $push...)
            upsert: Insert a new record when nothing matches
            touch: Refresh ``updated_at`` (off for counters such as views)

        Returns:
            Record after the update, None if nothing matched
        """
        pass

    @abstractmethod
    async def delete(
        self,
        collection: str,
        id: Any,
    ) -> bool:
        """
        Delete a record by ID.

        Returns:
            True if a record was deleted
        """
        pass

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def count(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> int:
        """Count records matching filters."""
        pass

    @abstractmethod
    async def exists(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> bool:
        """Check if any record matches filters."""
        pass

    @abstractmethod
    async def find_one(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> Optional[T]:
        """Find a single record matching filters."""
        pass

    @abstractmethod
    async def aggregate(
        self,
        collection: str,
        pipeline: List[Dict[str, Any]],
    ) -> List[T]:
        """
        Run an aggregation pipeline.

        Args:
            collection: Collection the pipeline starts from
            pipeline: Ordered list of stages

        Returns:
            Resulting records
        """
        pass

    # ==========================================================================
    # SCHEMA OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def create_index(
        self,
        collection: str,
        keys: Sequence[Tuple[str, int]],
        unique: bool = False,
    ) -> str:
        """
        Ensure an index exists.

        Args:
            collection: Collection name
            keys: (field, direction) pairs
            unique: Enforce uniqueness

        Returns:
            Index name
        """
        pass
