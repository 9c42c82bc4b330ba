# ==============================================================================
# DATABASE FACTORY - Adapter Instantiation & Lifecycle Management
# ==============================================================================
# Builds, connects and prepares the document store adapter
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple

from pymongo import ASCENDING, DESCENDING

from artverse.core.settings import Settings
from artverse.core.exceptions import DatabaseError
from artverse.core.constants import DatabaseConstants
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.database.adapters.mongodb_adapter import MongoDBAdapter

logger = logging.getLogger(__name__)


# (collection, keys, unique)
INDEXES: List[Tuple[str, Sequence[Tuple[str, int]], bool]] = [
    (DatabaseConstants.USERS_COLLECTION, [("email", ASCENDING)], True),
    (DatabaseConstants.USERS_COLLECTION, [("role", ASCENDING)], False),
    (DatabaseConstants.CARTS_COLLECTION, [("user_id", ASCENDING)], True),
    (DatabaseConstants.WISHLISTS_COLLECTION, [("user_id", ASCENDING)], True),
    (DatabaseConstants.ORDERS_COLLECTION, [("payment_id", ASCENDING)], True),
    (DatabaseConstants.ORDERS_COLLECTION, [("buyer_id", ASCENDING), ("created_at", DESCENDING)], False),
    (DatabaseConstants.ORDERS_COLLECTION, [("items.item_id", ASCENDING)], False),
    (DatabaseConstants.ARTWORKS_COLLECTION, [("status", ASCENDING), ("created_at", DESCENDING)], False),
    (DatabaseConstants.ARTWORKS_COLLECTION, [("artist_id", ASCENDING)], False),
    (DatabaseConstants.COURSES_COLLECTION, [("artist_id", ASCENDING)], False),
    (DatabaseConstants.COMMISSIONS_COLLECTION, [("buyer_id", ASCENDING)], False),
    (DatabaseConstants.COMMISSIONS_COLLECTION, [("artist_id", ASCENDING)], False),
    (DatabaseConstants.NOTIFICATIONS_COLLECTION, [("user_id", ASCENDING), ("created_at", DESCENDING)], False),
]


class DatabaseFactory:
    """
    Factory for the application's database adapter.

    The adapter itself is stored on ``app.state`` by the application
    factory, so no process-wide cache lives here.

    Example:
        >>> adapter = await DatabaseFactory.initialize(settings)
        >>> user = await adapter.get_by_id("users", user_id)
        >>> await DatabaseFactory.shutdown(adapter)
    """

    @classmethod
    def create_adapter(
        cls,
        settings: Settings,
        client: Optional[Any] = None,
    ) -> BaseDatabaseAdapter:
        """
        Create a MongoDB adapter.

        Args:
            settings: Application settings
            client: Optional pre-built Motor-compatible client

        Returns:
            Unconnected adapter instance
        """
        logger.info("Created MongoDB adapter")
        return MongoDBAdapter(settings, client=client)

    @classmethod
    async def initialize(
        cls,
        settings: Settings,
        client: Optional[Any] = None,
    ) -> BaseDatabaseAdapter:
        """
        Create, connect and index the database.

        Should be called at application startup.

        Args:
            settings: Application settings
            client: Optional pre-built Motor-compatible client

        Returns:
            Ready-to-use adapter

        Raises:
            DatabaseError: If connection fails
        """
        adapter = cls.create_adapter(settings, client=client)

        try:
            await adapter.connect()
            await cls.ensure_indexes(adapter)
            logger.info(f"Database initialized: {settings.MONGODB_DB}")
            return adapter
        except DatabaseError:
            raise
        except Exception as e:
            logger.error(f"Database initialization failed: {e}")
            raise DatabaseError(f"Failed to initialize database: {e}")

    @classmethod
    async def ensure_indexes(cls, adapter: BaseDatabaseAdapter) -> None:
        """Create the indexes the services depend on."""
        for collection, keys, unique in INDEXES:
            await adapter.create_index(collection, keys, unique=unique)
        logger.info(f"Ensured {len(INDEXES)} indexes")

    @classmethod
    async def shutdown(cls, adapter: Optional[BaseDatabaseAdapter]) -> None:
        """
        Close the adapter's connections.

        Should be called at application shutdown.
        """
        if adapter is None:
            return
        try:
            await adapter.disconnect()
            logger.info("Database connections closed")
        except Exception as e:
            logger.error(f"Error disconnecting database: {e}")

    @classmethod
    async def health_check(cls, adapter: Optional[BaseDatabaseAdapter]) -> bool:
        """
        Check database health.

        Returns:
            True if database is healthy
        """
        if adapter is None:
            return False
        try:
            return await adapter.health_check()
        except Exception:
            return False
