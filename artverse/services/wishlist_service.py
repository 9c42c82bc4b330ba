# ==============================================================================
# WISHLIST SERVICE - Per-user Wishlist
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from bson import ObjectId

from artverse.core.constants import DatabaseConstants, ErrorMessages
from artverse.core.exceptions import AlreadyExistsError
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.schemas.cart import LineItemResponse, WishlistItemCreate, WishlistResponse
from artverse.services.base_service import BaseService
from artverse.services.catalog_items import resolve_item
from artverse.utils.helpers import to_object_id

logger = logging.getLogger(__name__)


class WishlistService(BaseService[WishlistResponse]):
    """Wishlist operations. Each item appears at most once."""

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        """Initialize wishlist service."""
        super().__init__(adapter, DatabaseConstants.WISHLISTS_COLLECTION)

    def _to_response(self, entity: Optional[Dict[str, Any]]) -> WishlistResponse:
        """Build the wishlist view."""
        lines = [
            LineItemResponse.model_validate(line)
            for line in (entity or {}).get("items", [])
        ]
        return WishlistResponse(items=lines, count=len(lines))

    async def get_wishlist(self, user_id: str) -> WishlistResponse:
        """Current wishlist of the user."""
        wishlist = await self._adapter.find_one(
            self._collection_name,
            {"user_id": to_object_id(user_id, "user")},
        )
        return self._to_response(wishlist)

    async def add_item(self, user_id: str, schema: WishlistItemCreate) -> WishlistResponse:
        """
        Add an item.

        Raises:
            AlreadyExistsError: If the item is already wished
        """
        item = await resolve_item(self._adapter, schema.item_id)
        user_oid = to_object_id(user_id, "user")

        await self._adapter.update_one(
            self._collection_name,
            {"user_id": user_oid},
            {"$setOnInsert": {"items": []}},
            upsert=True,
        )
        result = await self._adapter.update_one(
            self._collection_name,
            {"user_id": user_oid, "items.item_id": {"$ne": to_object_id(item.id)}},
            {"$push": {"items": {"_id": ObjectId(), **item.snapshot()}}},
        )
        if result is None:
            raise AlreadyExistsError(
                message=ErrorMessages.WISHLIST_DUPLICATE,
                resource_type="wishlist_item",
            )

        logger.info(f"Wishlist of {user_id}: +{item.item_type.value} {item.id}")
        return self._to_response(result)

    async def remove_item(self, user_id: str, line_id: str) -> WishlistResponse:
        """Remove a line; removing an absent line is not an error."""
        result = await self._adapter.update_one(
            self._collection_name,
            {"user_id": to_object_id(user_id, "user")},
            {"$pull": {"items": {"_id": to_object_id(line_id, "wishlist item")}}},
        )
        return self._to_response(result)

    async def clear(self, user_id: str) -> WishlistResponse:
        """Empty the wishlist."""
        await self._adapter.update_one(
            self._collection_name,
            {"user_id": to_object_id(user_id, "user")},
            {"$set": {"items": []}},
        )
        return self._to_response(None)
