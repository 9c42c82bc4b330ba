# ==============================================================================
# CART SERVICE - Per-user Cart
# ==============================================================================
# One cart document per user; lines are merged by item and totals are
# always computed on read
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from bson import ObjectId

from artverse.core.constants import DatabaseConstants, ErrorMessages
from artverse.core.exceptions import InsufficientStockError, NotFoundError
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.domain_models.commerce import ItemType
from artverse.schemas.cart import CartItemCreate, CartLineResponse, CartResponse
from artverse.services.base_service import BaseService
from artverse.services.catalog_items import resolve_item
from artverse.utils.helpers import to_object_id

logger = logging.getLogger(__name__)


class CartService(BaseService[CartResponse]):
    """
    Cart operations.

    Every mutation is a single-document atomic update keyed by
    ``user_id``; an absent cart reads as empty.
    """

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        """Initialize cart service."""
        super().__init__(adapter, DatabaseConstants.CARTS_COLLECTION)

    def _to_response(self, entity: Optional[Dict[str, Any]]) -> CartResponse:
        """Build the cart view with totals."""
        lines = [
            CartLineResponse.model_validate(line)
            for line in (entity or {}).get("items", [])
        ]
        return CartResponse(
            items=lines,
            total=sum(line.price * line.quantity for line in lines),
            item_count=sum(line.quantity for line in lines),
            unique_items=len(lines),
        )

    async def _ensure_cart(self, user_oid: ObjectId) -> Dict[str, Any]:
        return await self._adapter.update_one(
            self._collection_name,
            {"user_id": user_oid},
            {"$setOnInsert": {"items": []}},
            upsert=True,
        )

    async def get_cart(self, user_id: str) -> CartResponse:
        """Current cart of the user."""
        cart = await self._adapter.find_one(
            self._collection_name,
            {"user_id": to_object_id(user_id, "user")},
        )
        return self._to_response(cart)

    async def add_item(self, user_id: str, schema: CartItemCreate) -> CartResponse:
        """
        Add an item, merging with an existing line for the same item.

        Raises:
            NotFoundError / UnavailableError: If the item cannot be carted
            InsufficientStockError: If an artwork has fewer copies than
                the resulting line quantity
        """
        item = await resolve_item(self._adapter, schema.item_id)
        user_oid = to_object_id(user_id, "user")
        item_oid = to_object_id(item.id)

        cart = await self._ensure_cart(user_oid)
        existing = next(
            (line for line in cart.get("items", []) if line.get("item_id") == item.id),
            None,
        )
        wanted = schema.quantity + (existing.get("quantity", 0) if existing else 0)

        if item.item_type == ItemType.ARTWORK and item.stock < wanted:
            raise InsufficientStockError(available=item.stock, requested=wanted)

        result = None
        if existing:
            result = await self._adapter.update_one(
                self._collection_name,
                {"user_id": user_oid, "items.item_id": item_oid},
                {"$inc": {"items.$.quantity": schema.quantity}},
            )
        if result is None:
            line = {"_id": ObjectId(), **item.snapshot(), "quantity": schema.quantity}
            result = await self._adapter.update_one(
                self._collection_name,
                {"user_id": user_oid, "items.item_id": {"$ne": item_oid}},
                {"$push": {"items": line}},
            )
        if result is None:
            # Another request added the same line in between
            result = await self._adapter.update_one(
                self._collection_name,
                {"user_id": user_oid, "items.item_id": item_oid},
                {"$inc": {"items.$.quantity": schema.quantity}},
            )

        logger.info(f"Cart of {user_id}: +{schema.quantity} {item.item_type.value} {item.id}")
        return self._to_response(result)

    async def update_quantity(
        self,
        user_id: str,
        line_id: str,
        quantity: int,
    ) -> CartResponse:
        """
        Set the quantity of a line, re-checking current artwork stock.

        Raises:
            NotFoundError: If the line is not in the cart
            InsufficientStockError: If the artwork has fewer copies
        """
        user_oid = to_object_id(user_id, "user")
        line_oid = to_object_id(line_id, "cart item")

        cart = await self._adapter.find_one(self._collection_name, {"user_id": user_oid})
        line = next(
            (entry for entry in (cart or {}).get("items", []) if entry.get("id") == str(line_oid)),
            None,
        )
        if line is None:
            raise NotFoundError(
                message=ErrorMessages.CART_ITEM_NOT_FOUND,
                resource_type="cart_item",
                resource_id=line_id,
            )

        if line.get("item_type") == ItemType.ARTWORK.value:
            artwork = await self._adapter.get_by_id(
                DatabaseConstants.ARTWORKS_COLLECTION,
                to_object_id(line["item_id"]),
            )
            stock = artwork.get("stock", 0) if artwork else 0
            if stock < quantity:
                raise InsufficientStockError(available=stock, requested=quantity)

        result = await self._adapter.update_one(
            self._collection_name,
            {"user_id": user_oid, "items._id": line_oid},
            {"$set": {"items.$.quantity": quantity}},
        )
        if result is None:
            raise NotFoundError(
                message=ErrorMessages.CART_ITEM_NOT_FOUND,
                resource_type="cart_item",
                resource_id=line_id,
            )
        return self._to_response(result)

    async def remove_item(self, user_id: str, line_id: str) -> CartResponse:
        """Remove a line; removing an absent line is not an error."""
        result = await self._adapter.update_one(
            self._collection_name,
            {"user_id": to_object_id(user_id, "user")},
            {"$pull": {"items": {"_id": to_object_id(line_id, "cart item")}}},
        )
        return self._to_response(result)

    async def clear(self, user_id: str) -> CartResponse:
        """Empty the cart."""
        await self._adapter.update_one(
            self._collection_name,
            {"user_id": to_object_id(user_id, "user")},
            {"$set": {"items": []}},
        )
        return self._to_response(None)
