# ==============================================================================
# CART & WISHLIST SCHEMAS - Polymorphic Line Items
# ==============================================================================
# Lines reference an artwork or a course through a closed item type
# and keep a snapshot of the display fields taken when added
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field, computed_field

from artverse.domain_models.commerce import ItemType
from artverse.schemas.base import BaseSchema


class CartItemCreate(BaseSchema):
    """Schema for adding an item to the cart."""

    item_id: str = Field(
        ...,
        description="Artwork or course ID",
    )
    quantity: int = Field(
        1,
        ge=1,
        description="Quantity to add (merged with an existing line)",
    )


class CartItemUpdate(BaseSchema):
    """Schema for changing a cart line quantity."""

    quantity: int = Field(
        ...,
        ge=1,
        description="New quantity",
    )


class WishlistItemCreate(BaseSchema):
    """Schema for adding an item to the wishlist."""

    item_id: str = Field(
        ...,
        description="Artwork or course ID",
    )


class LineItemResponse(BaseSchema):
    """Snapshot of a catalog item inside a collection."""

    id: str = Field(
        ...,
        description="Line identifier",
    )
    item_type: ItemType
    item_id: str
    title: str
    price: float = Field(
        ...,
        description="Price at add time (courses in cents)",
    )
    thumbnail: Optional[str] = None
    artist_id: Optional[str] = None
    added_at: Optional[datetime] = None


class CartLineResponse(LineItemResponse):
    """Cart line with quantity."""

    quantity: int

    @computed_field
    @property
    def subtotal(self) -> float:
        """Line price times quantity."""
        return self.price * self.quantity


class CartResponse(BaseSchema):
    """Cart contents with totals computed on read."""

    items: List[CartLineResponse] = Field(default_factory=list)
    total: float = 0
    item_count: int = 0
    unique_items: int = 0


class WishlistResponse(BaseSchema):
    """Wishlist contents."""

    items: List[LineItemResponse] = Field(default_factory=list)
    count: int = 0
