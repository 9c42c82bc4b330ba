# ==============================================================================
# ORDER SCHEMAS - Purchases
# ==============================================================================
# Request/Response schemas for order placement and administration
# ==============================================================================

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from artverse.domain_models.commerce import ItemType, OrderStatus, PayoutStatus
from artverse.schemas.base import BaseSchema, TimestampSchema
from artverse.schemas.user import ShippingAddress, UserSummary


class OrderItemRequest(BaseSchema):
    """
    Line of an order request.

    Only the type and id are accepted; price and title are always
    read from the catalog.
    """

    item_type: ItemType = Field(
        ...,
        description="artwork or course",
    )
    item_id: str = Field(
        ...,
        description="Catalog item ID",
    )


class OrderCreate(BaseSchema):
    """Schema for placing an order."""

    items: List[OrderItemRequest] = Field(
        ...,
        min_length=1,
        description="Items to purchase",
    )
    payment_id: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Reference of the captured external payment",
    )
    shipping_address: Optional[ShippingAddress] = Field(
        None,
        description="Delivery address for physical artworks",
    )


class OrderStatusUpdate(BaseSchema):
    """Schema for an admin changing order state."""

    status: Optional[OrderStatus] = None
    payout_status: Optional[PayoutStatus] = None


class OrderItemResponse(BaseSchema):
    """Schema for order line response."""

    item_type: ItemType
    item_id: str
    title: str
    price: float
    artist_id: Optional[str] = None


class OrderResponse(TimestampSchema):
    """Schema for order response."""

    id: str = Field(
        ...,
        description="Order unique identifier",
    )
    buyer_id: str
    buyer: Optional[UserSummary] = None
    items: List[OrderItemResponse]
    total: float
    payment_id: str
    shipping_address: Optional[ShippingAddress] = None
    status: OrderStatus
    payout_status: PayoutStatus
