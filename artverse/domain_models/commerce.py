# ==============================================================================
# COMMERCE MODELS - Line Items and Orders
# ==============================================================================
# Polymorphic catalog references and order lifecycle vocabularies
# ==============================================================================

from __future__ import annotations

import enum


class ItemType(str, enum.Enum):
    """Catalog collection a line item points into."""
    ARTWORK = "artwork"
    COURSE = "course"


class OrderStatus(str, enum.Enum):
    """Order lifecycle status states."""
    PENDING = "pending"
    COMPLETED = "completed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class PayoutStatus(str, enum.Enum):
    """Artist payout states of an order."""
    PENDING = "pending"
    PROCESSED = "processed"
    FAILED = "failed"
