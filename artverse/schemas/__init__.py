# ==============================================================================
# SCHEMAS PACKAGE INITIALIZATION
# ==============================================================================

"""
Pydantic Schemas
================

Request/Response validation schemas for API endpoints:
- Base: Envelopes, pagination and shared building blocks
- User: Authentication and profile schemas
- Artwork/Course: Catalog schemas
- Cart: Cart and wishlist line items
- Commission: Negotiation workflow schemas
- Order: Purchase schemas
- Notification/Dashboard/Contact: Supporting schemas
"""

from artverse.schemas.base import (
    APIResponse,
    BaseSchema,
    HealthResponse,
    ImageAsset,
    PaginatedResponse,
    PaginationMeta,
    TimestampSchema,
)
from artverse.schemas.user import (
    AuthResponse,
    UserCreate,
    UserLogin,
    UserResponse,
    UserSummary,
)

__all__ = [
    "APIResponse",
    "BaseSchema",
    "HealthResponse",
    "ImageAsset",
    "PaginatedResponse",
    "PaginationMeta",
    "TimestampSchema",
    "AuthResponse",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "UserSummary",
]
