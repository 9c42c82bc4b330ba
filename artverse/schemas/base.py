# ==============================================================================
# BASE SCHEMAS - Common Schema Patterns
# ==============================================================================
# Foundation schemas for API envelopes and pagination
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


# Type variable for generic response types
T = TypeVar("T")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All API schemas should inherit from this class
    to ensure consistent serialization behavior.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
        arbitrary_types_allowed=True,
    )


class TimestampSchema(BaseSchema):
    """Schema with automatic timestamp fields."""

    created_at: Optional[datetime] = Field(
        None,
        description="Record creation timestamp"
    )
    updated_at: Optional[datetime] = Field(
        None,
        description="Last update timestamp"
    )


class ImageAsset(BaseSchema):
    """A hosted image referenced by its public id."""

    url: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="Public URL of the image",
    )
    public_id: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Key of the image on the host (used for deletion)",
    )
    width: Optional[int] = Field(
        None,
        ge=0,
        description="Width in pixels",
    )
    height: Optional[int] = Field(
        None,
        ge=0,
        description="Height in pixels",
    )


class PaginationMeta(BaseModel):
    """Pagination block of list envelopes."""

    total: int = Field(
        ...,
        ge=0,
        description="Total number of matching items"
    )
    page: int = Field(
        ...,
        ge=1,
        description="Current page number"
    )
    pages: int = Field(
        ...,
        ge=0,
        description="Total number of pages"
    )
    limit: int = Field(
        ...,
        ge=1,
        description="Items per page"
    )


class APIResponse(BaseModel, Generic[T]):
    """
    Standard API response wrapper.

    Attributes:
        success: Whether the request was successful
        message: Optional status message
        data: Response payload
    """

    success: bool = Field(
        True,
        description="Whether the request was successful"
    )
    message: Optional[str] = Field(
        None,
        description="Status message"
    )
    data: Optional[T] = Field(
        None,
        description="Response data"
    )

    @classmethod
    def ok(
        cls,
        data: T = None,
        message: Optional[str] = None,
    ) -> "APIResponse[T]":
        """Create a successful response."""
        return cls(success=True, data=data, message=message)


class PaginatedResponse(BaseModel, Generic[T]):
    """
    Envelope for paginated list endpoints.

    Shape: ``{success, data, pagination: {total, page, pages, limit}}``.
    """

    success: bool = Field(
        True,
        description="Whether the request was successful"
    )
    data: List[T] = Field(
        default_factory=list,
        description="Items of the current page"
    )
    pagination: PaginationMeta = Field(
        ...,
        description="Pagination metadata"
    )

    @classmethod
    def ok(
        cls,
        data: List[T],
        pagination: dict,
    ) -> "PaginatedResponse[T]":
        """Create a successful page response."""
        return cls(success=True, data=data, pagination=PaginationMeta(**pagination))


class HealthResponse(BaseSchema):
    """Health check response schema."""

    status: str = Field(
        ...,
        description="Health status"
    )
    version: str = Field(
        ...,
        description="Application version"
    )
    database: str = Field(
        ...,
        description="Database connection status"
    )
