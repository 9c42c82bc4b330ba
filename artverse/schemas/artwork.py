# ==============================================================================
# ARTWORK SCHEMAS - Moderated Listings
# ==============================================================================
# Request/Response schemas for artwork management and moderation
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field, field_validator

from artverse.domain_models.artwork import (
    ArtworkCategory,
    ArtworkStatus,
    RejectionReason,
)
from artverse.schemas.base import BaseSchema, ImageAsset, TimestampSchema
from artverse.schemas.user import UserSummary


def _split_tags(value: Any) -> Any:
    """Accept tags as a list or as a comma-separated string."""
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    return value


class ArtworkCreate(BaseSchema):
    """Schema for submitting a new artwork."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Artwork title",
    )
    description: str = Field(
        ...,
        min_length=1,
        max_length=5000,
        description="Artwork description",
    )
    category: ArtworkCategory = Field(
        ...,
        description="Artwork category",
    )
    price: float = Field(
        ...,
        ge=0,
        description="Price in major currency units",
        examples=["10.50"],
    )
    stock: int = Field(
        ...,
        ge=0,
        description="Copies available",
    )
    images: List[ImageAsset] = Field(
        ...,
        min_length=1,
        description="Hosted images (at least one)",
    )
    tags: List[str] = Field(
        default_factory=list,
        description="Tags (list or comma-separated string)",
    )

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> Any:
        """Accept tags as a list or as a comma-separated string."""
        return _split_tags(v)


class ArtworkUpdate(BaseSchema):
    """
    Schema for editing an artwork.

    Every edit sends the artwork back to moderation.
    """

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1, max_length=5000)
    category: Optional[ArtworkCategory] = None
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    images: Optional[List[ImageAsset]] = Field(None, min_length=1)
    tags: Optional[List[str]] = None

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> Any:
        """Accept tags as a list or as a comma-separated string."""
        return _split_tags(v)


class ArtworkReject(BaseSchema):
    """Schema for rejecting an artwork."""

    reason: Optional[RejectionReason] = Field(
        None,
        description="Why the artwork was rejected",
    )


class ArtworkStats(BaseSchema):
    """Engagement counters."""

    views: int = 0
    likes: int = 0


class ArtworkResponse(TimestampSchema):
    """Schema for artwork response."""

    id: str = Field(
        ...,
        description="Artwork unique identifier",
    )
    artist_id: str
    artist: Optional[UserSummary] = None
    title: str
    description: str
    category: ArtworkCategory
    price: float
    stock: int
    images: List[ImageAsset]
    status: ArtworkStatus
    rejection_reason: Optional[RejectionReason] = None
    tags: List[str] = Field(default_factory=list)
    stats: ArtworkStats = Field(default_factory=ArtworkStats)
    approved_at: Optional[datetime] = None
    sold_at: Optional[datetime] = None
