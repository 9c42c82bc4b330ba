# ==============================================================================
# COMMISSION SCHEMAS - Negotiation Workflow
# ==============================================================================
# Request/Response schemas for commissions and their message thread
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from artverse.domain_models.commission import (
    CommissionStatus,
    MessageSender,
    PaymentStatus,
)
from artverse.schemas.base import BaseSchema, TimestampSchema
from artverse.schemas.user import UserSummary


class CommissionCreate(BaseSchema):
    """Schema for requesting a commission from an artist."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Commission title",
    )
    description: str = Field(
        ...,
        min_length=1,
        max_length=5000,
        description="What the buyer wants (also the first message)",
    )
    budget: float = Field(
        ...,
        ge=0,
        description="Budget in major currency units",
    )
    deadline: Optional[datetime] = Field(
        None,
        description="Desired delivery date",
    )
    size_requirements: Optional[str] = Field(None, max_length=500)
    style_preferences: Optional[str] = Field(None, max_length=1000)


class MessageCreate(BaseSchema):
    """Schema for appending a message to a commission."""

    content: str = Field(
        ...,
        min_length=1,
        max_length=5000,
        description="Message content",
    )


class CommissionStatusUpdate(BaseSchema):
    """Schema for an artist moving a commission along its lifecycle."""

    status: CommissionStatus = Field(
        ...,
        description="Target status (accepted, rejected, in_progress, completed)",
    )


class CommissionMessageResponse(BaseSchema):
    """Schema for a thread message."""

    id: str
    sender: MessageSender
    content: str
    sent_at: datetime


class CommissionResponse(TimestampSchema):
    """Schema for commission response."""

    id: str = Field(
        ...,
        description="Commission unique identifier",
    )
    buyer_id: str
    artist_id: str
    buyer: Optional[UserSummary] = None
    artist: Optional[UserSummary] = None
    title: str
    description: str
    budget: float
    deadline: Optional[datetime] = None
    size_requirements: Optional[str] = None
    style_preferences: Optional[str] = None
    status: CommissionStatus
    payment_status: PaymentStatus = PaymentStatus.PENDING
    messages: List[CommissionMessageResponse] = Field(default_factory=list)
