# ==============================================================================
# USER SCHEMAS - Authentication & Profile
# ==============================================================================
# Request/Response schemas for registration, login and profiles
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from artverse.domain_models.user import UserRole
from artverse.schemas.base import BaseSchema, TimestampSchema


# ==============================================================================
# PROFILE BUILDING BLOCKS
# ==============================================================================

class SocialLink(BaseSchema):
    """Link to an artist's social media account."""

    platform: str = Field(..., min_length=1, max_length=50)
    url: str = Field(..., min_length=1, max_length=500)


class CommissionRate(BaseSchema):
    """Price an artist advertises for a kind of commission."""

    kind: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., ge=0)
    description: Optional[str] = Field(None, max_length=1000)


class ShippingAddress(BaseSchema):
    """Postal address used for physical deliveries."""

    street: Optional[str] = Field(None, max_length=200)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    postal_code: Optional[str] = Field(None, max_length=20)
    country: Optional[str] = Field(None, max_length=100)


class Profile(BaseSchema):
    """Profile sub-document of a user."""

    name: str = Field(..., description="Display name")
    bio: Optional[str] = Field(None, description="Short biography")
    avatar: Optional[str] = Field(None, description="Avatar URL")
    skills: List[str] = Field(default_factory=list)
    portfolio: List[str] = Field(default_factory=list)
    social_media: List[SocialLink] = Field(default_factory=list)
    commission_rates: List[CommissionRate] = Field(default_factory=list)
    shipping_address: Optional[ShippingAddress] = None


# ==============================================================================
# REQUESTS
# ==============================================================================

class UserCreate(BaseSchema):
    """Schema for user registration."""

    email: EmailStr = Field(
        ...,
        description="User email address",
        examples=["user@example.com"],
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="User password",
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Display name",
    )
    role: UserRole = Field(
        UserRole.BUYER,
        description="Marketplace role (defaults to buyer)",
    )


class UserLogin(BaseSchema):
    """Schema for user login."""

    email: EmailStr = Field(
        ...,
        description="User email address",
    )
    password: str = Field(
        ...,
        min_length=1,
        description="User password",
    )


class ProfileUpdate(BaseSchema):
    """
    Schema for updating the caller's profile.

    Artist-only fields (skills, portfolio, commission_rates, social_media)
    and the buyer-only shipping address are ignored for other roles.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    bio: Optional[str] = Field(None, max_length=1000)
    avatar: Optional[str] = Field(None, max_length=500)
    skills: Optional[List[str]] = None
    portfolio: Optional[List[str]] = None
    commission_rates: Optional[List[CommissionRate]] = None
    social_media: Optional[List[SocialLink]] = None
    shipping_address: Optional[ShippingAddress] = None


class AvatarUpdate(BaseSchema):
    """Schema for replacing the profile picture."""

    avatar: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Avatar URL",
    )


# ==============================================================================
# RESPONSES
# ==============================================================================

class UserSummary(BaseSchema):
    """Resolved reference to another user."""

    id: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    email: Optional[str] = None


class UserResponse(TimestampSchema):
    """Schema for the caller's own account."""

    id: str = Field(
        ...,
        description="User unique identifier",
    )
    email: EmailStr = Field(
        ...,
        description="User email address",
    )
    role: UserRole = Field(
        ...,
        description="Marketplace role",
    )
    profile: Profile
    is_active: bool = Field(
        True,
        description="Whether the account is active",
    )


class AuthResponse(BaseSchema):
    """Returned by register and login alongside the session cookie."""

    user: UserResponse
    token: str = Field(
        ...,
        description="Raw session token (also set as http-only cookie)",
    )


class CommissionStats(BaseSchema):
    """Commission counters shown on the profile page."""

    total: int = 0
    completed: int = 0
    in_progress: Optional[int] = None


class UserProfileResponse(UserResponse):
    """Own profile with commission counters."""

    commission_stats: CommissionStats


class PublicProfile(BaseSchema):
    """Profile fields anyone may see."""

    name: str
    bio: Optional[str] = None
    avatar: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    portfolio: List[str] = Field(default_factory=list)
    social_media: List[SocialLink] = Field(default_factory=list)
    commission_rates: List[CommissionRate] = Field(default_factory=list)


class PublicUserResponse(BaseSchema):
    """Public profile of any active user."""

    id: str
    role: UserRole
    profile: PublicProfile
    created_at: Optional[datetime] = None


class ArtistResponse(PublicUserResponse):
    """Entry of the artist directory."""

    email: str
