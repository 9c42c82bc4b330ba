# ==============================================================================
# DASHBOARD SCHEMAS - Artist Summary
# ==============================================================================
# Read-only aggregate of an artist's catalog, sales and inbox
# ==============================================================================

from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from artverse.schemas.artwork import ArtworkResponse
from artverse.schemas.base import BaseSchema
from artverse.schemas.commission import CommissionResponse
from artverse.schemas.course import CourseResponse
from artverse.schemas.notification import NotificationResponse
from artverse.schemas.order import OrderResponse
from artverse.schemas.user import UserSummary


class MonthlyEarning(BaseSchema):
    """Revenue bucket of one calendar month."""

    month: str
    earnings: float = 0


class PopularArtwork(BaseSchema):
    """Artwork ranked by the number of orders containing it."""

    id: str
    title: str
    sales: int = 0


class DashboardCourse(CourseResponse):
    """Owned course with its enrolled students resolved."""

    students: List[UserSummary] = Field(default_factory=list)


class DashboardNotifications(BaseSchema):
    """Unread entries and the full history."""

    unread: List[NotificationResponse] = Field(default_factory=list)
    all: List[NotificationResponse] = Field(default_factory=list)


class DashboardStats(BaseSchema):
    """Derived figures."""

    total_artworks: int = 0
    total_sales: float = 0
    artworks_by_status: Dict[str, int] = Field(default_factory=dict)
    commissions_by_status: Dict[str, int] = Field(default_factory=dict)
    monthly_earnings: List[MonthlyEarning] = Field(default_factory=list)
    unread_notifications: int = 0


class DashboardResponse(BaseSchema):
    """Everything the artist dashboard renders."""

    artworks: List[ArtworkResponse] = Field(default_factory=list)
    recent_orders: List[OrderResponse] = Field(default_factory=list)
    commissions: Dict[str, List[CommissionResponse]] = Field(default_factory=dict)
    notifications: DashboardNotifications = Field(default_factory=DashboardNotifications)
    popular_artworks: List[PopularArtwork] = Field(default_factory=list)
    courses: List[DashboardCourse] = Field(default_factory=list)
    stats: DashboardStats = Field(default_factory=DashboardStats)
