# ==============================================================================
# SERVICES PACKAGE INITIALIZATION
# ==============================================================================

"""
Service Layer
=============

Business logic implementation for all domain entities:
- BaseService: Generic service with common lookups and paging
- UserService: Authentication, profiles and the artist directory
- NotificationService: Best-effort inbox writes
- ArtworkService / CourseService: Catalog and moderation
- CartService / WishlistService: Per-user collections
- CommissionService: Negotiation workflow
- OrderService: Purchases and fulfillment fan-out
- DashboardService: Artist summary
- ContactService: Contact form
"""

from artverse.services.base_service import BaseService
from artverse.services.user_service import UserService
from artverse.services.notification_service import NotificationService
from artverse.services.artwork_service import ArtworkService
from artverse.services.course_service import CourseService
from artverse.services.cart_service import CartService
from artverse.services.wishlist_service import WishlistService
from artverse.services.commission_service import CommissionService
from artverse.services.order_service import OrderService
from artverse.services.dashboard_service import DashboardService
from artverse.services.contact_service import ContactService

__all__ = [
    "BaseService",
    "UserService",
    "NotificationService",
    "ArtworkService",
    "CourseService",
    "CartService",
    "WishlistService",
    "CommissionService",
    "OrderService",
    "DashboardService",
    "ContactService",
]
