# ==============================================================================
# API V1 ENDPOINTS PACKAGE
# ==============================================================================

"""
API V1 Endpoints
================

Version 1 API endpoint implementations.
"""

from artverse.api.v1.auth import router as auth_router
from artverse.api.v1.users import router as users_router
from artverse.api.v1.artworks import router as artworks_router
from artverse.api.v1.courses import router as courses_router
from artverse.api.v1.buyer import cart_router, wishlist_router
from artverse.api.v1.commissions import router as commissions_router
from artverse.api.v1.orders import router as orders_router
from artverse.api.v1.dashboard import router as dashboard_router
from artverse.api.v1.contact import router as contact_router

__all__ = [
    "auth_router",
    "users_router",
    "artworks_router",
    "courses_router",
    "cart_router",
    "wishlist_router",
    "commissions_router",
    "orders_router",
    "dashboard_router",
    "contact_router",
]
