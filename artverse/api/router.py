# ==============================================================================
# MAIN API ROUTER - Route Aggregation
# ==============================================================================
# Combines all v1 routers; the version prefix is applied by the
# application factory from settings
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter

from artverse.api.v1 import (
    artworks_router,
    auth_router,
    cart_router,
    commissions_router,
    contact_router,
    courses_router,
    dashboard_router,
    orders_router,
    users_router,
    wishlist_router,
)

# Create main API router
api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(artworks_router)
api_router.include_router(courses_router)
api_router.include_router(cart_router)
api_router.include_router(wishlist_router)
api_router.include_router(commissions_router)
api_router.include_router(orders_router)
api_router.include_router(dashboard_router)
api_router.include_router(contact_router)
