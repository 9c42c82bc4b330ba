# ==============================================================================
# API PACKAGE INITIALIZATION
# ==============================================================================

"""
API Module
==========

FastAPI routers and endpoint definitions:
- Dependencies: Settings, storage, session authentication, services
- Routers: Auth, Users, Artworks, Courses, Cart, Wishlist,
  Commissions, Orders, Dashboard, Contact
"""

from artverse.api.router import api_router

__all__ = ["api_router"]
