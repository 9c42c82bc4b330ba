# ==============================================================================
# ARTVERSE PACKAGE
# ==============================================================================

"""
ArtVerse Marketplace API
========================

Backend connecting artists with buyers: moderated artwork and course
catalogs, carts and wishlists, orders with fulfillment, and a commission
workflow with an embedded message thread.
"""

__version__ = "1.0.0"
