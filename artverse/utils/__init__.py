# ==============================================================================
# UTILS PACKAGE INITIALIZATION
# ==============================================================================

"""
Utilities Module
================

Helper functions and utilities:
- ObjectId parsing
- Pagination helpers
- Date/time utilities
"""

from artverse.utils.helpers import (
    calculate_offset,
    escape_search,
    pagination_meta,
    to_object_id,
    utc_now,
)

__all__ = [
    "calculate_offset",
    "escape_search",
    "pagination_meta",
    "to_object_id",
    "utc_now",
]
