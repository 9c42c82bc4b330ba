# ==============================================================================
# HELPER UTILITIES
# ==============================================================================
# Common utility functions used across the application
# ==============================================================================

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Any, Dict

from bson import ObjectId

from artverse.core.exceptions import ValidationError


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def to_object_id(value: Any, label: str = "resource") -> ObjectId:
    """
    Parse a client-supplied identifier.

    Args:
        value: 24-hex string or ObjectId
        label: Entity name used in the error message

    Returns:
        ObjectId instance

    Raises:
        ValidationError: If the value is not a valid ObjectId
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise ValidationError(f"Invalid {label} ID")
    return ObjectId(value)


def escape_search(term: str) -> str:
    """Escape a free-text search term for use inside ``$regex``."""
    return re.escape(term.strip())


def pagination_meta(total: int, page: int, limit: int) -> Dict[str, int]:
    """
    Create pagination metadata for the list envelope.

    Args:
        total: Total matching documents
        page: Current page number (1-indexed)
        limit: Items per page

    Returns:
        Dict with total, page, pages and limit
    """
    pages = math.ceil(total / limit) if total > 0 else 0
    return {
        "total": total,
        "page": page,
        "pages": pages,
        "limit": limit,
    }


def calculate_offset(page: int, limit: int) -> int:
    """Calculate database offset from page number."""
    return (page - 1) * limit
