# ==============================================================================
# ARTWORK MODEL - Moderated Art Listings
# ==============================================================================
# Category, moderation state and rejection vocabularies
# ==============================================================================

from __future__ import annotations

import enum


class ArtworkCategory(str, enum.Enum):
    """Artwork categories."""
    PAINTING = "Painting"
    SKETCH = "Sketch"
    DIGITAL = "Digital"
    SCULPTURE = "Sculpture"
    PHOTOGRAPHY = "Photography"


class ArtworkStatus(str, enum.Enum):
    """
    Artwork moderation states.

    pending -> approved | rejected by an admin, approved -> pending on
    any owner edit, approved -> sold once an order is fulfilled.
    """
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SOLD = "sold"


class RejectionReason(str, enum.Enum):
    """Reasons an admin may give when rejecting an artwork."""
    LOW_QUALITY = "low_quality"
    COPYRIGHT_ISSUES = "copyright_issues"
    INAPPROPRIATE_CONTENT = "inappropriate_content"
    OTHER = "other"
