# ==============================================================================
# COURSE MODEL - Lesson Sequences
# ==============================================================================

from __future__ import annotations

import enum


class CourseStatus(str, enum.Enum):
    """
    Course lifecycle states.

    Approval is tracked separately in ``is_approved``; a course is
    purchasable only when published and approved.
    """
    DRAFT = "draft"
    PUBLISHED = "published"
    REJECTED = "rejected"
