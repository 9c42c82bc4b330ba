# ==============================================================================
# NOTIFICATION MODEL - Inbox Event Types
# ==============================================================================

from __future__ import annotations

import enum


class NotificationType(str, enum.Enum):
    """Event types written to a user's inbox."""
    PAYOUT = "payout"
    APPROVAL = "approval"
    PURCHASE = "purchase"
    SYSTEM = "system"
    NEW_COMMISSION = "new_commission"
    COMMISSION_UPDATE = "commission_update"
    COMMISSION_MESSAGE = "commission_message"
    ARTWORK_APPROVED = "artwork_approved"
    ARTWORK_REJECTED = "artwork_rejected"
    ORDER_CONFIRMATION = "order_confirmation"
    ORDER_UPDATE = "order_update"
    ARTWORK_SOLD = "artwork_sold"
    COURSE_ENROLLMENT = "course_enrollment"
    COURSE_APPROVAL = "course_approval"
    COURSE_APPROVED = "course_approved"
    COURSE_REJECTED = "course_rejected"
    NEW_ENROLLMENT = "new_enrollment"
