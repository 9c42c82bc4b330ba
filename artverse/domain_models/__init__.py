# ==============================================================================
# DOMAIN MODELS PACKAGE INITIALIZATION
# ==============================================================================

"""
Domain Models
=============

Closed vocabularies of the marketplace documents:
- user: Roles
- artwork: Categories, moderation states, rejection reasons
- course: Course lifecycle states
- commerce: Polymorphic item types, order and payout states
- commission: Negotiation lifecycle and its legal transitions
- notification: Inbox event types
"""

from artverse.domain_models.user import CurrentUser, UserRole
from artverse.domain_models.artwork import (
    ArtworkCategory,
    ArtworkStatus,
    RejectionReason,
)
from artverse.domain_models.course import CourseStatus
from artverse.domain_models.commerce import ItemType, OrderStatus, PayoutStatus
from artverse.domain_models.commission import (
    CommissionStatus,
    MessageSender,
    PaymentStatus,
    can_transition,
)
from artverse.domain_models.notification import NotificationType

__all__ = [
    "CurrentUser",
    "UserRole",
    "ArtworkCategory",
    "ArtworkStatus",
    "RejectionReason",
    "CourseStatus",
    "ItemType",
    "OrderStatus",
    "PayoutStatus",
    "CommissionStatus",
    "MessageSender",
    "PaymentStatus",
    "can_transition",
    "NotificationType",
]
