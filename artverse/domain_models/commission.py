# ==============================================================================
# COMMISSION MODEL - Negotiation Lifecycle
# ==============================================================================
# Status vocabulary plus the transition table enforced by the service
# ==============================================================================

from __future__ import annotations

import enum
from typing import Dict, FrozenSet


class CommissionStatus(str, enum.Enum):
    """Commission lifecycle states."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    # No handler moves a commission here; kept for stored data.
    CANCELLED = "cancelled"


class PaymentStatus(str, enum.Enum):
    """Commission payment states."""
    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"


class MessageSender(str, enum.Enum):
    """Which participant wrote a commission message."""
    BUYER = "buyer"
    ARTIST = "artist"


# Targets an artist may request through the status endpoint
ARTIST_TARGETS: FrozenSet[CommissionStatus] = frozenset({
    CommissionStatus.ACCEPTED,
    CommissionStatus.REJECTED,
    CommissionStatus.IN_PROGRESS,
    CommissionStatus.COMPLETED,
})

TRANSITIONS: Dict[CommissionStatus, FrozenSet[CommissionStatus]] = {
    CommissionStatus.PENDING: frozenset({
        CommissionStatus.ACCEPTED,
        CommissionStatus.REJECTED,
    }),
    CommissionStatus.ACCEPTED: frozenset({CommissionStatus.IN_PROGRESS}),
    CommissionStatus.IN_PROGRESS: frozenset({CommissionStatus.COMPLETED}),
    CommissionStatus.REJECTED: frozenset(),
    CommissionStatus.COMPLETED: frozenset(),
    CommissionStatus.CANCELLED: frozenset(),
}


def can_transition(current: CommissionStatus, target: CommissionStatus) -> bool:
    """Check whether ``target`` is a legal successor of ``current``."""
    return target in ARTIST_TARGETS and target in TRANSITIONS.get(current, frozenset())
