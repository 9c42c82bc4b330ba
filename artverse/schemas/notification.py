# ==============================================================================
# NOTIFICATION SCHEMAS
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from artverse.domain_models.notification import NotificationType
from artverse.schemas.base import BaseSchema


class NotificationResponse(BaseSchema):
    """Inbox entry."""

    id: str
    user_id: str
    type: NotificationType
    message: str
    metadata: Dict[str, Any] = Field(default_factory=dict)
    read: bool = False
    created_at: Optional[datetime] = None
