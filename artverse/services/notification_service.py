# ==============================================================================
# NOTIFICATION SERVICE - Inbox Writes
# ==============================================================================
# Notifications are a side effect of other operations and must never
# fail the operation that triggered them
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from artverse.core.constants import DatabaseConstants
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.domain_models.notification import NotificationType
from artverse.domain_models.user import UserRole
from artverse.schemas.notification import NotificationResponse
from artverse.services.base_service import BaseService
from artverse.utils.helpers import to_object_id

logger = logging.getLogger(__name__)


class NotificationService(BaseService[NotificationResponse]):
    """
    Writes and reads user notifications.

    ``notify`` is best-effort: every failure is logged and swallowed.
    """

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        """Initialize notification service."""
        super().__init__(adapter, DatabaseConstants.NOTIFICATIONS_COLLECTION)

    def _to_response(self, entity: Dict[str, Any]) -> NotificationResponse:
        """Convert notification document to response schema."""
        return NotificationResponse.model_validate(entity)

    async def notify(
        self,
        user_id: Any,
        notification_type: NotificationType,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """
        Insert an unread notification.

        Args:
            user_id: Recipient
            notification_type: Event type
            message: Human readable text
            metadata: Ids and amounts related to the event

        Returns:
            True if the notification was stored
        """
        try:
            await self._adapter.create(
                self._collection_name,
                {
                    "user_id": to_object_id(user_id, "user"),
                    "type": NotificationType(notification_type).value,
                    "message": message,
                    "metadata": metadata or {},
                    "read": False,
                },
            )
            return True
        except Exception:
            logger.exception(f"Failed to notify user {user_id} ({notification_type})")
            return False

    async def notify_first_admin(
        self,
        notification_type: NotificationType,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Notify the first admin account found, if any."""
        try:
            admin = await self._adapter.find_one(
                DatabaseConstants.USERS_COLLECTION,
                {"role": UserRole.ADMIN.value},
            )
        except Exception:
            logger.exception("Failed to look up an admin to notify")
            return False

        if not admin:
            logger.warning(f"No admin account to receive {notification_type} notification")
            return False
        return await self.notify(admin["id"], notification_type, message, metadata)

    async def list_for_user(self, user_id: str) -> List[NotificationResponse]:
        """All notifications of a user, newest first."""
        documents = await self._adapter.get_all(
            self._collection_name,
            limit=None,
            filters={"user_id": to_object_id(user_id, "user")},
            sort_by="created_at",
            sort_order="desc",
        )
        return [self._to_response(doc) for doc in documents]
