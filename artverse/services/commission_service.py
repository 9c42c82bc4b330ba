# ==============================================================================
# COMMISSION SERVICE - Negotiation Workflow
# ==============================================================================
# Buyer requests, artist-driven status lifecycle and the shared
# append-only message thread
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId

from artverse.core.constants import DatabaseConstants, ErrorMessages
from artverse.core.exceptions import (
    AuthorizationError,
    BusinessRuleError,
    NotFoundError,
)
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.domain_models.commission import (
    ARTIST_TARGETS,
    CommissionStatus,
    MessageSender,
    PaymentStatus,
    can_transition,
)
from artverse.domain_models.notification import NotificationType
from artverse.domain_models.user import CurrentUser, UserRole
from artverse.schemas.commission import CommissionCreate, CommissionResponse
from artverse.services.base_service import BaseService
from artverse.services.lookups import resolve_users
from artverse.services.notification_service import NotificationService
from artverse.utils.helpers import to_object_id, utc_now

logger = logging.getLogger(__name__)


class CommissionService(BaseService[CommissionResponse]):
    """
    Commission workflow.

    Lifecycle: pending -> accepted -> in_progress -> completed, or
    pending -> rejected. Only the assigned artist moves the status;
    either participant may post messages.
    """

    def __init__(
        self,
        adapter: BaseDatabaseAdapter,
        notifications: NotificationService,
    ) -> None:
        """Initialize commission service."""
        super().__init__(adapter, DatabaseConstants.COMMISSIONS_COLLECTION)
        self._notifications = notifications

    def _to_response(self, entity: Dict[str, Any]) -> CommissionResponse:
        """Convert commission document to response schema."""
        return CommissionResponse.model_validate(entity)

    async def _with_participants(
        self,
        documents: List[Dict[str, Any]],
    ) -> List[CommissionResponse]:
        ids = [d.get("buyer_id") for d in documents] + [d.get("artist_id") for d in documents]
        users = await resolve_users(self._adapter, ids)
        return [
            self._to_response(
                {
                    **doc,
                    "buyer": users.get(doc.get("buyer_id")),
                    "artist": users.get(doc.get("artist_id")),
                }
            )
            for doc in documents
        ]

    async def _get_commission(self, commission_id: str) -> Dict[str, Any]:
        return await self._get_document(
            commission_id,
            ErrorMessages.COMMISSION_NOT_FOUND,
            "commission",
        )

    @staticmethod
    def _sender_of(commission: Dict[str, Any], user: CurrentUser) -> MessageSender:
        """Participant side of the caller; raises for outsiders."""
        if user.owns(commission.get("buyer_id")):
            return MessageSender.BUYER
        if user.owns(commission.get("artist_id")):
            return MessageSender.ARTIST
        raise AuthorizationError(message=ErrorMessages.NOT_COMMISSION_PARTICIPANT)

    # ==========================================================================
    # WORKFLOW
    # ==========================================================================

    async def create(
        self,
        buyer_id: str,
        artist_id: str,
        schema: CommissionCreate,
    ) -> CommissionResponse:
        """
        Open a commission with an artist.

        The description becomes the first message of the thread.

        Raises:
            NotFoundError: If ``artist_id`` is not an artist
        """
        artist_oid = to_object_id(artist_id, "artist")
        artist = await self._adapter.find_one(
            DatabaseConstants.USERS_COLLECTION,
            {"_id": artist_oid, "role": UserRole.ARTIST.value},
        )
        if not artist:
            raise NotFoundError(
                message=ErrorMessages.ARTIST_NOT_FOUND,
                resource_type="artist",
                resource_id=artist_id,
            )

        data = schema.model_dump()
        data.update(
            {
                "buyer_id": to_object_id(buyer_id, "buyer"),
                "artist_id": artist_oid,
                "status": CommissionStatus.PENDING.value,
                "payment_status": PaymentStatus.PENDING.value,
                "messages": [
                    {
                        "_id": ObjectId(),
                        "sender": MessageSender.BUYER.value,
                        "content": schema.description,
                        "sent_at": utc_now(),
                    }
                ],
            }
        )

        result = await self._adapter.create(self._collection_name, data)
        logger.info(f"Commission {result['id']} opened by {buyer_id} with {artist_id}")

        await self._notifications.notify(
            artist_id,
            NotificationType.NEW_COMMISSION,
            f'New commission request: "{schema.title}"',
            {"commission_id": result["id"], "buyer_id": buyer_id},
        )
        return self._to_response(result)

    async def add_message(
        self,
        commission_id: str,
        user: CurrentUser,
        content: str,
    ) -> CommissionResponse:
        """
        Append a message from either participant.

        Raises:
            AuthorizationError: If the caller is not a participant
        """
        commission = await self._get_commission(commission_id)
        sender = self._sender_of(commission, user)

        result = await self._adapter.update_one(
            self._collection_name,
            {"_id": to_object_id(commission["id"])},
            {
                "$push": {
                    "messages": {
                        "_id": ObjectId(),
                        "sender": sender.value,
                        "content": content,
                        "sent_at": utc_now(),
                    }
                }
            },
        )
        if not result:
            raise NotFoundError(message=ErrorMessages.COMMISSION_NOT_FOUND, resource_id=commission_id)

        recipient = (
            commission["artist_id"] if sender == MessageSender.BUYER else commission["buyer_id"]
        )
        await self._notifications.notify(
            recipient,
            NotificationType.COMMISSION_MESSAGE,
            f'New message on commission "{commission["title"]}"',
            {"commission_id": commission["id"]},
        )
        return (await self._with_participants([result]))[0]

    async def update_status(
        self,
        commission_id: str,
        user: CurrentUser,
        target: CommissionStatus,
    ) -> CommissionResponse:
        """
        Move a commission along its lifecycle.

        Raises:
            AuthorizationError: If the caller is not the assigned artist
            BusinessRuleError: If the target is not an artist target or
                not a legal successor of the current status
        """
        commission = await self._get_commission(commission_id)
        if not user.owns(commission.get("artist_id")):
            raise AuthorizationError(message=ErrorMessages.NOT_COMMISSION_PARTICIPANT)

        target = CommissionStatus(target)
        if target not in ARTIST_TARGETS:
            raise BusinessRuleError(
                message=ErrorMessages.COMMISSION_STATUS_NOT_ALLOWED,
                rule="artist_targets",
            )

        current = CommissionStatus(commission["status"])
        if not can_transition(current, target):
            raise BusinessRuleError(
                message=ErrorMessages.COMMISSION_TRANSITION_INVALID.format(
                    current=current.value,
                    target=target.value,
                ),
                rule="commission_lifecycle",
            )

        result = await self._adapter.update_one(
            self._collection_name,
            {"_id": to_object_id(commission["id"]), "status": current.value},
            {"$set": {"status": target.value}},
        )
        if not result:
            raise BusinessRuleError(message=ErrorMessages.COMMISSION_CHANGED)

        logger.info(f"Commission {commission_id}: {current.value} -> {target.value}")
        await self._notifications.notify(
            commission["buyer_id"],
            NotificationType.COMMISSION_UPDATE,
            f'Commission "{commission["title"]}" is now {target.value.replace("_", " ")}',
            {"commission_id": commission["id"], "status": target.value},
        )
        return (await self._with_participants([result]))[0]

    # ==========================================================================
    # READS
    # ==========================================================================

    async def get(self, commission_id: str, user: CurrentUser) -> CommissionResponse:
        """One commission, visible to its participants only."""
        commission = await self._get_commission(commission_id)
        self._sender_of(commission, user)
        return (await self._with_participants([commission]))[0]

    async def list_for_user(
        self,
        user: CurrentUser,
        status: Optional[CommissionStatus] = None,
    ) -> List[CommissionResponse]:
        """Commissions where the caller is buyer or artist, newest first."""
        oid = to_object_id(user.id, "user")
        filters: Dict[str, Any] = {"$or": [{"buyer_id": oid}, {"artist_id": oid}]}
        if status:
            filters["status"] = CommissionStatus(status).value

        documents = await self._adapter.get_all(
            self._collection_name,
            limit=DatabaseConstants.DEFAULT_QUERY_LIMIT,
            filters=filters,
            sort_by="created_at",
            sort_order="desc",
        )
        return await self._with_participants(documents)
