# ==============================================================================
# ORDER SERVICE - Purchases & Fulfillment
# ==============================================================================
# All-or-nothing order validation, persistence, then best-effort fan-out
# of sold marks, enrollments and notifications
# ==============================================================================

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from artverse.core.constants import APIConstants, DatabaseConstants, ErrorMessages
from artverse.core.exceptions import AlreadyExistsError, NotFoundError, ValidationError
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.domain_models.artwork import ArtworkStatus
from artverse.domain_models.commerce import ItemType, OrderStatus, PayoutStatus
from artverse.domain_models.notification import NotificationType
from artverse.schemas.order import OrderCreate, OrderResponse, OrderStatusUpdate
from artverse.services.base_service import BaseService
from artverse.services.catalog_items import ResolvedItem, resolve_typed_item
from artverse.services.lookups import resolve_users
from artverse.services.notification_service import NotificationService
from artverse.utils.helpers import to_object_id, utc_now

logger = logging.getLogger(__name__)


class OrderService(BaseService[OrderResponse]):
    """
    Order placement and administration.

    Prices and titles always come from current storage. The order is
    written only when every line is purchasable; the follow-up writes
    are not transactional and are never rolled back.
    """

    def __init__(
        self,
        adapter: BaseDatabaseAdapter,
        notifications: NotificationService,
    ) -> None:
        """Initialize order service."""
        super().__init__(adapter, DatabaseConstants.ORDERS_COLLECTION)
        self._notifications = notifications

    def _to_response(self, entity: Dict[str, Any]) -> OrderResponse:
        """Convert order document to response schema."""
        return OrderResponse.model_validate(entity)

    # ==========================================================================
    # PLACEMENT
    # ==========================================================================

    async def create(self, buyer_id: str, schema: OrderCreate) -> OrderResponse:
        """
        Place an order.

        Raises:
            ValidationError: If the same item is listed twice
            UnavailableError: If any line is missing or not purchasable
            AlreadyExistsError: If the payment was already used
        """
        lines = [(line.item_type, line.item_id) for line in schema.items]
        if len(set(lines)) != len(lines):
            raise ValidationError(message=ErrorMessages.DUPLICATE_ORDER_LINE)

        resolved: List[ResolvedItem] = await asyncio.gather(
            *(
                resolve_typed_item(self._adapter, line.item_type, line.item_id)
                for line in schema.items
            )
        )

        if await self._adapter.exists(self._collection_name, {"payment_id": schema.payment_id}):
            raise AlreadyExistsError(message=ErrorMessages.ORDER_EXISTS, resource_type="order")

        items = [
            {
                "item_type": item.item_type.value,
                "item_id": to_object_id(item.id),
                "price": item.price,
                "title": item.title,
                "artist_id": to_object_id(item.artist_id) if item.artist_id else None,
            }
            for item in resolved
        ]
        order = await self._adapter.create(
            self._collection_name,
            {
                "buyer_id": to_object_id(buyer_id, "buyer"),
                "items": items,
                "total": sum(item["price"] for item in items),
                "payment_id": schema.payment_id,
                "shipping_address": (
                    schema.shipping_address.model_dump() if schema.shipping_address else None
                ),
                "status": OrderStatus.COMPLETED.value,
                "payout_status": PayoutStatus.PENDING.value,
            },
        )
        logger.info(f"Order {order['id']} placed by {buyer_id} ({len(items)} items)")

        await self._fulfill(order, resolved, buyer_id)
        return self._to_response(order)

    async def _fulfill(
        self,
        order: Dict[str, Any],
        resolved: List[ResolvedItem],
        buyer_id: str,
    ) -> None:
        """Secondary writes after an order is stored. Failures are logged only."""
        await self._notifications.notify(
            buyer_id,
            NotificationType.ORDER_CONFIRMATION,
            f"Your order of {order['total']} has been confirmed",
            {"order_id": order["id"], "total": order["total"]},
        )

        for item in resolved:
            if item.item_type == ItemType.ARTWORK:
                await self._mark_sold(order, item)
            else:
                await self._enroll(order, item, buyer_id)

    async def _mark_sold(self, order: Dict[str, Any], item: ResolvedItem) -> None:
        try:
            await self._adapter.update(
                DatabaseConstants.ARTWORKS_COLLECTION,
                to_object_id(item.id),
                {"status": ArtworkStatus.SOLD.value, "sold_at": utc_now()},
            )
        except Exception:
            logger.exception(f"Order {order['id']}: failed to mark artwork {item.id} sold")

        if item.artist_id:
            await self._notifications.notify(
                item.artist_id,
                NotificationType.ARTWORK_SOLD,
                f'Your artwork "{item.title}" was sold for {item.price}',
                {"order_id": order["id"], "artwork_id": item.id, "amount": item.price},
            )

    async def _enroll(self, order: Dict[str, Any], item: ResolvedItem, buyer_id: str) -> None:
        student = to_object_id(buyer_id, "buyer")
        try:
            await self._adapter.update_one(
                DatabaseConstants.COURSES_COLLECTION,
                {"_id": to_object_id(item.id), "students": {"$ne": student}},
                {"$push": {"students": student}, "$inc": {"student_count": 1}},
            )
        except Exception:
            logger.exception(f"Order {order['id']}: failed to enroll {buyer_id} in course {item.id}")

        if item.artist_id:
            await self._notifications.notify(
                item.artist_id,
                NotificationType.COURSE_ENROLLMENT,
                f'A student bought your course "{item.title}"',
                {"order_id": order["id"], "course_id": item.id, "amount": item.price},
            )

    # ==========================================================================
    # READS
    # ==========================================================================

    async def history(self, buyer_id: str) -> List[OrderResponse]:
        """Orders of a buyer, newest first."""
        documents = await self._adapter.get_all(
            self._collection_name,
            limit=DatabaseConstants.DEFAULT_QUERY_LIMIT,
            filters={"buyer_id": to_object_id(buyer_id, "buyer")},
            sort_by="created_at",
            sort_order="desc",
        )
        return [self._to_response(doc) for doc in documents]

    async def list_orders(
        self,
        status: Optional[OrderStatus] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        page: int = 1,
        limit: int = APIConstants.ORDERS_PAGE_SIZE,
    ) -> Dict[str, Any]:
        """Paginated orders for administrators, buyers resolved."""
        filters: Dict[str, Any] = {}
        if status:
            filters["status"] = OrderStatus(status).value

        created: Dict[str, datetime] = {}
        if start_date:
            created["$gte"] = start_date
        if end_date:
            created["$lte"] = end_date
        if created:
            filters["created_at"] = created

        page_data = await self._get_page(page, limit, filters, "created_at", "desc")
        documents = page_data["documents"]
        buyers = await resolve_users(self._adapter, (d.get("buyer_id") for d in documents))
        return {
            "items": [
                self._to_response({**doc, "buyer": buyers.get(doc.get("buyer_id"))})
                for doc in documents
            ],
            "pagination": page_data["pagination"],
        }

    # ==========================================================================
    # ADMINISTRATION
    # ==========================================================================

    async def update_status(
        self,
        order_id: str,
        schema: OrderStatusUpdate,
    ) -> OrderResponse:
        """
        Change order and/or payout status.

        Raises:
            ValidationError: If neither field is given
            NotFoundError: If the order does not exist
        """
        changes = schema.model_dump(exclude_none=True)
        if not changes:
            raise ValidationError(message=ErrorMessages.NO_STATUS_FIELDS)

        order = await self._get_document(order_id, ErrorMessages.ORDER_NOT_FOUND, "order")
        result = await self._adapter.update(self._collection_name, order["id"], changes)
        if not result:
            raise NotFoundError(message=ErrorMessages.ORDER_NOT_FOUND, resource_id=order_id)

        new_status = changes.get("status")
        if new_status and new_status != order.get("status"):
            logger.info(f"Order {order_id}: {order.get('status')} -> {new_status}")
            await self._notifications.notify(
                order["buyer_id"],
                NotificationType.ORDER_UPDATE,
                f"Your order is now {new_status}",
                {"order_id": order["id"], "status": new_status},
            )
        return self._to_response(result)
