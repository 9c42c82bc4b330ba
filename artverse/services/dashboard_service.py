# ==============================================================================
# DASHBOARD SERVICE - Artist Summary
# ==============================================================================
# Read-only aggregate recomputed on every request from independent
# sub-queries run concurrently
# ==============================================================================

from __future__ import annotations

import asyncio
import logging
from collections import Counter, defaultdict
from typing import Any, Dict, List, Optional

from artverse.core.constants import DashboardConstants, DatabaseConstants
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.domain_models.commerce import ItemType
from artverse.schemas.artwork import ArtworkResponse
from artverse.schemas.commission import CommissionResponse
from artverse.schemas.dashboard import (
    DashboardCourse,
    DashboardNotifications,
    DashboardResponse,
    DashboardStats,
    MonthlyEarning,
    PopularArtwork,
)
from artverse.schemas.order import OrderResponse
from artverse.services.lookups import resolve_users
from artverse.services.notification_service import NotificationService
from artverse.utils.helpers import to_object_id, utc_now

logger = logging.getLogger(__name__)


class DashboardService:
    """
    Builds the artist dashboard.

    Every sub-query is independent, so they are gathered together; any
    failure fails the whole request.
    """

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        self._adapter = adapter
        self._notifications = NotificationService(adapter)

    async def _find(
        self,
        collection: str,
        filters: Dict[str, Any],
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Newest-first documents of a collection."""
        return await self._adapter.get_all(
            collection,
            limit=limit,
            filters=filters,
            sort_by="created_at",
            sort_order="desc",
        )

    @staticmethod
    def _artwork_orders(artist_oid: Any) -> Dict[str, Any]:
        """Orders with at least one artwork line of the artist."""
        return {
            "items": {
                "$elemMatch": {
                    "item_type": ItemType.ARTWORK.value,
                    "artist_id": artist_oid,
                }
            }
        }

    async def _popular_artworks(self, artist_oid: Any) -> List[Dict[str, Any]]:
        return await self._adapter.aggregate(
            DatabaseConstants.ARTWORKS_COLLECTION,
            [
                {"$match": {"artist_id": artist_oid}},
                {
                    "$lookup": {
                        "from": DatabaseConstants.ORDERS_COLLECTION,
                        "localField": "_id",
                        "foreignField": "items.item_id",
                        "as": "orders",
                    }
                },
                {"$project": {"title": 1, "sales": {"$size": "$orders"}}},
                {"$sort": {"sales": -1}},
                {"$limit": DashboardConstants.POPULAR_ARTWORKS_LIMIT},
            ],
        )

    async def _commissions(self, artist_oid: Any) -> List[Dict[str, Any]]:
        commissions = await self._find(
            DatabaseConstants.COMMISSIONS_COLLECTION,
            {"artist_id": artist_oid},
        )
        buyers = await resolve_users(self._adapter, (c.get("buyer_id") for c in commissions))
        return [{**c, "buyer": buyers.get(c.get("buyer_id"))} for c in commissions]

    async def _courses(self, artist_oid: Any) -> List[Dict[str, Any]]:
        courses = await self._find(
            DatabaseConstants.COURSES_COLLECTION,
            {"artist_id": artist_oid},
        )
        students = await resolve_users(
            self._adapter,
            (student for course in courses for student in course.get("students", [])),
        )
        return [
            {
                **course,
                "students": [
                    students[sid] for sid in course.get("students", []) if sid in students
                ],
            }
            for course in courses
        ]

    @staticmethod
    def _monthly_earnings(orders: List[Dict[str, Any]]) -> List[MonthlyEarning]:
        """Twelve buckets of order totals, orders already limited to one year."""
        buckets: Dict[int, float] = defaultdict(float)
        for order in orders:
            buckets[order["created_at"].month] += order.get("total", 0)
        return [
            MonthlyEarning(month=label, earnings=buckets[index + 1])
            for index, label in enumerate(DashboardConstants.MONTH_LABELS)
        ]

    async def build(self, artist_id: str) -> DashboardResponse:
        """Gather and derive every dashboard section."""
        artist_oid = to_object_id(artist_id, "artist")
        collections = DatabaseConstants

        (
            artworks,
            recent_orders,
            sales_orders,
            commissions,
            notifications,
            popular,
            courses,
        ) = await asyncio.gather(
            self._find(collections.ARTWORKS_COLLECTION, {"artist_id": artist_oid}),
            self._find(
                collections.ORDERS_COLLECTION,
                self._artwork_orders(artist_oid),
                limit=DashboardConstants.RECENT_ORDERS_LIMIT,
            ),
            self._find(collections.ORDERS_COLLECTION, self._artwork_orders(artist_oid)),
            self._commissions(artist_oid),
            self._notifications.list_for_user(artist_id),
            self._popular_artworks(artist_oid),
            self._courses(artist_oid),
        )

        grouped: Dict[str, List[CommissionResponse]] = defaultdict(list)
        for commission in commissions:
            grouped[commission["status"]].append(CommissionResponse.model_validate(commission))

        unread = [n for n in notifications if not n.read]
        year = utc_now().year
        yearly_orders = [
            order
            for order in sales_orders
            if order.get("created_at") is not None and order["created_at"].year == year
        ]

        stats = DashboardStats(
            total_artworks=len(artworks),
            total_sales=sum(order.get("total", 0) for order in yearly_orders),
            artworks_by_status=dict(Counter(a.get("status") for a in artworks)),
            commissions_by_status={status: len(items) for status, items in grouped.items()},
            monthly_earnings=self._monthly_earnings(yearly_orders),
            unread_notifications=len(unread),
        )
        logger.debug(f"Dashboard built for {artist_id}")

        return DashboardResponse(
            artworks=[ArtworkResponse.model_validate(a) for a in artworks],
            recent_orders=[OrderResponse.model_validate(o) for o in recent_orders],
            commissions=dict(grouped),
            notifications=DashboardNotifications(unread=unread, all=notifications),
            popular_artworks=[PopularArtwork.model_validate(p) for p in popular],
            courses=[DashboardCourse.model_validate(c) for c in courses],
            stats=stats,
        )
