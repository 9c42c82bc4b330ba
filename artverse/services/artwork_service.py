# ==============================================================================
# ARTWORK SERVICE - Moderated Listings
# ==============================================================================
# Submission, moderation, public browsing and owner edits of artworks
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from artverse.core.constants import (
    APIConstants,
    CatalogConstants,
    DatabaseConstants,
    ErrorMessages,
)
from artverse.core.exceptions import (
    AuthorizationError,
    BusinessRuleError,
    NotFoundError,
)
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.domain_models.artwork import ArtworkStatus, RejectionReason
from artverse.domain_models.notification import NotificationType
from artverse.domain_models.user import CurrentUser, UserRole
from artverse.schemas.artwork import ArtworkCreate, ArtworkResponse, ArtworkUpdate
from artverse.services.base_service import BaseService
from artverse.services.lookups import resolve_users
from artverse.services.notification_service import NotificationService
from artverse.storage import ImageStorage, discard_images
from artverse.utils.helpers import escape_search, to_object_id, utc_now

logger = logging.getLogger(__name__)


class ArtworkService(BaseService[ArtworkResponse]):
    """
    Artwork catalog and moderation workflow.

    Only approved artworks are public. Any owner edit sends an artwork
    back to ``pending``; ``sold`` is terminal.
    """

    def __init__(
        self,
        adapter: BaseDatabaseAdapter,
        storage: ImageStorage,
        notifications: NotificationService,
    ) -> None:
        """Initialize artwork service."""
        super().__init__(adapter, DatabaseConstants.ARTWORKS_COLLECTION)
        self._storage = storage
        self._notifications = notifications

    def _to_response(self, entity: Dict[str, Any]) -> ArtworkResponse:
        """Convert artwork document to response schema."""
        return ArtworkResponse.model_validate(entity)

    async def _with_artists(self, documents: List[Dict[str, Any]]) -> List[ArtworkResponse]:
        artists = await resolve_users(self._adapter, (d.get("artist_id") for d in documents))
        return [
            self._to_response({**doc, "artist": artists.get(doc.get("artist_id"))})
            for doc in documents
        ]

    async def _get_artwork(self, artwork_id: str) -> Dict[str, Any]:
        return await self._get_document(artwork_id, ErrorMessages.ARTWORK_NOT_FOUND, "artwork")

    # ==========================================================================
    # ARTIST OPERATIONS
    # ==========================================================================

    async def create(self, artist_id: str, schema: ArtworkCreate) -> ArtworkResponse:
        """
        Submit an artwork for moderation.

        The first admin account is told that a review is waiting.
        """
        data = schema.model_dump()
        data.update(
            {
                "artist_id": to_object_id(artist_id, "artist"),
                "status": ArtworkStatus.PENDING.value,
                "rejection_reason": None,
                "stats": {"views": 0, "likes": 0},
                "approved_at": None,
                "sold_at": None,
            }
        )

        result = await self._adapter.create(self._collection_name, data)
        logger.info(f"Artwork {result['id']} submitted by {artist_id}")

        await self._notifications.notify_first_admin(
            NotificationType.APPROVAL,
            f'New artwork "{result["title"]}" is waiting for review',
            {"artwork_id": result["id"], "artist_id": artist_id},
        )
        return self._to_response(result)

    async def update(
        self,
        artwork_id: str,
        user: CurrentUser,
        schema: ArtworkUpdate,
    ) -> ArtworkResponse:
        """
        Edit an owned artwork and resubmit it for review.

        Replaced images are removed from the image host afterwards.
        """
        artwork = await self._get_artwork(artwork_id)
        if not user.owns(artwork.get("artist_id")):
            raise AuthorizationError(message=ErrorMessages.NOT_ARTWORK_OWNER)
        if artwork.get("status") == ArtworkStatus.SOLD.value:
            raise BusinessRuleError(message=ErrorMessages.ARTWORK_SOLD, rule="sold_is_terminal")

        changes = schema.model_dump(exclude_unset=True, exclude_none=True)
        changes["status"] = ArtworkStatus.PENDING.value
        changes["rejection_reason"] = None

        result = await self._adapter.update(self._collection_name, artwork["id"], changes)
        if not result:
            raise NotFoundError(message=ErrorMessages.ARTWORK_NOT_FOUND, resource_id=artwork_id)

        if "images" in changes:
            kept = {image["public_id"] for image in changes["images"]}
            stale = [
                image.get("public_id")
                for image in artwork.get("images", [])
                if image.get("public_id") not in kept
            ]
            await discard_images(self._storage, stale)

        logger.info(f"Artwork {artwork_id} edited, back to pending")
        return self._to_response(result)

    async def delete(self, artwork_id: str, user: CurrentUser) -> bool:
        """Delete an artwork (owner or admin) and its hosted images."""
        artwork = await self._get_artwork(artwork_id)
        if not (user.is_admin or user.owns(artwork.get("artist_id"))):
            raise AuthorizationError(message=ErrorMessages.NOT_ARTWORK_OWNER)

        await self._adapter.delete(self._collection_name, artwork["id"])
        await discard_images(
            self._storage,
            [image.get("public_id") for image in artwork.get("images", [])],
        )
        logger.info(f"Artwork {artwork_id} deleted by {user.id}")
        return True

    # ==========================================================================
    # MODERATION
    # ==========================================================================

    async def approve(self, artwork_id: str) -> ArtworkResponse:
        """Make an artwork public and tell its artist."""
        artwork = await self._get_artwork(artwork_id)
        if artwork.get("status") == ArtworkStatus.SOLD.value:
            raise BusinessRuleError(message=ErrorMessages.ARTWORK_SOLD, rule="sold_is_terminal")

        result = await self._adapter.update(
            self._collection_name,
            artwork["id"],
            {
                "status": ArtworkStatus.APPROVED.value,
                "approved_at": utc_now(),
                "rejection_reason": None,
            },
        )
        logger.info(f"Artwork {artwork_id} approved")

        await self._notifications.notify(
            artwork["artist_id"],
            NotificationType.ARTWORK_APPROVED,
            f'Your artwork "{artwork["title"]}" has been approved',
            {"artwork_id": artwork["id"]},
        )
        return self._to_response(result)

    async def reject(
        self,
        artwork_id: str,
        reason: Optional[RejectionReason] = None,
    ) -> ArtworkResponse:
        """Reject an artwork with an optional reason and tell its artist."""
        artwork = await self._get_artwork(artwork_id)
        if artwork.get("status") == ArtworkStatus.SOLD.value:
            raise BusinessRuleError(message=ErrorMessages.ARTWORK_SOLD, rule="sold_is_terminal")

        reason_value = RejectionReason(reason).value if reason else None
        result = await self._adapter.update(
            self._collection_name,
            artwork["id"],
            {
                "status": ArtworkStatus.REJECTED.value,
                "rejection_reason": reason_value,
            },
        )
        logger.info(f"Artwork {artwork_id} rejected ({reason_value})")

        message = f'Your artwork "{artwork["title"]}" has been rejected'
        if reason_value:
            message += f": {reason_value.replace('_', ' ')}"
        await self._notifications.notify(
            artwork["artist_id"],
            NotificationType.ARTWORK_REJECTED,
            message,
            {"artwork_id": artwork["id"], "reason": reason_value},
        )
        return self._to_response(result)

    # ==========================================================================
    # BROWSING
    # ==========================================================================

    @staticmethod
    def _visible_status(
        viewer: Optional[CurrentUser],
        requested: Optional[str],
        artist_id: Optional[str],
    ) -> str:
        """
        Status a listing may filter on.

        Anything but ``approved`` is only honored for admins and for an
        artist looking at their own catalog.
        """
        if not requested or requested == ArtworkStatus.APPROVED.value:
            return ArtworkStatus.APPROVED.value
        if viewer and viewer.is_admin:
            return requested
        if viewer and viewer.role == UserRole.ARTIST.value and artist_id == viewer.id:
            return requested
        return ArtworkStatus.APPROVED.value

    async def list_artworks(
        self,
        viewer: Optional[CurrentUser] = None,
        category: Optional[str] = None,
        artist_id: Optional[str] = None,
        status: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        search: Optional[str] = None,
        sort: Optional[str] = None,
        page: int = 1,
        limit: int = APIConstants.DEFAULT_PAGE_SIZE,
    ) -> Dict[str, Any]:
        """
        Filter, sort and paginate artworks.

        Returns:
            Dict with ``items`` and ``pagination``
        """
        filters: Dict[str, Any] = {
            "status": self._visible_status(viewer, status, artist_id),
        }
        if category:
            filters["category"] = category
        if artist_id:
            filters["artist_id"] = to_object_id(artist_id, "artist")

        price: Dict[str, float] = {}
        if min_price is not None:
            price["$gte"] = min_price
        if max_price is not None:
            price["$lte"] = max_price
        if price:
            filters["price"] = price

        if search and search.strip():
            pattern = {"$regex": escape_search(search), "$options": "i"}
            filters["$or"] = [{"title": pattern}, {"description": pattern}]

        sort_by, sort_order = CatalogConstants.ARTWORK_SORTS.get(
            sort or CatalogConstants.DEFAULT_SORT,
            CatalogConstants.ARTWORK_SORTS[CatalogConstants.DEFAULT_SORT],
        )
        limit = min(max(limit, 1), APIConstants.MAX_PAGE_SIZE)

        page_data = await self._get_page(page, limit, filters, sort_by, sort_order)
        return {
            "items": await self._with_artists(page_data["documents"]),
            "pagination": page_data["pagination"],
        }

    async def get(
        self,
        artwork_id: str,
        viewer: Optional[CurrentUser] = None,
    ) -> ArtworkResponse:
        """
        Read one artwork, counting the view.

        Raises:
            AuthorizationError: If the artwork is not public and the viewer
                is neither its artist nor an admin
        """
        artwork = await self._get_artwork(artwork_id)

        if artwork.get("status") != ArtworkStatus.APPROVED.value:
            privileged = viewer is not None and (
                viewer.is_admin or viewer.owns(artwork.get("artist_id"))
            )
            if not privileged:
                raise AuthorizationError(message=ErrorMessages.ARTWORK_NOT_PUBLIC)

        counted = await self._adapter.update_one(
            self._collection_name,
            {"_id": to_object_id(artwork["id"])},
            {"$inc": {"stats.views": 1}},
            touch=False,
        )
        return (await self._with_artists([counted or artwork]))[0]
