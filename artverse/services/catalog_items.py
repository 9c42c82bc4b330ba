# ==============================================================================
# CATALOG ITEMS - Polymorphic Item Resolution
# ==============================================================================
# Cart, wishlist and order lines point at either an artwork or a course.
# This module resolves such a reference against current storage and
# applies the availability gate of its collection.
# ==============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from bson import ObjectId

from artverse.core.constants import DatabaseConstants, ErrorMessages
from artverse.core.exceptions import NotFoundError, UnavailableError
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.domain_models.artwork import ArtworkStatus
from artverse.domain_models.commerce import ItemType
from artverse.domain_models.course import CourseStatus
from artverse.utils.helpers import to_object_id, utc_now


@dataclass(frozen=True)
class ResolvedItem:
    """An available catalog entity tagged with the collection it came from."""

    item_type: ItemType
    document: Dict[str, Any]

    @property
    def id(self) -> str:
        return self.document["id"]

    @property
    def title(self) -> str:
        return self.document.get("title", "")

    @property
    def price(self) -> float:
        return self.document.get("price", 0)

    @property
    def artist_id(self) -> Optional[str]:
        return self.document.get("artist_id")

    @property
    def stock(self) -> Optional[int]:
        """Copies left; ``None`` for courses."""
        if self.item_type == ItemType.ARTWORK:
            return self.document.get("stock", 0)
        return None

    @property
    def thumbnail(self) -> Optional[str]:
        if self.item_type == ItemType.ARTWORK:
            images = self.document.get("images") or []
            return images[0].get("url") if images else None
        return (self.document.get("thumbnail") or {}).get("url")

    def snapshot(self) -> Dict[str, Any]:
        """Line item fields copied at add time."""
        return {
            "item_type": self.item_type.value,
            "item_id": to_object_id(self.id),
            "title": self.title,
            "price": self.price,
            "thumbnail": self.thumbnail,
            "artist_id": to_object_id(self.artist_id) if self.artist_id else None,
            "added_at": utc_now(),
        }


def is_available(item_type: ItemType, document: Dict[str, Any]) -> bool:
    """Gate applied before an item can be bought, carted or wished."""
    if item_type == ItemType.ARTWORK:
        return document.get("status") == ArtworkStatus.APPROVED.value
    return (
        document.get("status") == CourseStatus.PUBLISHED.value
        and bool(document.get("is_approved"))
    )


def _collection_for(item_type: ItemType) -> str:
    if item_type == ItemType.ARTWORK:
        return DatabaseConstants.ARTWORKS_COLLECTION
    return DatabaseConstants.COURSES_COLLECTION


async def resolve_item(
    adapter: BaseDatabaseAdapter,
    item_id: str,
) -> ResolvedItem:
    """
    Resolve an untyped item id, trying artworks first and then courses.

    Raises:
        ValidationError: If the id is malformed
        UnavailableError: If the item exists but fails its gate
        NotFoundError: If neither collection holds the id
    """
    oid = to_object_id(item_id, "item")

    for item_type, unavailable in (
        (ItemType.ARTWORK, ErrorMessages.ARTWORK_UNAVAILABLE),
        (ItemType.COURSE, ErrorMessages.COURSE_UNAVAILABLE),
    ):
        document = await adapter.get_by_id(_collection_for(item_type), oid)
        if document is None:
            continue
        if not is_available(item_type, document):
            raise UnavailableError(
                message=unavailable,
                details={"item_id": item_id, "item_type": item_type.value},
            )
        return ResolvedItem(item_type=item_type, document=document)

    raise NotFoundError(
        message=ErrorMessages.ITEM_NOT_FOUND,
        resource_type="item",
        resource_id=item_id,
    )


async def resolve_typed_item(
    adapter: BaseDatabaseAdapter,
    item_type: ItemType,
    item_id: str,
) -> ResolvedItem:
    """
    Resolve an order line whose collection is known.

    A malformed, missing or gated item is reported as unavailable so
    the whole order can be refused with a single 400.

    Raises:
        UnavailableError: If the item cannot be purchased
    """
    item_type = ItemType(item_type)
    label = "Artwork" if item_type == ItemType.ARTWORK else "Course"
    details = {"item_id": item_id, "item_type": item_type.value}

    document = None
    if isinstance(item_id, str) and ObjectId.is_valid(item_id):
        document = await adapter.get_by_id(
            _collection_for(item_type),
            ObjectId(item_id),
        )

    if document is None:
        raise UnavailableError(
            message=f"{label} {item_id} not found",
            details=details,
        )
    if not is_available(item_type, document):
        raise UnavailableError(
            message=f"{label} {item_id} is not available for purchase",
            details=details,
        )
    return ResolvedItem(item_type=item_type, document=document)
