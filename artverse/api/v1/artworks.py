# ==============================================================================
# ARTWORK ENDPOINTS - Listings & Moderation
# ==============================================================================

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from artverse.api.dependencies import (
    AdminUser,
    ArtistUser,
    ArtworkServiceDep,
    CurrentUserDep,
    OptionalUserDep,
)
from artverse.core.constants import APIConstants, CatalogConstants, SuccessMessages
from artverse.domain_models.artwork import ArtworkCategory, ArtworkStatus
from artverse.schemas.artwork import (
    ArtworkCreate,
    ArtworkReject,
    ArtworkResponse,
    ArtworkUpdate,
)
from artverse.schemas.base import APIResponse, PaginatedResponse

router = APIRouter(prefix="/artworks", tags=["Artworks"])


@router.post(
    "",
    response_model=APIResponse[ArtworkResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Submit artwork",
    description="Create an artwork in pending state. Artists only.",
)
async def create_artwork(
    schema: ArtworkCreate,
    user: ArtistUser,
    service: ArtworkServiceDep,
) -> APIResponse[ArtworkResponse]:
    """Submit a new artwork for review."""
    artwork = await service.create(user.id, schema)
    return APIResponse.ok(data=artwork, message=SuccessMessages.ARTWORK_CREATED)


@router.get(
    "",
    response_model=PaginatedResponse[ArtworkResponse],
    summary="List artworks",
    description=(
        "Browse artworks with filters, search and sorting. Only approved "
        "artworks are listed unless the caller is an admin or an artist "
        "filtering on their own catalog."
    ),
)
async def list_artworks(
    service: ArtworkServiceDep,
    viewer: OptionalUserDep,
    category: Optional[ArtworkCategory] = None,
    artist_id: Optional[str] = None,
    status_filter: Optional[ArtworkStatus] = Query(None, alias="status"),
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    search: Optional[str] = None,
    sort: str = CatalogConstants.DEFAULT_SORT,
    page: int = Query(1, ge=1),
    limit: int = Query(APIConstants.DEFAULT_PAGE_SIZE, ge=1),
) -> PaginatedResponse[ArtworkResponse]:
    """Paginated artwork listing."""
    result = await service.list_artworks(
        viewer=viewer,
        category=category.value if category else None,
        artist_id=artist_id,
        status=status_filter.value if status_filter else None,
        min_price=min_price,
        max_price=max_price,
        search=search,
        sort=sort,
        page=page,
        limit=limit,
    )
    return PaginatedResponse.ok(data=result["items"], pagination=result["pagination"])


@router.get(
    "/{artwork_id}",
    response_model=APIResponse[ArtworkResponse],
    summary="Get artwork",
    description="Artwork detail; counts a view.",
)
async def get_artwork(
    artwork_id: str,
    service: ArtworkServiceDep,
    viewer: OptionalUserDep,
) -> APIResponse[ArtworkResponse]:
    """Artwork detail."""
    return APIResponse.ok(data=await service.get(artwork_id, viewer))


@router.put(
    "/{artwork_id}",
    response_model=APIResponse[ArtworkResponse],
    summary="Update artwork",
    description="Edit an owned artwork; it goes back to pending review.",
)
async def update_artwork(
    artwork_id: str,
    schema: ArtworkUpdate,
    user: ArtistUser,
    service: ArtworkServiceDep,
) -> APIResponse[ArtworkResponse]:
    """Edit an artwork."""
    artwork = await service.update(artwork_id, user, schema)
    return APIResponse.ok(data=artwork, message=SuccessMessages.ARTWORK_UPDATED)


@router.delete(
    "/{artwork_id}",
    response_model=APIResponse[dict],
    summary="Delete artwork",
    description="Delete an artwork. Owner artist or admin.",
)
async def delete_artwork(
    artwork_id: str,
    user: CurrentUserDep,
    service: ArtworkServiceDep,
) -> APIResponse[dict]:
    """Delete an artwork."""
    await service.delete(artwork_id, user)
    return APIResponse.ok(message=SuccessMessages.ARTWORK_DELETED)


@router.patch(
    "/{artwork_id}/approve",
    response_model=APIResponse[ArtworkResponse],
    summary="Approve artwork",
)
async def approve_artwork(
    artwork_id: str,
    admin: AdminUser,
    service: ArtworkServiceDep,
) -> APIResponse[ArtworkResponse]:
    """Approve an artwork."""
    artwork = await service.approve(artwork_id)
    return APIResponse.ok(data=artwork, message=SuccessMessages.ARTWORK_APPROVED)


@router.patch(
    "/{artwork_id}/reject",
    response_model=APIResponse[ArtworkResponse],
    summary="Reject artwork",
)
async def reject_artwork(
    artwork_id: str,
    admin: AdminUser,
    service: ArtworkServiceDep,
    schema: Optional[ArtworkReject] = None,
) -> APIResponse[ArtworkResponse]:
    """Reject an artwork."""
    artwork = await service.reject(artwork_id, schema.reason if schema else None)
    return APIResponse.ok(data=artwork, message=SuccessMessages.ARTWORK_REJECTED)
