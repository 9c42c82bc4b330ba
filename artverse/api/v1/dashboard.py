# ==============================================================================
# DASHBOARD ENDPOINTS - Artist Summary
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter

from artverse.api.dependencies import ArtistUser, DashboardServiceDep
from artverse.schemas.base import APIResponse
from artverse.schemas.dashboard import DashboardResponse

router = APIRouter(prefix="/artists", tags=["Dashboard"])


@router.get(
    "/dashboard",
    response_model=APIResponse[DashboardResponse],
    summary="Artist dashboard",
    description=(
        "Artworks, recent orders, commissions, notifications, popular "
        "artworks, courses and derived earnings of the caller."
    ),
)
async def get_dashboard(
    user: ArtistUser,
    service: DashboardServiceDep,
) -> APIResponse[DashboardResponse]:
    """Artist dashboard."""
    return APIResponse.ok(data=await service.build(user.id))
