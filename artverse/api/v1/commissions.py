# ==============================================================================
# COMMISSION ENDPOINTS - Negotiation Workflow
# ==============================================================================

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query, status

from artverse.api.dependencies import (
    ArtistUser,
    BuyerUser,
    CommissionServiceDep,
    ParticipantUser,
)
from artverse.core.constants import SuccessMessages
from artverse.domain_models.commission import CommissionStatus
from artverse.schemas.base import APIResponse
from artverse.schemas.commission import (
    CommissionCreate,
    CommissionResponse,
    CommissionStatusUpdate,
    MessageCreate,
)

router = APIRouter(prefix="/commissions", tags=["Commissions"])


@router.get(
    "",
    response_model=APIResponse[List[CommissionResponse]],
    summary="List own commissions",
    description="Commissions where the caller is the buyer or the artist.",
)
async def list_commissions(
    user: ParticipantUser,
    service: CommissionServiceDep,
    status_filter: Optional[CommissionStatus] = Query(None, alias="status"),
) -> APIResponse[List[CommissionResponse]]:
    """Caller's commissions."""
    return APIResponse.ok(data=await service.list_for_user(user, status_filter))


@router.post(
    "/{artist_id}",
    response_model=APIResponse[CommissionResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Request commission",
    description="Open a commission with an artist. Buyers only.",
)
async def create_commission(
    artist_id: str,
    schema: CommissionCreate,
    user: BuyerUser,
    service: CommissionServiceDep,
) -> APIResponse[CommissionResponse]:
    """Request a commission."""
    commission = await service.create(user.id, artist_id, schema)
    return APIResponse.ok(data=commission, message=SuccessMessages.COMMISSION_CREATED)


@router.get(
    "/{commission_id}",
    response_model=APIResponse[CommissionResponse],
    summary="Get commission",
    description="Commission with its message thread. Participants only.",
)
async def get_commission(
    commission_id: str,
    user: ParticipantUser,
    service: CommissionServiceDep,
) -> APIResponse[CommissionResponse]:
    """One commission."""
    return APIResponse.ok(data=await service.get(commission_id, user))


@router.post(
    "/{commission_id}/messages",
    response_model=APIResponse[CommissionResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Send message",
)
async def add_message(
    commission_id: str,
    schema: MessageCreate,
    user: ParticipantUser,
    service: CommissionServiceDep,
) -> APIResponse[CommissionResponse]:
    """Append a message to the thread."""
    commission = await service.add_message(commission_id, user, schema.content)
    return APIResponse.ok(data=commission, message=SuccessMessages.MESSAGE_SENT)


@router.patch(
    "/{commission_id}/status",
    response_model=APIResponse[CommissionResponse],
    summary="Update commission status",
    description="Move a commission along its lifecycle. Assigned artist only.",
)
async def update_status(
    commission_id: str,
    schema: CommissionStatusUpdate,
    user: ArtistUser,
    service: CommissionServiceDep,
) -> APIResponse[CommissionResponse]:
    """Change commission status."""
    commission = await service.update_status(commission_id, user, schema.status)
    return APIResponse.ok(data=commission, message=SuccessMessages.COMMISSION_UPDATED)
