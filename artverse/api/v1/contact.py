# ==============================================================================
# CONTACT ENDPOINTS
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter, status

from artverse.api.dependencies import ContactServiceDep
from artverse.core.constants import SuccessMessages
from artverse.schemas.base import APIResponse
from artverse.schemas.contact import ContactCreate, ContactReceipt

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.post(
    "",
    response_model=APIResponse[ContactReceipt],
    status_code=status.HTTP_201_CREATED,
    summary="Submit contact form",
)
async def submit_contact(
    schema: ContactCreate,
    service: ContactServiceDep,
) -> APIResponse[ContactReceipt]:
    """Store a contact message."""
    receipt = await service.submit(schema)
    return APIResponse.ok(data=receipt, message=SuccessMessages.CONTACT_SUBMITTED)
