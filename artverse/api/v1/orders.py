# ==============================================================================
# ORDER ENDPOINTS - Purchases
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Query, status

from artverse.api.dependencies import AdminUser, CurrentUserDep, OrderServiceDep
from artverse.core.constants import APIConstants, SuccessMessages
from artverse.domain_models.commerce import OrderStatus
from artverse.schemas.base import APIResponse, PaginatedResponse
from artverse.schemas.order import OrderCreate, OrderResponse, OrderStatusUpdate

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post(
    "",
    response_model=APIResponse[OrderResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Place order",
    description=(
        "Place an order for artworks and courses after payment capture. "
        "Every line is re-validated; one invalid line refuses the order."
    ),
)
async def create_order(
    schema: OrderCreate,
    user: CurrentUserDep,
    service: OrderServiceDep,
) -> APIResponse[OrderResponse]:
    """Place an order."""
    order = await service.create(user.id, schema)
    return APIResponse.ok(data=order, message=SuccessMessages.ORDER_CREATED)


@router.get(
    "/history",
    response_model=APIResponse[List[OrderResponse]],
    summary="Order history",
)
async def order_history(
    user: CurrentUserDep,
    service: OrderServiceDep,
) -> APIResponse[List[OrderResponse]]:
    """Caller's orders."""
    return APIResponse.ok(data=await service.history(user.id))


@router.get(
    "",
    response_model=PaginatedResponse[OrderResponse],
    summary="List orders",
    description="All orders with filters. Admins only.",
)
async def list_orders(
    admin: AdminUser,
    service: OrderServiceDep,
    status_filter: Optional[OrderStatus] = Query(None, alias="status"),
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(APIConstants.ORDERS_PAGE_SIZE, ge=1, le=APIConstants.MAX_PAGE_SIZE),
) -> PaginatedResponse[OrderResponse]:
    """Paginated orders."""
    result = await service.list_orders(
        status=status_filter,
        start_date=start_date,
        end_date=end_date,
        page=page,
        limit=limit,
    )
    return PaginatedResponse.ok(data=result["items"], pagination=result["pagination"])


@router.patch(
    "/{order_id}/status",
    response_model=APIResponse[OrderResponse],
    summary="Update order status",
    description="Change order and/or payout status. Admins only.",
)
async def update_order_status(
    order_id: str,
    schema: OrderStatusUpdate,
    admin: AdminUser,
    service: OrderServiceDep,
) -> APIResponse[OrderResponse]:
    """Change order state."""
    order = await service.update_status(order_id, schema)
    return APIResponse.ok(data=order, message=SuccessMessages.ORDER_UPDATED)
