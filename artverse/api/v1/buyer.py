# ==============================================================================
# BUYER ENDPOINTS - Cart & Wishlist
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter, status

from artverse.api.dependencies import CartServiceDep, CurrentUserDep, WishlistServiceDep
from artverse.core.constants import SuccessMessages
from artverse.schemas.base import APIResponse
from artverse.schemas.cart import (
    CartItemCreate,
    CartItemUpdate,
    CartResponse,
    WishlistItemCreate,
    WishlistResponse,
)

cart_router = APIRouter(prefix="/cart", tags=["Cart"])
wishlist_router = APIRouter(prefix="/wishlist", tags=["Wishlist"])


# ==============================================================================
# CART
# ==============================================================================

@cart_router.get(
    "",
    response_model=APIResponse[CartResponse],
    summary="Get cart",
    description="Cart lines with totals computed on read.",
)
async def get_cart(
    user: CurrentUserDep,
    service: CartServiceDep,
) -> APIResponse[CartResponse]:
    """Current cart."""
    return APIResponse.ok(data=await service.get_cart(user.id))


@cart_router.post(
    "",
    response_model=APIResponse[CartResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add to cart",
    description="Add an artwork or course; repeated items merge quantities.",
)
async def add_to_cart(
    schema: CartItemCreate,
    user: CurrentUserDep,
    service: CartServiceDep,
) -> APIResponse[CartResponse]:
    """Add an item to the cart."""
    cart = await service.add_item(user.id, schema)
    return APIResponse.ok(data=cart, message=SuccessMessages.CART_ITEM_ADDED)


@cart_router.put(
    "/{line_id}",
    response_model=APIResponse[CartResponse],
    summary="Update cart line",
)
async def update_cart_line(
    line_id: str,
    schema: CartItemUpdate,
    user: CurrentUserDep,
    service: CartServiceDep,
) -> APIResponse[CartResponse]:
    """Change a line quantity."""
    cart = await service.update_quantity(user.id, line_id, schema.quantity)
    return APIResponse.ok(data=cart, message=SuccessMessages.CART_ITEM_UPDATED)


@cart_router.delete(
    "/{line_id}",
    response_model=APIResponse[CartResponse],
    summary="Remove cart line",
)
async def remove_cart_line(
    line_id: str,
    user: CurrentUserDep,
    service: CartServiceDep,
) -> APIResponse[CartResponse]:
    """Remove a line."""
    cart = await service.remove_item(user.id, line_id)
    return APIResponse.ok(data=cart, message=SuccessMessages.CART_ITEM_REMOVED)


@cart_router.delete(
    "",
    response_model=APIResponse[CartResponse],
    summary="Clear cart",
)
async def clear_cart(
    user: CurrentUserDep,
    service: CartServiceDep,
) -> APIResponse[CartResponse]:
    """Empty the cart."""
    cart = await service.clear(user.id)
    return APIResponse.ok(data=cart, message=SuccessMessages.CART_CLEARED)


# ==============================================================================
# WISHLIST
# ==============================================================================

@wishlist_router.get(
    "",
    response_model=APIResponse[WishlistResponse],
    summary="Get wishlist",
)
async def get_wishlist(
    user: CurrentUserDep,
    service: WishlistServiceDep,
) -> APIResponse[WishlistResponse]:
    """Current wishlist."""
    return APIResponse.ok(data=await service.get_wishlist(user.id))


@wishlist_router.post(
    "",
    response_model=APIResponse[WishlistResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add to wishlist",
    description="Add an artwork or course; duplicates are rejected.",
)
async def add_to_wishlist(
    schema: WishlistItemCreate,
    user: CurrentUserDep,
    service: WishlistServiceDep,
) -> APIResponse[WishlistResponse]:
    """Add an item to the wishlist."""
    wishlist = await service.add_item(user.id, schema)
    return APIResponse.ok(data=wishlist, message=SuccessMessages.WISHLIST_ITEM_ADDED)


@wishlist_router.delete(
    "/{line_id}",
    response_model=APIResponse[WishlistResponse],
    summary="Remove wishlist line",
)
async def remove_wishlist_line(
    line_id: str,
    user: CurrentUserDep,
    service: WishlistServiceDep,
) -> APIResponse[WishlistResponse]:
    """Remove a line."""
    wishlist = await service.remove_item(user.id, line_id)
    return APIResponse.ok(data=wishlist, message=SuccessMessages.WISHLIST_ITEM_REMOVED)


@wishlist_router.delete(
    "",
    response_model=APIResponse[WishlistResponse],
    summary="Clear wishlist",
)
async def clear_wishlist(
    user: CurrentUserDep,
    service: WishlistServiceDep,
) -> APIResponse[WishlistResponse]:
    """Empty the wishlist."""
    wishlist = await service.clear(user.id)
    return APIResponse.ok(data=wishlist, message=SuccessMessages.WISHLIST_CLEARED)
