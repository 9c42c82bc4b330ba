# ==============================================================================
# API DEPENDENCIES - Dependency Injection
# ==============================================================================
# FastAPI dependencies for configuration, storage, authentication
# and service construction
# ==============================================================================

from __future__ import annotations

from typing import Annotated, Callable, Optional

from bson import ObjectId
from fastapi import Depends, Request

from artverse.core.constants import ErrorMessages
from artverse.core.exceptions import (
    AppException,
    AuthenticationError,
    AuthorizationError,
    InvalidTokenError,
)
from artverse.core.security import TokenType, decode_token
from artverse.core.settings import Settings
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.domain_models.user import CurrentUser, UserRole
from artverse.services import (
    ArtworkService,
    CartService,
    CommissionService,
    ContactService,
    CourseService,
    DashboardService,
    NotificationService,
    OrderService,
    UserService,
    WishlistService,
)
from artverse.storage import ImageStorage


# ==============================================================================
# APPLICATION STATE DEPENDENCIES
# ==============================================================================

def get_settings_dep(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


async def get_adapter(request: Request) -> BaseDatabaseAdapter:
    """
    Get database adapter dependency.

    Returns the adapter connected during application startup.
    """
    return request.app.state.db


def get_storage(request: Request) -> ImageStorage:
    """Image host selected at startup."""
    return request.app.state.storage


SettingsDep = Annotated[Settings, Depends(get_settings_dep)]
DatabaseDep = Annotated[BaseDatabaseAdapter, Depends(get_adapter)]
StorageDep = Annotated[ImageStorage, Depends(get_storage)]


# ==============================================================================
# AUTHENTICATION DEPENDENCIES
# ==============================================================================

async def get_current_user(
    request: Request,
    settings: SettingsDep,
    adapter: DatabaseDep,
) -> CurrentUser:
    """
    Resolve the caller from the session cookie.

    The token only names the user; role and email are read from storage
    so role changes and deactivation take effect immediately.

    Raises:
        AuthenticationError: If the cookie is missing or the user is gone
        TokenExpiredError / InvalidTokenError: If the token is rejected
    """
    token = request.cookies.get(settings.COOKIE_NAME)
    if not token:
        raise AuthenticationError(message=ErrorMessages.UNAUTHORIZED)

    payload = decode_token(token, settings)
    if payload.get("type") != TokenType.ACCESS:
        raise InvalidTokenError("Invalid token type")

    user_id = payload.get("sub")
    if not user_id or not ObjectId.is_valid(user_id):
        raise InvalidTokenError("Invalid token payload")

    user = await UserService(adapter).get_active_user(user_id)
    if not user:
        raise AuthenticationError(message=ErrorMessages.USER_GONE)

    return CurrentUser(id=user["id"], role=user["role"], email=user["email"])


async def get_optional_user(
    request: Request,
    settings: SettingsDep,
    adapter: DatabaseDep,
) -> Optional[CurrentUser]:
    """
    Resolve the caller if a valid cookie is present, otherwise None.

    Useful for endpoints that work for both authenticated
    and anonymous visitors.
    """
    if not request.cookies.get(settings.COOKIE_NAME):
        return None

    try:
        return await get_current_user(request, settings, adapter)
    except AppException:
        return None


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
OptionalUserDep = Annotated[Optional[CurrentUser], Depends(get_optional_user)]


def require_roles(*roles: UserRole) -> Callable:
    """
    Build a dependency that admits only the given roles.

    Example:
        >>> @router.post("/", dependencies=[Depends(require_roles(UserRole.ADMIN))])
    """
    allowed = {UserRole(role).value for role in roles}

    async def check_role(user: CurrentUserDep) -> CurrentUser:
        if user.role not in allowed:
            raise AuthorizationError(
                message=ErrorMessages.PERMISSION_DENIED,
                required_permission=", ".join(sorted(allowed)),
            )
        return user

    return check_role


ArtistUser = Annotated[CurrentUser, Depends(require_roles(UserRole.ARTIST))]
AdminUser = Annotated[CurrentUser, Depends(require_roles(UserRole.ADMIN))]
BuyerUser = Annotated[CurrentUser, Depends(require_roles(UserRole.BUYER))]
ParticipantUser = Annotated[
    CurrentUser,
    Depends(require_roles(UserRole.BUYER, UserRole.ARTIST)),
]


# ==============================================================================
# SERVICE DEPENDENCIES
# ==============================================================================

async def get_notification_service(adapter: DatabaseDep) -> NotificationService:
    """Get notification service instance."""
    return NotificationService(adapter)


NotificationServiceDep = Annotated[NotificationService, Depends(get_notification_service)]


async def get_user_service(adapter: DatabaseDep) -> UserService:
    """Get user service instance."""
    return UserService(adapter)


async def get_artwork_service(
    adapter: DatabaseDep,
    storage: StorageDep,
    notifications: NotificationServiceDep,
) -> ArtworkService:
    """Get artwork service instance."""
    return ArtworkService(adapter, storage, notifications)


async def get_course_service(
    adapter: DatabaseDep,
    storage: StorageDep,
    notifications: NotificationServiceDep,
) -> CourseService:
    """Get course service instance."""
    return CourseService(adapter, storage, notifications)


async def get_cart_service(adapter: DatabaseDep) -> CartService:
    """Get cart service instance."""
    return CartService(adapter)


async def get_wishlist_service(adapter: DatabaseDep) -> WishlistService:
    """Get wishlist service instance."""
    return WishlistService(adapter)


async def get_commission_service(
    adapter: DatabaseDep,
    notifications: NotificationServiceDep,
) -> CommissionService:
    """Get commission service instance."""
    return CommissionService(adapter, notifications)


async def get_order_service(
    adapter: DatabaseDep,
    notifications: NotificationServiceDep,
) -> OrderService:
    """Get order service instance."""
    return OrderService(adapter, notifications)


async def get_dashboard_service(adapter: DatabaseDep) -> DashboardService:
    """Get dashboard service instance."""
    return DashboardService(adapter)


async def get_contact_service(adapter: DatabaseDep) -> ContactService:
    """Get contact service instance."""
    return ContactService(adapter)


# Annotated service types
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ArtworkServiceDep = Annotated[ArtworkService, Depends(get_artwork_service)]
CourseServiceDep = Annotated[CourseService, Depends(get_course_service)]
CartServiceDep = Annotated[CartService, Depends(get_cart_service)]
WishlistServiceDep = Annotated[WishlistService, Depends(get_wishlist_service)]
CommissionServiceDep = Annotated[CommissionService, Depends(get_commission_service)]
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]
ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]
