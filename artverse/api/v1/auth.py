# ==============================================================================
# AUTH ENDPOINTS - Session Routes
# ==============================================================================
# Register, login and logout through an http-only session cookie
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter, Response, status

from artverse.api.dependencies import CurrentUserDep, SettingsDep, UserServiceDep
from artverse.core.constants import SuccessMessages
from artverse.core.security import create_access_token
from artverse.core.settings import Settings
from artverse.schemas.base import APIResponse
from artverse.schemas.user import AuthResponse, UserCreate, UserLogin, UserResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


def issue_session(response: Response, user: UserResponse, settings: Settings) -> str:
    """Sign a token for ``user`` and attach it as the session cookie."""
    token = create_access_token(
        user.id,
        settings,
        additional_claims={"role": user.role, "email": user.email},
    )
    response.set_cookie(
        key=settings.COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )
    return token


def clear_session(response: Response, settings: Settings) -> None:
    """Expire the session cookie."""
    response.delete_cookie(
        key=settings.COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )


@router.post(
    "/register",
    response_model=APIResponse[AuthResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create an account and start a session. Role defaults to buyer.",
)
async def register(
    schema: UserCreate,
    response: Response,
    service: UserServiceDep,
    settings: SettingsDep,
) -> APIResponse[AuthResponse]:
    """Register a new user."""
    user = await service.register(schema)
    token = issue_session(response, user, settings)
    return APIResponse.ok(
        data=AuthResponse(user=user, token=token),
        message=SuccessMessages.USER_CREATED,
    )


@router.post(
    "/login",
    response_model=APIResponse[AuthResponse],
    summary="User login",
    description="Authenticate with email and password; sets the session cookie.",
)
async def login(
    credentials: UserLogin,
    response: Response,
    service: UserServiceDep,
    settings: SettingsDep,
) -> APIResponse[AuthResponse]:
    """Authenticate user and start a session."""
    user = await service.authenticate(
        email=credentials.email,
        password=credentials.password,
    )
    token = issue_session(response, user, settings)
    return APIResponse.ok(
        data=AuthResponse(user=user, token=token),
        message=SuccessMessages.LOGIN_SUCCESS,
    )


@router.post(
    "/logout",
    response_model=APIResponse[dict],
    summary="User logout",
    description="Clear the session cookie. Always succeeds.",
)
async def logout(
    response: Response,
    settings: SettingsDep,
) -> APIResponse[dict]:
    """End the session."""
    clear_session(response, settings)
    return APIResponse.ok(message=SuccessMessages.LOGOUT_SUCCESS)


@router.get(
    "/me",
    response_model=APIResponse[UserResponse],
    summary="Get current user",
    description="Account of the authenticated caller.",
)
async def me(
    user: CurrentUserDep,
    service: UserServiceDep,
) -> APIResponse[UserResponse]:
    """Current account."""
    return APIResponse.ok(data=await service.get_by_id(user.id))
