# ==============================================================================
# USERS ENDPOINTS - Profiles & Artist Directory
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Response

from artverse.api.dependencies import CurrentUserDep, SettingsDep, UserServiceDep
from artverse.api.v1.auth import clear_session
from artverse.core.constants import SuccessMessages
from artverse.schemas.base import APIResponse
from artverse.schemas.user import (
    ArtistResponse,
    AvatarUpdate,
    ProfileUpdate,
    PublicUserResponse,
    UserProfileResponse,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "/profile",
    response_model=APIResponse[UserProfileResponse],
    summary="Get own profile",
    description="Profile of the caller with commission counters.",
)
async def get_profile(
    user: CurrentUserDep,
    service: UserServiceDep,
) -> APIResponse[UserProfileResponse]:
    """Own profile."""
    return APIResponse.ok(data=await service.get_profile(user.id))


@router.put(
    "/profile",
    response_model=APIResponse[UserResponse],
    summary="Update own profile",
    description="Update common fields and the fields specific to the caller's role.",
)
async def update_profile(
    schema: ProfileUpdate,
    user: CurrentUserDep,
    service: UserServiceDep,
) -> APIResponse[UserResponse]:
    """Update own profile."""
    updated = await service.update_profile(user.id, user.role, schema)
    return APIResponse.ok(data=updated, message=SuccessMessages.PROFILE_UPDATED)


@router.delete(
    "/profile",
    response_model=APIResponse[dict],
    summary="Deactivate account",
    description="Soft-delete the caller's account and end the session.",
)
async def deactivate_account(
    response: Response,
    user: CurrentUserDep,
    service: UserServiceDep,
    settings: SettingsDep,
) -> APIResponse[dict]:
    """Deactivate own account."""
    await service.deactivate(user.id)
    clear_session(response, settings)
    return APIResponse.ok(message=SuccessMessages.ACCOUNT_DEACTIVATED)


@router.put(
    "/profile/picture",
    response_model=APIResponse[UserResponse],
    summary="Update profile picture",
)
async def update_profile_picture(
    schema: AvatarUpdate,
    user: CurrentUserDep,
    service: UserServiceDep,
) -> APIResponse[UserResponse]:
    """Replace the avatar URL."""
    updated = await service.update_avatar(user.id, schema.avatar)
    return APIResponse.ok(data=updated, message=SuccessMessages.PROFILE_UPDATED)


@router.get(
    "/artists",
    response_model=APIResponse[List[ArtistResponse]],
    summary="List artists",
    description="Directory of active artists.",
)
async def list_artists(
    service: UserServiceDep,
) -> APIResponse[List[ArtistResponse]]:
    """Artist directory."""
    return APIResponse.ok(data=await service.list_artists())


@router.get(
    "/artists/{artist_id}",
    response_model=APIResponse[ArtistResponse],
    summary="Get artist",
)
async def get_artist(
    artist_id: str,
    service: UserServiceDep,
) -> APIResponse[ArtistResponse]:
    """One artist's public profile."""
    return APIResponse.ok(data=await service.get_artist(artist_id))


@router.get(
    "/{user_id}",
    response_model=APIResponse[PublicUserResponse],
    summary="Get user by ID",
    description="Public profile of an active user.",
)
async def get_user(
    user_id: str,
    service: UserServiceDep,
) -> APIResponse[PublicUserResponse]:
    """Public profile."""
    return APIResponse.ok(data=await service.get_public_profile(user_id))
