# ==============================================================================
# USER SERVICE - Authentication & User Management
# ==============================================================================
# Business logic for registration, login, profiles and the artist directory
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from artverse.core.constants import CatalogConstants, DatabaseConstants, ErrorMessages
from artverse.core.exceptions import (
    AlreadyExistsError,
    AuthenticationError,
    InvalidCredentialsError,
    NotFoundError,
)
from artverse.core.security import hash_password, verify_password
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.domain_models.commission import CommissionStatus
from artverse.domain_models.user import UserRole
from artverse.schemas.user import (
    ArtistResponse,
    CommissionStats,
    ProfileUpdate,
    PublicUserResponse,
    UserCreate,
    UserProfileResponse,
    UserResponse,
)
from artverse.services.base_service import BaseService
from artverse.utils.helpers import to_object_id

logger = logging.getLogger(__name__)

# Profile fields each role may edit besides name, bio and avatar
ROLE_PROFILE_FIELDS: Dict[str, tuple] = {
    UserRole.ARTIST.value: ("skills", "portfolio", "commission_rates", "social_media"),
    UserRole.BUYER.value: ("shipping_address",),
    UserRole.ADMIN.value: (),
}
COMMON_PROFILE_FIELDS = ("name", "bio", "avatar")


class UserService(BaseService[UserResponse]):
    """
    User service for authentication and profile management.

    Provides user registration, credential checks, profile updates,
    soft deactivation and public profile lookups.
    """

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        """Initialize user service."""
        super().__init__(adapter, DatabaseConstants.USERS_COLLECTION)

    def _to_response(self, entity: Dict[str, Any]) -> UserResponse:
        """Convert user document to response schema."""
        return UserResponse.model_validate(entity)

    # ==========================================================================
    # AUTHENTICATION
    # ==========================================================================

    async def register(self, schema: UserCreate) -> UserResponse:
        """
        Register a new user.

        Args:
            schema: User registration data

        Returns:
            Created user response

        Raises:
            AlreadyExistsError: If email already registered
        """
        email = schema.email.lower()

        existing = await self._adapter.find_one(
            self._collection_name,
            {"email": email},
        )
        if existing:
            raise AlreadyExistsError(
                message=ErrorMessages.USER_EXISTS,
                resource_type="user",
            )

        data = {
            "email": email,
            "hashed_password": hash_password(schema.password),
            "role": UserRole(schema.role).value,
            "profile": {
                "name": schema.name,
                "bio": None,
                "avatar": CatalogConstants.DEFAULT_AVATAR,
                "skills": [],
                "portfolio": [],
                "social_media": [],
                "commission_rates": [],
                "shipping_address": None,
            },
            "is_active": True,
        }

        result = await self._adapter.create(self._collection_name, data)
        logger.info(f"Registered {data['role']} {result['id']}")
        return self._to_response(result)

    async def authenticate(self, email: str, password: str) -> UserResponse:
        """
        Check credentials.

        Unknown email and wrong password are indistinguishable to
        the caller.

        Raises:
            InvalidCredentialsError: If credentials invalid
            AuthenticationError: If the account has been deactivated
        """
        user = await self._adapter.find_one(
            self._collection_name,
            {"email": email.lower()},
        )

        hashed_password = user.get("hashed_password") if user else None
        if not hashed_password or not verify_password(password, hashed_password):
            raise InvalidCredentialsError()

        if not user.get("is_active", True):
            raise AuthenticationError(message=ErrorMessages.ACCOUNT_DISABLED)

        return self._to_response(user)

    async def get_active_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Raw user document if it exists and is active."""
        user = await self._adapter.get_by_id(
            self._collection_name,
            to_object_id(user_id, "user"),
        )
        if not user or not user.get("is_active", True):
            return None
        return user

    # ==========================================================================
    # OWN PROFILE
    # ==========================================================================

    async def get_profile(self, user_id: str) -> UserProfileResponse:
        """Own profile with commission counters for the user's role."""
        user = await self._get_document(user_id, ErrorMessages.USER_NOT_FOUND, "user")
        oid = to_object_id(user_id, "user")
        commissions = DatabaseConstants.COMMISSIONS_COLLECTION

        if user["role"] == UserRole.ARTIST.value:
            stats = CommissionStats(
                total=await self._adapter.count(commissions, {"artist_id": oid}),
                completed=await self._adapter.count(
                    commissions,
                    {"artist_id": oid, "status": CommissionStatus.COMPLETED.value},
                ),
                in_progress=await self._adapter.count(
                    commissions,
                    {"artist_id": oid, "status": CommissionStatus.IN_PROGRESS.value},
                ),
            )
        else:
            stats = CommissionStats(
                total=await self._adapter.count(commissions, {"buyer_id": oid}),
                completed=await self._adapter.count(
                    commissions,
                    {"buyer_id": oid, "status": CommissionStatus.COMPLETED.value},
                ),
            )

        return UserProfileResponse.model_validate({**user, "commission_stats": stats})

    async def update_profile(
        self,
        user_id: str,
        role: str,
        schema: ProfileUpdate,
    ) -> UserResponse:
        """
        Update common and role-specific profile fields.

        Fields that do not apply to the role are dropped silently.
        """
        provided = schema.model_dump(exclude_unset=True)
        allowed = COMMON_PROFILE_FIELDS + ROLE_PROFILE_FIELDS.get(role, ())
        changes = {
            f"profile.{field}": value
            for field, value in provided.items()
            if field in allowed
        }

        if not changes:
            return self._to_response(
                await self._get_document(user_id, ErrorMessages.USER_NOT_FOUND, "user")
            )

        result = await self._adapter.update(
            self._collection_name,
            to_object_id(user_id, "user"),
            changes,
        )
        if not result:
            raise NotFoundError(
                message=ErrorMessages.USER_NOT_FOUND,
                resource_type="user",
                resource_id=user_id,
            )
        return self._to_response(result)

    async def update_avatar(self, user_id: str, avatar: str) -> UserResponse:
        """Replace the profile picture URL."""
        result = await self._adapter.update(
            self._collection_name,
            to_object_id(user_id, "user"),
            {"profile.avatar": avatar},
        )
        if not result:
            raise NotFoundError(
                message=ErrorMessages.USER_NOT_FOUND,
                resource_type="user",
                resource_id=user_id,
            )
        return self._to_response(result)

    async def deactivate(self, user_id: str) -> bool:
        """Soft-delete the account."""
        result = await self._adapter.update(
            self._collection_name,
            to_object_id(user_id, "user"),
            {"is_active": False},
        )
        if not result:
            raise NotFoundError(
                message=ErrorMessages.USER_NOT_FOUND,
                resource_type="user",
                resource_id=user_id,
            )
        logger.info(f"Deactivated user {user_id}")
        return True

    # ==========================================================================
    # PUBLIC PROFILES
    # ==========================================================================

    async def list_artists(self) -> List[ArtistResponse]:
        """Directory of active artists, newest first."""
        artists = await self._adapter.get_all(
            self._collection_name,
            limit=DatabaseConstants.DEFAULT_QUERY_LIMIT,
            filters={"role": UserRole.ARTIST.value, "is_active": True},
            sort_by="created_at",
            sort_order="desc",
        )
        return [ArtistResponse.model_validate(artist) for artist in artists]

    async def get_artist(self, artist_id: str) -> ArtistResponse:
        """Public profile of one active artist."""
        artist = await self._adapter.find_one(
            self._collection_name,
            {
                "_id": to_object_id(artist_id, "artist"),
                "role": UserRole.ARTIST.value,
                "is_active": True,
            },
        )
        if not artist:
            raise NotFoundError(
                message=ErrorMessages.ARTIST_NOT_FOUND,
                resource_type="artist",
                resource_id=artist_id,
            )
        return ArtistResponse.model_validate(artist)

    async def get_public_profile(self, user_id: str) -> PublicUserResponse:
        """Public profile of any active user."""
        user = await self.get_active_user(user_id)
        if not user:
            raise NotFoundError(
                message=ErrorMessages.USER_NOT_FOUND,
                resource_type="user",
                resource_id=user_id,
            )
        return PublicUserResponse.model_validate(user)
