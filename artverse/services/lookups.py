# ==============================================================================
# USER LOOKUPS - Reference Resolution
# ==============================================================================
# Resolves stored user references into {id, name, avatar, email}
# summaries with one query per batch
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from artverse.core.constants import DatabaseConstants
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.utils.helpers import to_object_id


def summarize_user(user: Dict[str, Any]) -> Dict[str, Any]:
    """Reduce a user document to the fields shown next to content."""
    profile = user.get("profile") or {}
    return {
        "id": user["id"],
        "name": profile.get("name"),
        "avatar": profile.get("avatar"),
        "email": user.get("email"),
    }


async def resolve_users(
    adapter: BaseDatabaseAdapter,
    user_ids: Iterable[Optional[str]],
) -> Dict[str, Dict[str, Any]]:
    """
    Fetch user summaries for a set of ids.

    Args:
        adapter: Database adapter
        user_ids: String ids (duplicates and ``None`` are ignored)

    Returns:
        Mapping of id to summary; unknown ids are absent
    """
    unique_ids = {uid for uid in user_ids if uid}
    if not unique_ids:
        return {}

    users = await adapter.get_all(
        DatabaseConstants.USERS_COLLECTION,
        limit=None,
        filters={"_id": {"$in": [to_object_id(uid, "user") for uid in unique_ids]}},
    )
    return {user["id"]: summarize_user(user) for user in users}
