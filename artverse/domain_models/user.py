# ==============================================================================
# USER MODEL - Marketplace Roles & Request Identity
# ==============================================================================

from __future__ import annotations

import enum
from dataclasses import dataclass


class UserRole(str, enum.Enum):
    """Marketplace roles."""
    BUYER = "buyer"
    ARTIST = "artist"
    ADMIN = "admin"


@dataclass(frozen=True)
class CurrentUser:
    """
    Identity of the caller, re-resolved from storage on every request.

    Attributes:
        id: User id as a string
        role: Current role value
        email: Current email
    """

    id: str
    role: str
    email: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    def owns(self, owner_id: object) -> bool:
        """Compare an owner reference with the caller by string value."""
        return owner_id is not None and str(owner_id) == self.id
