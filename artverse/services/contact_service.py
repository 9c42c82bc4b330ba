# ==============================================================================
# CONTACT SERVICE - Public Contact Form
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict

from artverse.core.constants import DatabaseConstants
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.schemas.contact import ContactCreate, ContactReceipt
from artverse.services.base_service import BaseService

logger = logging.getLogger(__name__)


class ContactService(BaseService[ContactReceipt]):
    """Stores contact form submissions."""

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        """Initialize contact service."""
        super().__init__(adapter, DatabaseConstants.CONTACTS_COLLECTION)

    def _to_response(self, entity: Dict[str, Any]) -> ContactReceipt:
        return ContactReceipt(id=entity["id"])

    async def submit(self, schema: ContactCreate) -> ContactReceipt:
        """Persist a submission."""
        result = await self._adapter.create(self._collection_name, schema.model_dump())
        logger.info(f"Contact message {result['id']} received")
        return self._to_response(result)
