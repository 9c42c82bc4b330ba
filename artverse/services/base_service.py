# ==============================================================================
# BASE SERVICE - Generic Business Logic Layer
# ==============================================================================
# Abstract service providing the lookups and paging shared by every
# marketplace service
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from artverse.core.exceptions import NotFoundError
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.utils.helpers import calculate_offset, pagination_meta, to_object_id

# Type variable for generic service
ResponseSchemaType = TypeVar("ResponseSchemaType", bound=BaseModel)


class BaseService(ABC, Generic[ResponseSchemaType]):
    """
    Abstract base service providing standard business operations.

    Encapsulates database access for one collection and gives API
    endpoints a clean interface that speaks response schemas.

    Generic Parameters:
        ResponseSchemaType: Pydantic schema for responses

    Attributes:
        _adapter: Database adapter for operations
        _collection_name: Collection identifier

    Example:
        >>> class ArtworkService(BaseService[ArtworkResponse]):
        ...     def _to_response(self, entity):
        ...         return ArtworkResponse.model_validate(entity)
    """

    def __init__(
        self,
        adapter: BaseDatabaseAdapter,
        collection_name: str,
    ) -> None:
        """
        Initialize service.

        Args:
            adapter: Database adapter instance
            collection_name: Collection name
        """
        self._adapter = adapter
        self._collection_name = collection_name

    # ==========================================================================
    # ABSTRACT METHODS
    # ==========================================================================

    @abstractmethod
    def _to_response(self, entity: Dict[str, Any]) -> ResponseSchemaType:
        """
        Convert a stored document to its response schema.

        Args:
            entity: Serialized document

        Returns:
            Response schema instance
        """
        pass

    # ==========================================================================
    # LOOKUPS
    # ==========================================================================

    async def _get_document(
        self,
        id: Any,
        message: Optional[str] = None,
        label: str = "resource",
    ) -> Dict[str, Any]:
        """
        Load one document by a client-supplied id.

        Raises:
            ValidationError: If the id is malformed
            NotFoundError: If no document has that id
        """
        oid = to_object_id(id, label)
        result = await self._adapter.get_by_id(self._collection_name, oid)
        if not result:
            raise NotFoundError(
                message=message or f"{self._collection_name} not found",
                resource_type=self._collection_name,
                resource_id=id,
            )
        return result

    async def get_by_id(self, id: Any) -> ResponseSchemaType:
        """Retrieve entity by ID."""
        return self._to_response(await self._get_document(id))

    async def count(
        self,
        filters: Optional[Dict[str, Any]] = None,
    ) -> int:
        """Count entities matching filters."""
        return await self._adapter.count(self._collection_name, filters)

    # ==========================================================================
    # PAGINATION HELPERS
    # ==========================================================================

    async def _get_page(
        self,
        page: int,
        limit: int,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: str = "asc",
    ) -> Dict[str, Any]:
        """
        Fetch one page of raw documents with metadata.

        Args:
            page: Page number (1-indexed)
            limit: Items per page
            filters: Filter criteria
            sort_by: Sort field
            sort_order: Sort direction

        Returns:
            Dict with ``documents`` and ``pagination``
        """
        documents = await self._adapter.get_all(
            self._collection_name,
            skip=calculate_offset(page, limit),
            limit=limit,
            filters=filters,
            sort_by=sort_by,
            sort_order=sort_order,
        )
        total = await self.count(filters)

        return {
            "documents": documents,
            "pagination": pagination_meta(total, page, limit),
        }
