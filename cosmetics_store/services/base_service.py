# ==============================================================================
# BASE SERVICE - Generic Business Logic Layer
# ==============================================================================
# Abstract service providing common read operations over a repository
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel

from cosmetics_store.core.exceptions import NotFoundError
from cosmetics_store.database.repositories.base_repository import BaseRepository
from cosmetics_store.utils.helpers import calculate_offset, paginate_results

# Type variables for generic service
EntityType = TypeVar("EntityType")
ResponseSchemaType = TypeVar("ResponseSchemaType", bound=BaseModel)


class BaseService(ABC, Generic[EntityType, ResponseSchemaType]):
    """
    Abstract base service providing standard business operations.

    Encapsulates business logic for a specific domain entity,
    providing a clean interface for API endpoints.

    Generic Parameters:
        EntityType: Record schema returned by the repository
        ResponseSchemaType: Pydantic schema for responses

    Attributes:
        _repository: Primary repository for the entity
        _resource_type: Name used in NotFound errors
    """

    def __init__(
        self,
        repository: BaseRepository[EntityType],
        resource_type: str,
    ) -> None:
        """
        Initialize service.

        Args:
            repository: Repository for the primary entity
            resource_type: Human-readable entity name
        """
        self._repository = repository
        self._resource_type = resource_type

    # ==========================================================================
    # ABSTRACT METHODS
    # ==========================================================================

    @abstractmethod
    def _to_response(self, entity: EntityType) -> ResponseSchemaType:
        """
        Convert entity to response schema.

        Args:
            entity: Record schema from the repository

        Returns:
            Response schema instance
        """
        pass

    # ==========================================================================
    # READ OPERATIONS
    # ==========================================================================

    async def _get_or_404(self, id: Any) -> EntityType:
        """
        Load an active entity or raise.

        Raises:
            NotFoundError: If entity missing or soft-deleted
        """
        entity = await self._repository.get_by_id(id)
        if entity is None:
            raise NotFoundError(
                message=f"{self._resource_type.capitalize()} not found",
                resource_type=self._resource_type,
                resource_id=id,
            )
        return entity

    async def get_by_id(self, id: Any) -> ResponseSchemaType:
        """
        Retrieve entity by ID.

        Raises:
            NotFoundError: If entity not found
        """
        return self._to_response(await self._get_or_404(id))

    # ==========================================================================
    # PAGINATION HELPERS
    # ==========================================================================

    async def get_paginated(
        self,
        page: int = 1,
        page_size: int = 10,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: str = "asc",
    ) -> Dict[str, Any]:
        """
        Get paginated results with metadata.

        Args:
            page: Page number (1-indexed)
            page_size: Items per page
            filters: Filter criteria
            sort_by: Sort field
            sort_order: Sort direction

        Returns:
            Dict with items, total, page, page_size, pages
        """
        items = await self._repository.get_all(
            skip=calculate_offset(page, page_size),
            limit=page_size,
            filters=filters,
            sort_by=sort_by,
            sort_order=sort_order,
        )
        total = await self._repository.count(filters)

        return paginate_results(
            [self._to_response(item) for item in items],
            page=page,
            page_size=page_size,
            total=total,
        )
