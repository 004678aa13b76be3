"""
Brand and model listings.
"""
from typing import List
from uuid import UUID

from app.repositories.catalog import CatalogRepository
from app.schemas.catalog import Brand, Model


class CatalogService:
    """Read-only pass-through over the catalog repository."""

    def __init__(self, repository: CatalogRepository):
        self._repository = repository

    async def list_brands(self) -> List[Brand]:
        return await self._repository.list_brands()

    async def list_models(self, brand_id: UUID) -> List[Model]:
        return await self._repository.list_models(brand_id)
