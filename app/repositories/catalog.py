"""
Read-only access to brands and models.
"""
import logging
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.errors import StorageFaultError
from app.models import Brand, Model
from app.schemas.catalog import Brand as BrandSchema, Model as ModelSchema

logger = logging.getLogger(__name__)


class CatalogRepository:
    """Gateway to the brands and models tables."""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def list_brands(self) -> List[BrandSchema]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(Brand).order_by(Brand.name))
                brands = result.scalars().all()
        except SQLAlchemyError as exc:
            logger.error("Storage failure during list_brands", exc_info=exc)
            raise StorageFaultError("list_brands failed") from exc

        return [BrandSchema.model_validate(brand) for brand in brands]

    async def list_models(self, brand_id: UUID) -> List[ModelSchema]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Model).where(Model.brand_id == brand_id).order_by(Model.name)
                )
                models = result.scalars().all()
        except SQLAlchemyError as exc:
            logger.error("Storage failure during list_models", exc_info=exc)
            raise StorageFaultError("list_models failed") from exc

        return [ModelSchema.model_validate(model) for model in models]
