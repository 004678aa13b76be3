"""
Model routes.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List
from uuid import UUID

from app.dependencies import get_catalog_service, valid_brand_id
from app.schemas.catalog import Model
from app.services.catalog import CatalogService

router = APIRouter(prefix="/models", tags=["models"])


@router.get(
    "/{brand_id}",
    response_model=List[Model],
    responses={204: {"description": "The brand has no models"}},
)
async def get_models(
    brand_id: UUID = Depends(valid_brand_id),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Get the models of a brand ordered by name.
    """
    models = await service.list_models(brand_id)
    if not models:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return models
