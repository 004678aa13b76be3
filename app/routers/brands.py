"""
Brand routes.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.dependencies import get_catalog_service
from app.schemas.catalog import Brand
from app.services.catalog import CatalogService

router = APIRouter(prefix="/brands", tags=["brands"])


@router.get(
    "/",
    response_model=List[Brand],
    responses={204: {"description": "No brands registered"}},
)
async def get_brands(service: CatalogService = Depends(get_catalog_service)):
    """
    Get all brands ordered by name.
    """
    brands = await service.list_brands()
    if not brands:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return brands
