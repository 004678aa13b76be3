"""
FastAPI dependency factories. Every component receives its collaborators
through its constructor; this module is the only place they are assembled.
"""
from functools import lru_cache
from uuid import UUID

import requests
from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.clients import InspectionClient, RegistrationClient
from app.config import Settings, get_settings
from app.database import get_session_factory
from app.repositories import CatalogRepository, VehicleRepository
from app.rules import InspectionRule, RegistrationRule
from app.services import CatalogService, VehicleService


@lru_cache()
def get_http_session() -> requests.Session:
    """Pooled HTTP session shared by the validator clients."""
    return requests.Session()


def get_registration_rule(settings: Settings = Depends(get_settings)) -> RegistrationRule:
    client = RegistrationClient(
        settings.registration_url,
        timeout=settings.validator_timeout_seconds,
        session=get_http_session(),
    )
    return RegistrationRule(client)


def get_inspection_rule(settings: Settings = Depends(get_settings)) -> InspectionRule:
    client = InspectionClient(
        settings.inspection_url,
        timeout=settings.validator_timeout_seconds,
        session=get_http_session(),
    )
    return InspectionRule(client)


def get_vehicle_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    registration_rule: RegistrationRule = Depends(get_registration_rule),
    inspection_rule: InspectionRule = Depends(get_inspection_rule),
) -> VehicleService:
    return VehicleService(VehicleRepository(session_factory), registration_rule, inspection_rule)


def get_catalog_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> CatalogService:
    return CatalogService(CatalogRepository(session_factory))


def _require_identifier(value: UUID, label: str) -> UUID:
    if value.int == 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label} must not be empty"
        )
    return value


def valid_vehicle_id(vehicle_id: UUID) -> UUID:
    """Reject the all-zero identifier before it reaches the service."""
    return _require_identifier(vehicle_id, "Vehicle id")


def valid_brand_id(brand_id: UUID) -> UUID:
    return _require_identifier(brand_id, "Brand id")
