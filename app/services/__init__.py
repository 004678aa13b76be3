"""
Application services.
"""
from app.services.catalog import CatalogService
from app.services.vehicles import VehicleService

__all__ = ["CatalogService", "VehicleService"]
