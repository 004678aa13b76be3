"""
Persistence gateways.
"""
from app.repositories.catalog import CatalogRepository
from app.repositories.vehicles import VehicleRepository

__all__ = ["CatalogRepository", "VehicleRepository"]
