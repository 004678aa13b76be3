"""
Pydantic schemas for request/response validation.
"""
from app.schemas.catalog import Brand, Model
from app.schemas.validation import CheckStatus, ValidatorResult
from app.schemas.vehicle import (
    VehicleBase, VehicleCreate, VehicleUpdate, VehicleId, VehicleSummary, VehicleDetail,
)

__all__ = [
    "Brand", "Model",
    "CheckStatus", "ValidatorResult",
    "VehicleBase", "VehicleCreate", "VehicleUpdate", "VehicleId", "VehicleSummary", "VehicleDetail",
]
