"""
Pydantic schemas for Vehicle.
"""
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_serializer
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from app.schemas.validation import ValidatorResult

PLATE_PATTERN = r"^[A-Z]{3}-[0-9]{3}$"
MIN_YEAR = 1900
MAX_YEAR = 2100


class VehicleBase(BaseModel):
    """Base vehicle schema with the writable fields."""
    model_id: UUID
    plate: str = Field(pattern=PLATE_PATTERN, examples=["ABC-123"])
    color: str = Field(min_length=1, max_length=50)
    year: int = Field(ge=MIN_YEAR, le=MAX_YEAR)
    price: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    owner_email: EmailStr
    owner_phone: str = Field(min_length=7, max_length=30)

    model_config = ConfigDict(protected_namespaces=())

    @field_validator("model_id")
    @classmethod
    def model_id_not_empty(cls, value: UUID) -> UUID:
        if value.int == 0:
            raise ValueError("model_id must not be empty")
        return value


class VehicleCreate(VehicleBase):
    """Schema for creating a vehicle."""
    pass


class VehicleUpdate(VehicleBase):
    """Schema for updating a vehicle. Every field is replaced."""
    pass


class VehicleId(BaseModel):
    """Identifier returned by write operations."""
    id: UUID


class VehicleSummary(BaseModel):
    """Vehicle as shown in lists, with brand and model names."""
    id: UUID
    model_id: UUID
    model_name: str
    brand_id: UUID
    brand_name: str
    plate: str
    color: str
    year: int
    price: Decimal
    owner_email: str
    owner_phone: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, protected_namespaces=())


class VehicleDetail(BaseModel):
    """
    A vehicle summary enriched with the outcome of both external checks.

    The tagged outcomes are kept so callers can tell a negative answer from an
    unreachable validator. Serialization flattens the summary and reports each
    check as a plain boolean.
    """
    vehicle: VehicleSummary
    registration_check: ValidatorResult
    inspection_check: ValidatorResult

    @property
    def registration_valid(self) -> bool:
        return self.registration_check.is_valid

    @property
    def inspection_valid(self) -> bool:
        return self.inspection_check.is_valid

    @model_serializer(mode="wrap")
    def serialize_flat(self, handler):
        data = handler(self)
        payload = dict(data["vehicle"])
        payload["registration_valid"] = self.registration_valid
        payload["inspection_valid"] = self.inspection_valid
        return payload
