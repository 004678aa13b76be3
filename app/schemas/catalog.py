"""
Pydantic schemas for Brand and Model.
"""
from pydantic import BaseModel, ConfigDict
from uuid import UUID


class Brand(BaseModel):
    """Schema for brand responses."""
    id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class Model(BaseModel):
    """Schema for model responses."""
    id: UUID
    brand_id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)
