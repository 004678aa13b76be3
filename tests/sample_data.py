"""
Shared test data builders.
"""
import uuid
from datetime import datetime, timezone
from decimal import Decimal

from app.schemas.vehicle import VehicleCreate, VehicleSummary

BRAND_ID = uuid.UUID("6f1c2a52-9d1e-4b7e-8d7a-1b2c3d4e5f60")
MODEL_ID = uuid.UUID("0a8b7c6d-5e4f-4a3b-9c2d-1e0f9a8b7c6d")


def vehicle_payload(**overrides) -> dict:
    payload = {
        "model_id": str(MODEL_ID),
        "plate": "ABC-123",
        "color": "Red",
        "year": 2023,
        "price": "25000.00",
        "owner_email": "a@b.com",
        "owner_phone": "555-1234",
    }
    payload.update(overrides)
    return payload


def make_create(**overrides) -> VehicleCreate:
    return VehicleCreate(**vehicle_payload(**overrides))


def make_summary(**overrides) -> VehicleSummary:
    data = {
        "id": uuid.uuid4(),
        "model_id": MODEL_ID,
        "model_name": "Corolla",
        "brand_id": BRAND_ID,
        "brand_name": "Toyota",
        "plate": "ABC-123",
        "color": "Red",
        "year": 2023,
        "price": Decimal("25000.00"),
        "owner_email": "a@b.com",
        "owner_phone": "555-1234",
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "updated_at": None,
    }
    data.update(overrides)
    return VehicleSummary(**data)
