"""
Persistence operations for vehicles.

Every write runs inside its own transaction: the reference and uniqueness
checks and the mutation commit together or not at all.
"""
import logging
import uuid
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import func

from app.errors import (
    AlreadyDeletedError,
    ConflictError,
    MissingReferenceError,
    NotFoundError,
    StorageFaultError,
)
from app.models import Brand, Model, Vehicle
from app.schemas.vehicle import VehicleCreate, VehicleSummary, VehicleUpdate

logger = logging.getLogger(__name__)


def _summary_query():
    return (
        select(
            Vehicle.id,
            Vehicle.model_id,
            Model.name.label("model_name"),
            Model.brand_id,
            Brand.name.label("brand_name"),
            Vehicle.plate,
            Vehicle.color,
            Vehicle.year,
            Vehicle.price,
            Vehicle.owner_email,
            Vehicle.owner_phone,
            Vehicle.created_at,
            Vehicle.updated_at,
        )
        .join(Model, Vehicle.model_id == Model.id)
        .join(Brand, Model.brand_id == Brand.id)
    )


def _storage_fault(operation: str, exc: SQLAlchemyError) -> StorageFaultError:
    logger.error("Storage failure during %s", operation, exc_info=exc)
    return StorageFaultError(f"{operation} failed")


class VehicleRepository:
    """Gateway to the vehicles table."""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def add_vehicle(self, vehicle: VehicleCreate) -> UUID:
        """Insert a vehicle and return its newly generated id."""
        try:
            async with self._session_factory() as session, session.begin():
                await self._require_model(session, vehicle.model_id)
                await self._require_free_plate(session, vehicle.plate)

                vehicle_id = uuid.uuid4()
                session.add(Vehicle(id=vehicle_id, **vehicle.model_dump()))
        except SQLAlchemyError as exc:
            raise _storage_fault("add_vehicle", exc) from exc

        logger.info("Vehicle %s created with plate %s", vehicle_id, vehicle.plate)
        return vehicle_id

    async def edit_vehicle(self, vehicle_id: UUID, vehicle: VehicleUpdate) -> UUID:
        """Replace the writable fields of an existing vehicle."""
        try:
            async with self._session_factory() as session, session.begin():
                db_vehicle = await session.get(Vehicle, vehicle_id, with_for_update=True)
                if db_vehicle is None:
                    raise NotFoundError(f"Vehicle {vehicle_id} not found")

                await self._require_model(session, vehicle.model_id)
                await self._require_free_plate(session, vehicle.plate, exclude_id=vehicle_id)

                for field, value in vehicle.model_dump().items():
                    setattr(db_vehicle, field, value)
                db_vehicle.updated_at = func.now()
        except SQLAlchemyError as exc:
            raise _storage_fault("edit_vehicle", exc) from exc

        logger.info("Vehicle %s updated", vehicle_id)
        return vehicle_id

    async def remove_vehicle(self, vehicle_id: UUID) -> UUID:
        """Hard-delete a vehicle."""
        try:
            async with self._session_factory() as session, session.begin():
                existing = await session.scalar(select(Vehicle.id).where(Vehicle.id == vehicle_id))
                if existing is None:
                    raise NotFoundError(f"Vehicle {vehicle_id} not found")

                result = await session.execute(delete(Vehicle).where(Vehicle.id == vehicle_id))
                # A concurrent delete can win between the check and the delete
                if result.rowcount == 0:
                    raise AlreadyDeletedError(f"Vehicle {vehicle_id} was already deleted")
        except SQLAlchemyError as exc:
            raise _storage_fault("remove_vehicle", exc) from exc

        logger.info("Vehicle %s deleted", vehicle_id)
        return vehicle_id

    async def list_vehicles(self) -> List[VehicleSummary]:
        """All vehicles ordered by plate."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(_summary_query().order_by(Vehicle.plate))
                rows = result.all()
        except SQLAlchemyError as exc:
            raise _storage_fault("list_vehicles", exc) from exc

        return [VehicleSummary.model_validate(row) for row in rows]

    async def get_vehicle(self, vehicle_id: UUID) -> Optional[VehicleSummary]:
        """A single vehicle, or None when the id is unknown."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(_summary_query().where(Vehicle.id == vehicle_id))
                row = result.one_or_none()
        except SQLAlchemyError as exc:
            raise _storage_fault("get_vehicle", exc) from exc

        if row is None:
            return None
        return VehicleSummary.model_validate(row)

    @staticmethod
    async def _require_model(session: AsyncSession, model_id: UUID) -> None:
        found = await session.scalar(select(Model.id).where(Model.id == model_id))
        if found is None:
            raise MissingReferenceError(f"Model {model_id} does not exist")

    @staticmethod
    async def _require_free_plate(
        session: AsyncSession, plate: str, exclude_id: Optional[UUID] = None
    ) -> None:
        query = select(Vehicle.id).where(Vehicle.plate == plate)
        if exclude_id is not None:
            query = query.where(Vehicle.id != exclude_id)
        if await session.scalar(query) is not None:
            raise ConflictError(f"Plate {plate} is already registered")
