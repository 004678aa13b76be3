"""
Vehicle orchestration: write and list operations pass straight through to the
repository, detail reads are enriched with the two external checks.
"""
import asyncio
import logging
from typing import Callable, List, Optional
from uuid import UUID

from app.repositories.vehicles import VehicleRepository
from app.rules.inspection import InspectionRule
from app.rules.registration import RegistrationRule
from app.schemas.validation import ValidatorResult
from app.schemas.vehicle import VehicleCreate, VehicleDetail, VehicleSummary, VehicleUpdate

logger = logging.getLogger(__name__)


async def _run_check(name: str, check: Callable[..., ValidatorResult], *args) -> ValidatorResult:
    """Run a blocking check in a worker thread, capturing any failure as a result."""
    try:
        return await asyncio.to_thread(check, *args)
    except Exception as exc:
        logger.warning("%s check raised %s: %s", name, type(exc).__name__, exc)
        return ValidatorResult.failed(f"{type(exc).__name__}: {exc}")


class VehicleService:
    """Coordinates the vehicle repository and the validation rules."""

    def __init__(
        self,
        repository: VehicleRepository,
        registration_rule: RegistrationRule,
        inspection_rule: InspectionRule,
    ):
        self._repository = repository
        self._registration_rule = registration_rule
        self._inspection_rule = inspection_rule

    async def add(self, vehicle: VehicleCreate) -> UUID:
        return await self._repository.add_vehicle(vehicle)

    async def edit(self, vehicle_id: UUID, vehicle: VehicleUpdate) -> UUID:
        return await self._repository.edit_vehicle(vehicle_id, vehicle)

    async def remove(self, vehicle_id: UUID) -> UUID:
        return await self._repository.remove_vehicle(vehicle_id)

    async def list_all(self) -> List[VehicleSummary]:
        return await self._repository.list_vehicles()

    async def get_detail(self, vehicle_id: UUID) -> Optional[VehicleDetail]:
        """
        Fetch a vehicle and run both checks on it concurrently.

        Returns None when the vehicle does not exist, without calling either
        validator. Each check is isolated: a failure in one is reported as a
        failed result and never affects the other or the base record.
        """
        vehicle = await self._repository.get_vehicle(vehicle_id)
        if vehicle is None:
            return None

        registration, inspection = await asyncio.gather(
            _run_check("registration", self._registration_rule.is_valid, vehicle.plate, vehicle.owner_email),
            _run_check("inspection", self._inspection_rule.is_valid, vehicle.plate),
        )
        logger.debug(
            "Vehicle %s checks: registration=%s inspection=%s",
            vehicle_id, registration.status.value, inspection.status.value,
        )

        return VehicleDetail(
            vehicle=vehicle,
            registration_check=registration,
            inspection_check=inspection,
        )
