import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import unittest
import uuid
from decimal import Decimal
from unittest import mock

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import build_session_factory, init_db
from app.errors import (
    AlreadyDeletedError,
    ConflictError,
    MissingReferenceError,
    NotFoundError,
    StorageFaultError,
)
from app.models import Brand, Model
from app.repositories import CatalogRepository, VehicleRepository
from app.schemas.vehicle import VehicleUpdate

from sample_data import BRAND_ID, MODEL_ID, make_create, vehicle_payload


class RepositoryTestCase(unittest.IsolatedAsyncioTestCase):
    """Runs every test against a fresh in-memory database."""

    async def asyncSetUp(self):
        self.engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
        await init_db(self.engine)
        self.session_factory = build_session_factory(self.engine)

        async with self.session_factory() as session, session.begin():
            session.add(Brand(id=BRAND_ID, name="Toyota"))
            session.add(Model(id=MODEL_ID, brand_id=BRAND_ID, name="Corolla"))

    async def asyncTearDown(self):
        await self.engine.dispose()


class TestVehicleRepository(RepositoryTestCase):

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.repository = VehicleRepository(self.session_factory)

    async def test_create_then_read_round_trip(self):
        """Created vehicle reads back with the same fields"""
        vehicle_id = await self.repository.add_vehicle(make_create())

        summary = await self.repository.get_vehicle(vehicle_id)

        self.assertIsNotNone(summary)
        self.assertEqual(summary.id, vehicle_id)
        self.assertEqual(summary.plate, "ABC-123")
        self.assertEqual(summary.color, "Red")
        self.assertEqual(summary.year, 2023)
        self.assertEqual(summary.price, Decimal("25000.00"))
        self.assertEqual(summary.owner_email, "a@b.com")
        self.assertEqual(summary.owner_phone, "555-1234")
        self.assertEqual(summary.model_id, MODEL_ID)
        self.assertEqual(summary.model_name, "Corolla")
        self.assertEqual(summary.brand_name, "Toyota")
        self.assertIsNotNone(summary.created_at)

    async def test_duplicate_plate_conflicts(self):
        """Second vehicle with the same plate is rejected, first survives"""
        first_id = await self.repository.add_vehicle(make_create())

        with self.assertRaises(ConflictError):
            await self.repository.add_vehicle(make_create(color="Blue"))

        first = await self.repository.get_vehicle(first_id)
        self.assertEqual(first.color, "Red")
        self.assertEqual(len(await self.repository.list_vehicles()), 1)

    async def test_create_with_unknown_model(self):
        """Missing model reference aborts the insert"""
        with self.assertRaises(MissingReferenceError):
            await self.repository.add_vehicle(make_create(model_id=str(uuid.uuid4())))

        self.assertEqual(await self.repository.list_vehicles(), [])

    async def test_update_to_other_vehicles_plate(self):
        """Taking the plate of a different vehicle is a conflict"""
        await self.repository.add_vehicle(make_create(plate="AAA-111"))
        second_id = await self.repository.add_vehicle(make_create(plate="BBB-222"))

        with self.assertRaises(ConflictError):
            await self.repository.edit_vehicle(
                second_id, VehicleUpdate(**vehicle_payload(plate="AAA-111"))
            )

        second = await self.repository.get_vehicle(second_id)
        self.assertEqual(second.plate, "BBB-222")

    async def test_update_keeping_own_plate(self):
        """Updating with the vehicle's current plate succeeds"""
        vehicle_id = await self.repository.add_vehicle(make_create())

        result = await self.repository.edit_vehicle(
            vehicle_id, VehicleUpdate(**vehicle_payload(color="Green", price="19999.99"))
        )

        self.assertEqual(result, vehicle_id)
        updated = await self.repository.get_vehicle(vehicle_id)
        self.assertEqual(updated.color, "Green")
        self.assertEqual(updated.price, Decimal("19999.99"))
        self.assertIsNotNone(updated.updated_at)

    async def test_update_missing_vehicle(self):
        with self.assertRaises(NotFoundError):
            await self.repository.edit_vehicle(uuid.uuid4(), VehicleUpdate(**vehicle_payload()))

    async def test_update_with_unknown_model(self):
        vehicle_id = await self.repository.add_vehicle(make_create())

        with self.assertRaises(MissingReferenceError):
            await self.repository.edit_vehicle(
                vehicle_id, VehicleUpdate(**vehicle_payload(model_id=str(uuid.uuid4())))
            )

    async def test_delete_missing_vehicle(self):
        with self.assertRaises(NotFoundError):
            await self.repository.remove_vehicle(uuid.uuid4())

    async def test_delete_then_read(self):
        """Deleted vehicle is gone"""
        vehicle_id = await self.repository.add_vehicle(make_create())

        self.assertEqual(await self.repository.remove_vehicle(vehicle_id), vehicle_id)

        self.assertIsNone(await self.repository.get_vehicle(vehicle_id))

    async def test_delete_racing_another_delete(self):
        """Zero affected rows after the existence check is reported, not ignored"""
        vehicle_id = await self.repository.add_vehicle(make_create())
        original_execute = AsyncSession.execute

        async def racing_execute(session, statement, *args, **kwargs):
            if getattr(statement, "is_delete", False):
                # Another request deletes the row first
                await original_execute(session, statement, *args, **kwargs)
            return await original_execute(session, statement, *args, **kwargs)

        with mock.patch.object(AsyncSession, "execute", racing_execute):
            with self.assertRaises(AlreadyDeletedError):
                await self.repository.remove_vehicle(vehicle_id)

    async def test_get_unknown_vehicle(self):
        self.assertIsNone(await self.repository.get_vehicle(uuid.uuid4()))

    async def test_list_empty(self):
        """Empty store yields an empty list"""
        self.assertEqual(await self.repository.list_vehicles(), [])

    async def test_list_ordered_by_plate(self):
        for plate in ("ZZZ-999", "ABC-123", "MMM-500"):
            await self.repository.add_vehicle(make_create(plate=plate))

        plates = [vehicle.plate for vehicle in await self.repository.list_vehicles()]

        self.assertEqual(plates, ["ABC-123", "MMM-500", "ZZZ-999"])

    async def test_storage_fault(self):
        """Backend errors surface as StorageFaultError"""
        bare_engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
        repository = VehicleRepository(build_session_factory(bare_engine))
        try:
            with self.assertRaises(StorageFaultError):
                await repository.list_vehicles()
            with self.assertRaises(StorageFaultError):
                await repository.add_vehicle(make_create())
        finally:
            await bare_engine.dispose()


class TestCatalogRepository(RepositoryTestCase):

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.repository = CatalogRepository(self.session_factory)

    async def test_list_brands_ordered_by_name(self):
        async with self.session_factory() as session, session.begin():
            session.add(Brand(id=uuid.uuid4(), name="Honda"))

        names = [brand.name for brand in await self.repository.list_brands()]

        self.assertEqual(names, ["Honda", "Toyota"])

    async def test_list_models_of_brand(self):
        other_brand = uuid.uuid4()
        async with self.session_factory() as session, session.begin():
            session.add(Brand(id=other_brand, name="Honda"))
            session.add(Model(id=uuid.uuid4(), brand_id=other_brand, name="Civic"))
            session.add(Model(id=uuid.uuid4(), brand_id=BRAND_ID, name="Camry"))

        models = await self.repository.list_models(BRAND_ID)

        self.assertEqual([model.name for model in models], ["Camry", "Corolla"])
        self.assertTrue(all(model.brand_id == BRAND_ID for model in models))

    async def test_list_models_of_unknown_brand(self):
        self.assertEqual(await self.repository.list_models(uuid.uuid4()), [])


if __name__ == "__main__":
    unittest.main()
