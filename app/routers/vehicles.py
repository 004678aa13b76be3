"""
Vehicle routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import List
from uuid import UUID

from app.dependencies import get_vehicle_service, valid_vehicle_id
from app.schemas.vehicle import VehicleCreate, VehicleId, VehicleSummary, VehicleUpdate
from app.services.vehicles import VehicleService

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get(
    "/",
    response_model=List[VehicleSummary],
    responses={204: {"description": "No vehicles registered"}},
)
async def get_vehicles(service: VehicleService = Depends(get_vehicle_service)):
    """
    Get all vehicles ordered by plate.
    """
    vehicles = await service.list_all()
    if not vehicles:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return vehicles


@router.get("/{vehicle_id}", response_model=None)
async def get_vehicle(
    vehicle_id: UUID = Depends(valid_vehicle_id),
    service: VehicleService = Depends(get_vehicle_service)
):
    """
    Get a vehicle with its registration and inspection status.
    """
    detail = await service.get_detail(vehicle_id)

    if detail is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Vehicle not found"
        )

    return detail


@router.post("/", response_model=VehicleId, status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    vehicle: VehicleCreate,
    service: VehicleService = Depends(get_vehicle_service)
):
    """
    Create a new vehicle.
    """
    vehicle_id = await service.add(vehicle)
    return VehicleId(id=vehicle_id)


@router.put("/{vehicle_id}", response_model=VehicleId)
async def update_vehicle(
    vehicle_update: VehicleUpdate,
    vehicle_id: UUID = Depends(valid_vehicle_id),
    service: VehicleService = Depends(get_vehicle_service)
):
    """
    Update a vehicle.
    """
    updated_id = await service.edit(vehicle_id, vehicle_update)
    return VehicleId(id=updated_id)


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vehicle(
    vehicle_id: UUID = Depends(valid_vehicle_id),
    service: VehicleService = Depends(get_vehicle_service)
):
    """
    Delete a vehicle.
    """
    await service.remove(vehicle_id)
    return None
