"""
Car CRUD API routes.

GET /cars/{id} enriches the stored car with its current price and address.
Listing returns stored data only.
"""

import logging

from fastapi import APIRouter, Depends, Response

from vehicles.dependencies import get_car_service
from vehicles.schemas.car import Car, CarList
from vehicles.services.car_service import CarService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cars", tags=["cars"])


@router.get("", response_model=CarList)
async def list_cars(service: CarService = Depends(get_car_service)):
    """List all stored cars."""
    cars = await service.list()
    return CarList(cars=cars, count=len(cars))


@router.get("/{car_id}", response_model=Car)
async def get_car(car_id: int, service: CarService = Depends(get_car_service)):
    """Get a car with its current price and street address."""
    return await service.find_by_id(car_id)


@router.post("", response_model=Car, status_code=201)
async def create_car(car: Car, service: CarService = Depends(get_car_service)):
    """Create a new car. Any id in the body is ignored."""
    car.id = None
    return await service.save(car)


@router.put("/{car_id}", response_model=Car)
async def update_car(car_id: int, car: Car, service: CarService = Depends(get_car_service)):
    """Overwrite the details and location of an existing car."""
    car.id = car_id
    return await service.save(car)


@router.delete("/{car_id}", status_code=204)
async def delete_car(car_id: int, service: CarService = Depends(get_car_service)):
    """Delete a car."""
    await service.delete(car_id)
    return Response(status_code=204)
