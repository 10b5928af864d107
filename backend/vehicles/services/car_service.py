"""
Car service: create, read, update and delete cars, and enrich a single-car
read with its current price and street address.

Price and address are fetched from the pricing and maps services on every
read, pricing first, then maps. A downstream failure propagates to the caller.
"""

import logging

from vehicles.clients.base import MapsClient, PricingClient
from vehicles.errors import CarNotFoundError
from vehicles.repository import CarRepository
from vehicles.schemas.car import Car

logger = logging.getLogger(__name__)


class CarService:
    def __init__(self, repository: CarRepository, pricing: PricingClient, maps: MapsClient):
        self.repository = repository
        self.pricing = pricing
        self.maps = maps

    async def list(self) -> list[Car]:
        """All stored cars, without price or address."""
        return await self.repository.find_all()

    async def find_by_id(self, car_id: int) -> Car:
        """Get a car by id, including its location address and price."""
        car = await self._get_or_raise(car_id)

        price = await self.pricing.get_price(car_id)
        car.price = str(price.price)

        address = await self.maps.get_address(car.location.lat, car.location.lon)
        car.location.address = address.address
        car.location.city = address.city
        car.location.state = address.state
        car.location.zip = address.zip

        return car

    async def save(self, car: Car) -> Car:
        """
        Create or update a car.

        Without an id the car is inserted. With an id only the details and
        location of the stored car are overwritten.
        """
        if car.id is not None:
            logger.info(f"Updating car {car.id}")
            existing = await self._get_or_raise(car.id)
            existing.details = car.details
            existing.location = car.location.stored()
            return await self.repository.save(existing)

        new_car = car.model_copy(update={"location": car.location.stored(), "price": None})
        saved = await self.repository.save(new_car)
        logger.info(f"Created car {saved.id}")
        return saved

    async def delete(self, car_id: int) -> None:
        await self._get_or_raise(car_id)
        await self.repository.delete(car_id)
        logger.info(f"Deleted car {car_id}")

    async def _get_or_raise(self, car_id: int) -> Car:
        car = await self.repository.find_by_id(car_id)
        if car is None:
            raise CarNotFoundError(car_id)
        return car
