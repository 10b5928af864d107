"""
Storage port for cars and its SQLite implementation.
"""

from abc import ABC, abstractmethod

from vehicles import db
from vehicles.errors import CarNotFoundError
from vehicles.schemas.car import Car, Location


class CarRepository(ABC):
    """Base class for car storage backends."""

    @abstractmethod
    async def find_all(self) -> list[Car]:
        pass

    @abstractmethod
    async def find_by_id(self, car_id: int) -> Car | None:
        pass

    @abstractmethod
    async def save(self, car: Car) -> Car:
        """
        Persist a car.

        Inserts when car.id is None, otherwise overwrites the existing row and
        raises CarNotFoundError if that row is gone.
        Transient fields (price, street address) are never stored.
        """
        pass

    @abstractmethod
    async def delete(self, car_id: int) -> bool:
        pass


class SqliteCarRepository(CarRepository):
    """Car repository backed by the aiosqlite layer in vehicles.db."""

    async def find_all(self) -> list[Car]:
        return [_to_car(row) for row in await db.list_cars()]

    async def find_by_id(self, car_id: int) -> Car | None:
        row = await db.get_car(car_id)
        return _to_car(row) if row else None

    async def save(self, car: Car) -> Car:
        fields = {
            "condition": car.condition.value,
            "details": car.details.model_dump(),
            "lat": car.location.lat,
            "lon": car.location.lon,
        }
        if car.id is None:
            row = await db.insert_car(**fields)
        else:
            row = await db.update_car(car.id, **fields)
            if row is None:
                raise CarNotFoundError(car.id)
        return _to_car(row)

    async def delete(self, car_id: int) -> bool:
        return await db.delete_car(car_id)


def _to_car(row: dict) -> Car:
    return Car(
        id=row["id"],
        created_at=row["created_at"],
        modified_at=row["modified_at"],
        condition=row["condition"],
        details=row["details"],
        location=Location(lat=row["lat"], lon=row["lon"]),
    )
