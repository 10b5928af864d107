"""
Process-wide wiring of the car service and its collaborators.
"""

from functools import lru_cache

from vehicles.clients import HttpMapsClient, HttpPricingClient
from vehicles.repository import SqliteCarRepository
from vehicles.services.car_service import CarService


@lru_cache
def get_car_service() -> CarService:
    """Build the car service once and reuse it for every request."""
    return CarService(
        repository=SqliteCarRepository(),
        pricing=HttpPricingClient(),
        maps=HttpMapsClient(),
    )
