"""
Base client interfaces for the pricing and maps collaborators.
"""

from abc import ABC, abstractmethod

from vehicles.schemas.car import Address, Price


class PricingClient(ABC):
    """Looks up the current price of a vehicle."""

    @abstractmethod
    async def get_price(self, vehicle_id: int) -> Price:
        pass


class MapsClient(ABC):
    """Reverse-geocodes a coordinate into a postal address."""

    @abstractmethod
    async def get_address(self, lat: float, lon: float) -> Address:
        pass
