"""
HTTP client for the pricing service.

GET {pricing_url}/services/price?vehicleId={id} -> {"vehicleId", "price", "currency"}
"""

import logging
from decimal import Decimal

import httpx

from vehicles.clients.base import PricingClient
from vehicles.config import settings
from vehicles.schemas.car import Price

logger = logging.getLogger(__name__)


class HttpPricingClient(PricingClient):
    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or settings.pricing_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout

    async def get_price(self, vehicle_id: int) -> Price:
        url = f"{self.base_url}/services/price"
        logger.debug(f"Fetching price for vehicle {vehicle_id}")
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(url, params={"vehicleId": vehicle_id})
            response.raise_for_status()
            # Decimal keeps the price exactly as sent, trailing zeros included
            data = response.json(parse_float=Decimal)
        return Price.model_validate(data)
