"""
HTTP client for the maps service.

GET {maps_url}/maps?lat={lat}&lon={lon} -> {"address", "city", "state", "zip"}
"""

import logging

import httpx

from vehicles.clients.base import MapsClient
from vehicles.config import settings
from vehicles.schemas.car import Address

logger = logging.getLogger(__name__)


class HttpMapsClient(MapsClient):
    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or settings.maps_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout

    async def get_address(self, lat: float, lon: float) -> Address:
        url = f"{self.base_url}/maps"
        logger.debug(f"Fetching address for ({lat}, {lon})")
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(url, params={"lat": lat, "lon": lon})
            response.raise_for_status()
            data = response.json()
        return Address.model_validate(data)
