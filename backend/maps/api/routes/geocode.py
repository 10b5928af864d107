"""
Reverse-geocoding API route.
"""

import logging

from fastapi import APIRouter, Query

from maps.address_book import lookup

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/maps", tags=["maps"])


@router.get("")
async def get_address(
    lat: float = Query(..., ge=-90, le=90, description="Latitude"),
    lon: float = Query(..., ge=-180, le=180, description="Longitude"),
):
    """Return the postal address for a coordinate."""
    address = lookup(lat, lon)
    logger.debug(f"Resolved ({lat}, {lon}) to {address.address}, {address.city}")
    return address.to_dict()
