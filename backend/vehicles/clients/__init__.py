"""
Clients for the downstream services a car read is enriched from.
"""
from vehicles.clients.base import MapsClient, PricingClient
from vehicles.clients.maps import HttpMapsClient
from vehicles.clients.pricing import HttpPricingClient

__all__ = ["MapsClient", "PricingClient", "HttpMapsClient", "HttpPricingClient"]
