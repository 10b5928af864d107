"""Vehicles service: car records enriched with price and location data."""
