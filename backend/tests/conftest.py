"""
Shared fixtures for the vehicles and maps service tests.
"""
import os
import sys
from unittest import mock

import pytest
import pytest_asyncio
import respx

# Ensure the backend packages are importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Point the downstream clients at fake hosts before settings are loaded
os.environ["VEHICLES_PRICING_URL"] = "http://pricing.test"
os.environ["VEHICLES_MAPS_URL"] = "http://maps.test"



@pytest_asyncio.fixture
async def temp_db(tmp_path):
    """Use a temp database for each test."""
    import vehicles.db as db_mod

    db_mod._db = None
    with mock.patch.object(db_mod, "DB_PATH", tmp_path / "test.db"):
        yield tmp_path / "test.db"
        await db_mod.close_db()


@pytest.fixture
def downstream():
    """Mock router for the pricing and maps HTTP services."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def sample_car_payload():
    """A car as a client would POST it."""
    return {
        "condition": "USED",
        "details": {
            "body": "sedan",
            "model": "Impala",
            "manufacturer": {"code": 101, "name": "Chevrolet"},
            "number_of_doors": 4,
            "fuel_type": "Gasoline",
            "engine": "3.6L V6",
            "mileage": 32280,
            "model_year": 2018,
            "production_year": 2018,
            "external_color": "white",
        },
        "location": {"lat": 40.73061, "lon": -73.935242},
    }


@pytest.fixture
def sample_price():
    return {"vehicleId": 1, "price": "15327.45", "currency": "USD"}


@pytest.fixture
def sample_address():
    return {"address": "777 Brockton Avenue", "city": "Abington", "state": "MA", "zip": "02351"}
