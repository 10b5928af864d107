"""Tests for the SQLite database layer."""

import pytest

from vehicles.db import delete_car, get_car, insert_car, list_cars, update_car

DETAILS = {"body": "sedan", "model": "Impala", "manufacturer": {"code": 101, "name": "Chevrolet"}}


@pytest.fixture(autouse=True)
def _use_temp_db(temp_db):
    yield


class TestCars:
    @pytest.mark.asyncio
    async def test_insert_and_get(self):
        row = await insert_car(condition="USED", details=DETAILS, lat=40.7, lon=-73.9)
        assert row["id"] > 0
        assert row["created_at"] == row["modified_at"]

        fetched = await get_car(row["id"])
        assert fetched["details"] == DETAILS
        assert fetched["lat"] == 40.7
        assert fetched["condition"] == "USED"

    @pytest.mark.asyncio
    async def test_get_missing(self):
        assert await get_car(42) is None

    @pytest.mark.asyncio
    async def test_list_in_insertion_order(self):
        first = await insert_car(condition="NEW", details=DETAILS, lat=1.0, lon=2.0)
        second = await insert_car(condition="USED", details=DETAILS, lat=3.0, lon=4.0)

        rows = await list_cars()
        assert [r["id"] for r in rows] == [first["id"], second["id"]]

    @pytest.mark.asyncio
    async def test_update(self):
        row = await insert_car(condition="USED", details=DETAILS, lat=1.0, lon=2.0)
        new_details = {**DETAILS, "model": "Malibu"}

        updated = await update_car(row["id"], condition="USED", details=new_details, lat=5.0, lon=6.0)
        assert updated["id"] == row["id"]
        assert updated["details"]["model"] == "Malibu"
        assert updated["lat"] == 5.0
        assert updated["created_at"] == row["created_at"]

    @pytest.mark.asyncio
    async def test_update_missing(self):
        assert await update_car(9999, condition="USED", details=DETAILS, lat=0.0, lon=0.0) is None

    @pytest.mark.asyncio
    async def test_delete(self):
        row = await insert_car(condition="USED", details=DETAILS, lat=1.0, lon=2.0)
        assert await delete_car(row["id"]) is True
        assert await get_car(row["id"]) is None

        # Deleting non-existent returns False
        assert await delete_car(row["id"]) is False

    @pytest.mark.asyncio
    async def test_no_price_or_address_columns(self):
        row = await insert_car(condition="USED", details=DETAILS, lat=1.0, lon=2.0)
        assert "price" not in row
        assert "address" not in row
