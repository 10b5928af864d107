"""Tests for the pricing and maps HTTP clients."""

import httpx
import pytest
import respx

from vehicles.clients import HttpMapsClient, HttpPricingClient


class TestPricingClient:
    @respx.mock
    @pytest.mark.asyncio
    async def test_get_price(self):
        route = respx.get("http://pricing.local/services/price").mock(
            return_value=httpx.Response(200, json={"vehicleId": 7, "price": "20500.50", "currency": "USD"})
        )

        price = await HttpPricingClient("http://pricing.local/").get_price(7)

        assert route.calls.last.request.url.params["vehicleId"] == "7"
        assert price.vehicle_id == 7
        assert str(price.price) == "20500.50"
        assert price.currency == "USD"

    @respx.mock
    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        respx.get("http://pricing.local/services/price").mock(return_value=httpx.Response(404))

        with pytest.raises(httpx.HTTPStatusError):
            await HttpPricingClient("http://pricing.local").get_price(1)


class TestMapsClient:
    @respx.mock
    @pytest.mark.asyncio
    async def test_get_address(self, sample_address):
        route = respx.get("http://maps.local/maps").mock(return_value=httpx.Response(200, json=sample_address))

        address = await HttpMapsClient("http://maps.local").get_address(42.1, -71.05)

        params = route.calls.last.request.url.params
        assert params["lat"] == "42.1"
        assert params["lon"] == "-71.05"
        assert address.address == "777 Brockton Avenue"
        assert address.state == "MA"

    @respx.mock
    @pytest.mark.asyncio
    async def test_connection_error_raises(self):
        respx.get("http://maps.local/maps").mock(side_effect=httpx.ConnectError("Connection refused"))

        with pytest.raises(httpx.ConnectError):
            await HttpMapsClient("http://maps.local").get_address(0.0, 0.0)


class TestPricingClientDecimals:
    @respx.mock
    @pytest.mark.asyncio
    async def test_numeric_price_keeps_trailing_zeros(self):
        respx.get("http://pricing.local/services/price").mock(
            return_value=httpx.Response(
                200,
                content=b'{"vehicleId": 1, "price": 20000.00, "currency": "USD"}',
                headers={"Content-Type": "application/json"},
            )
        )

        price = await HttpPricingClient("http://pricing.local").get_price(1)

        assert str(price.price) == "20000.00"

    @respx.mock
    @pytest.mark.asyncio
    async def test_large_numeric_price_is_exact(self):
        respx.get("http://pricing.local/services/price").mock(
            return_value=httpx.Response(200, content=b'{"vehicleId": 2, "price": 12345678901234567.89}')
        )

        price = await HttpPricingClient("http://pricing.local").get_price(2)

        assert str(price.price) == "12345678901234567.89"
