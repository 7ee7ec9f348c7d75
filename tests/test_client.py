import httpx
import pytest

from weather_now.weather.client import OpenMeteoWeatherClient
from weather_now.weather.errors import WeatherError

from tests.helpers import FORECAST_HOST, SAMPLE_FORECAST, UpstreamStub


async def _fetch(stub: UpstreamStub, lat: float = 1.0, lon: float = 2.0):
    async with stub.client() as http_client:
        return await OpenMeteoWeatherClient(http_client).get_current_weather(lat, lon)


@pytest.mark.asyncio
async def test_current_weather_request_parameters(upstream):
    data = await _fetch(upstream, 51.50853, -0.12574)

    assert data == SAMPLE_FORECAST
    (request,) = upstream.requests_to(FORECAST_HOST)
    params = request.url.params
    assert request.url.path == "/v1/forecast"
    assert params["latitude"] == "51.50853"
    assert params["longitude"] == "-0.12574"
    assert params["current_weather"] == "true"
    assert params["timezone"] == "auto"
    assert params["windspeed_unit"] == "kmh"
    assert params["temperature_unit"] == "celsius"


@pytest.mark.asyncio
async def test_current_weather_http_error():
    stub = UpstreamStub(forecast={"error": True, "reason": "bad"}, forecast_status=400)
    with pytest.raises(WeatherError):
        await _fetch(stub)


@pytest.mark.asyncio
async def test_current_weather_timeout():
    stub = UpstreamStub(error=lambda request: httpx.ReadTimeout("slow", request=request))
    with pytest.raises(WeatherError):
        await _fetch(stub)


@pytest.mark.asyncio
async def test_current_weather_non_object_body():
    stub = UpstreamStub(forecast=[1, 2, 3])
    with pytest.raises(WeatherError):
        await _fetch(stub)


@pytest.mark.asyncio
async def test_owned_client_is_closed():
    client = OpenMeteoWeatherClient()
    async with client:
        pass
    assert client.client.is_closed


@pytest.mark.asyncio
async def test_shared_client_left_open(upstream):
    async with upstream.client() as http_client:
        async with OpenMeteoWeatherClient(http_client):
            pass
        assert not http_client.is_closed
