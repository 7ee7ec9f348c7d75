"""HTTP client for the Open-Meteo forecast API."""

import logging
from typing import Any, Dict, Optional

import httpx

from weather_now.config import FORECAST_API_URL, HTTP_TIMEOUT_SECONDS, USER_AGENT
from weather_now.weather.errors import WeatherError

logger = logging.getLogger(__name__)

# Fixed unit and timezone choices for current conditions
CURRENT_WEATHER_PARAMS: Dict[str, str] = {
    "current_weather": "true",
    "timezone": "auto",
    "windspeed_unit": "kmh",
    "temperature_unit": "celsius",
}


class OpenMeteoWeatherClient:
    """Async client for fetching current conditions from Open-Meteo."""

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: str = FORECAST_API_URL
    ):
        """Initialize the weather client.

        Args:
            http_client: Shared HTTP client. If None, the weather client
                creates and owns one.
            base_url: Forecast endpoint URL
        """
        self.base_url = base_url
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=HTTP_TIMEOUT_SECONDS
        )

    async def get_current_weather(self, lat: float, lon: float) -> Dict[str, Any]:
        """Fetch the forecast response with current conditions for coordinates.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees

        Returns:
            Raw forecast JSON from Open-Meteo

        Raises:
            WeatherError: If the request fails or the body is not a JSON object
        """
        params = {"latitude": lat, "longitude": lon, **CURRENT_WEATHER_PARAMS}

        logger.info(f"Fetching current weather for lat={lat}, lon={lon}")

        try:
            response = await self.client.get(self.base_url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from forecast API: {e.response.status_code} - {e.response.text}")
            raise WeatherError(f"Forecast API returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Request error to forecast API: {e}")
            raise WeatherError(f"Forecast request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Forecast API returned invalid JSON: {e}")
            raise WeatherError("Forecast API returned invalid JSON") from e

        if not isinstance(data, dict):
            raise WeatherError("Unexpected forecast response format")

        return data

    async def aclose(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
