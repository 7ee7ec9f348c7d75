"""Resolve a free-text place name to its current weather."""

import logging
from typing import Any, Dict, Optional, Tuple

import httpx
from pydantic import ValidationError as PydanticValidationError

from weather_now.config import DATA_SOURCE, HTTP_TIMEOUT_SECONDS, USER_AGENT
from weather_now.weather.client import OpenMeteoWeatherClient
from weather_now.weather.codes import (
    code_to_description, code_to_glyph, degrees_to_compass_point
)
from weather_now.weather.errors import (
    DataUnavailableError, NotFoundError, ValidationError
)
from weather_now.weather.geocoding import GeocodingClient, candidate_to_location
from weather_now.weather.models import (
    CurrentWeather, Location, WeatherObservation, WeatherReport
)

logger = logging.getLogger(__name__)


def normalize_current_weather(data: Dict[str, Any]) -> WeatherObservation:
    """Convert a forecast response into a WeatherObservation.

    Args:
        data: Raw forecast JSON

    Returns:
        Observation with the upstream values passed through

    Raises:
        DataUnavailableError: If current conditions are missing or unreadable
    """
    payload = data.get("current_weather")
    if not isinstance(payload, dict):
        raise DataUnavailableError("Forecast response has no current_weather")

    try:
        current = CurrentWeather(**payload)
    except PydanticValidationError as e:
        logger.error(f"Invalid current_weather payload: {e}")
        raise DataUnavailableError("Forecast response has incomplete current_weather") from e

    return WeatherObservation(
        temperature_celsius=current.temperature,
        wind_speed_kmh=current.windspeed,
        wind_direction_degrees=current.winddirection,
        weather_code=current.weathercode,
        observation_time=current.time,
        raw=dict(payload)
    )


def build_report(location: Location, weather: WeatherObservation) -> WeatherReport:
    """Attach display fields derived from the weather code and wind direction."""
    return WeatherReport(
        location=location,
        weather=weather,
        description=code_to_description(weather.weather_code),
        glyph=code_to_glyph(weather.weather_code),
        compass_point=degrees_to_compass_point(weather.wind_direction_degrees),
        source=DATA_SOURCE
    )


class LocationWeatherResolver:
    """Geocode a query, then fetch current weather for the top candidate.

    Each call to resolve makes two outbound requests. Nothing is cached
    between calls and nothing is retried.
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        geocoding_client: Optional[GeocodingClient] = None,
        weather_client: Optional[OpenMeteoWeatherClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize the resolver.

        Args:
            http_client: HTTP client shared by the default service clients
                (creates one if None)
            geocoding_client: Geocoding client (default uses http_client)
            weather_client: Forecast client (default uses http_client)
            transport: Transport for the HTTP client the resolver creates
                when http_client is None
        """
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=HTTP_TIMEOUT_SECONDS,
            transport=transport
        )
        self.geocoding_client = geocoding_client or GeocodingClient(self.http_client)
        self.weather_client = weather_client or OpenMeteoWeatherClient(self.http_client)

    async def resolve(self, query: str) -> Tuple[Location, WeatherObservation]:
        """Resolve a place name to a location and its current weather.

        Args:
            query: Free-text place name as typed by the user

        Returns:
            Tuple of (location, weather observation)

        Raises:
            ValidationError: If the query is empty or whitespace only
            GeocodingError: If the geocoding request fails
            NotFoundError: If no location matches the query
            WeatherError: If the forecast request fails
            DataUnavailableError: If the forecast has no current conditions
        """
        trimmed = (query or "").strip()
        if not trimmed:
            raise ValidationError("Query is empty")

        candidates = await self.geocoding_client.search(trimmed)
        if not candidates:
            logger.warning(f"No location found for '{trimmed}'")
            raise NotFoundError(f"No location matches '{trimmed}'")

        # Trust the service's ranking
        location = candidate_to_location(candidates[0])
        logger.info(
            f"Resolved '{trimmed}' to {location.display_name} "
            f"({location.latitude}, {location.longitude})"
        )

        data = await self.weather_client.get_current_weather(location.latitude, location.longitude)
        weather = normalize_current_weather(data)

        logger.info(
            f"Current weather for {location.display_name}: {weather.temperature_celsius}°C, "
            f"code {weather.weather_code} at {weather.observation_time}"
        )
        return location, weather

    async def get_report(self, query: str) -> WeatherReport:
        """Resolve a query and build the API response for it."""
        location, weather = await self.resolve(query)
        return build_report(location, weather)

    async def aclose(self):
        """Close the shared HTTP client if the resolver created it."""
        if self._owns_client:
            try:
                await self.http_client.aclose()
            except Exception as e:
                logger.error(f"Error closing HTTP client: {e}")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
