"""API endpoints for the current weather service."""

import logging

from fastapi import APIRouter, HTTPException, Query

from weather_now import __version__
from weather_now.config import DATA_SOURCE, FORECAST_API_URL, GEOCODING_API_URL
from weather_now.weather.errors import ResolveError
from weather_now.weather.models import ErrorResponse, WeatherReport
from weather_now.weather.service import LocationWeatherResolver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/weather", tags=["weather"])


def get_resolver() -> LocationWeatherResolver:
    """Create the resolver used for one request."""
    return LocationWeatherResolver()


@router.get(
    "/",
    response_model=WeatherReport,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    }
)
async def get_current_weather(
    city: str = Query(..., description="City or place name to look up")
) -> WeatherReport:
    """Get current weather for the best match of a place name.

    Args:
        city: Free-text place name

    Returns:
        WeatherReport for the top-ranked geocoding candidate

    Raises:
        HTTPException: With the user-facing message of the failed step
    """
    try:
        resolver = get_resolver()
        async with resolver:
            report = await resolver.get_report(city)

        logger.info(f"Returning current weather for {report.location.display_name}")
        return report

    except ResolveError as e:
        logger.error(f"{type(e).__name__} for '{city}': {e.detail}")
        raise HTTPException(status_code=e.status_code, detail=e.message)

    except Exception as e:
        logger.exception(f"Unexpected error getting current weather: {e}")
        raise HTTPException(status_code=502, detail="Weather service temporarily unavailable")


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "service": "weather-now"}


@router.get("/info")
async def get_service_info() -> dict:
    """Get service information.

    Returns:
        Service name, version and the upstream APIs it reads from
    """
    return {
        "service": "Weather Now",
        "version": __version__,
        "data_source": DATA_SOURCE,
        "upstream": {
            "geocoding": GEOCODING_API_URL,
            "forecast": FORECAST_API_URL
        },
        "features": [
            "Current conditions for a city name",
            "Weather code descriptions and wind compass points"
        ]
    }
