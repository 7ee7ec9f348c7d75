"""Geocoding client for the Open-Meteo search API."""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from weather_now.config import (
    GEOCODING_API_URL, GEOCODING_LANGUAGE, GEOCODING_RESULT_COUNT,
    HTTP_TIMEOUT_SECONDS, USER_AGENT
)
from weather_now.weather.errors import GeocodingError
from weather_now.weather.models import GeocodingCandidate, GeocodingResponse, Location

logger = logging.getLogger(__name__)


def compose_display_name(candidate: GeocodingCandidate) -> str:
    """Join place name, region and country, skipping the ones that are missing."""
    parts = (candidate.name, candidate.admin1, candidate.country)
    return ", ".join(part for part in parts if part)


def candidate_to_location(candidate: GeocodingCandidate) -> Location:
    return Location(
        display_name=compose_display_name(candidate),
        latitude=candidate.latitude,
        longitude=candidate.longitude,
        timezone=candidate.timezone
    )


class GeocodingClient:
    """Async client for turning place names into ranked candidate locations."""

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: str = GEOCODING_API_URL
    ):
        """Initialize the geocoding client.

        Args:
            http_client: Shared HTTP client. If None, the geocoding client
                creates and owns one.
            base_url: Search endpoint URL
        """
        self.base_url = base_url
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=HTTP_TIMEOUT_SECONDS
        )

    async def search(self, query: str) -> List[GeocodingCandidate]:
        """Look up candidate locations for a place name.

        Args:
            query: Trimmed place name

        Returns:
            Candidates in the service's own ranking, possibly empty

        Raises:
            GeocodingError: If the request fails or the response is unreadable
        """
        params = {
            "name": query,
            "count": GEOCODING_RESULT_COUNT,
            "language": GEOCODING_LANGUAGE
        }

        logger.info(f"Geocoding query: {query}")

        try:
            response = await self.client.get(self.base_url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from geocoding API: {e.response.status_code} - {e.response.text}")
            raise GeocodingError(f"Geocoding API returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Request error to geocoding API: {e}")
            raise GeocodingError(f"Geocoding request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Geocoding API returned invalid JSON: {e}")
            raise GeocodingError("Geocoding API returned invalid JSON") from e

        # The API omits "results" entirely when nothing matches
        if not isinstance(data, dict):
            raise GeocodingError("Unexpected geocoding response format")
        try:
            parsed = GeocodingResponse(results=data.get("results") or [])
        except ValidationError as e:
            logger.error(f"Invalid geocoding response format: {e}")
            raise GeocodingError("Unexpected geocoding response format") from e

        logger.info(f"Geocoding '{query}' returned {len(parsed.results)} candidates")
        return parsed.results

    async def aclose(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
