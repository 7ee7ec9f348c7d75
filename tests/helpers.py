"""Canned Open-Meteo payloads and a recording mock transport for the tests."""

from typing import Any, Callable, Dict, List, Optional

import httpx

GEOCODING_HOST = "geocoding-api.open-meteo.com"
FORECAST_HOST = "api.open-meteo.com"

SAMPLE_GEOCODING = {
    "results": [
        {
            "id": 2643743,
            "name": "London",
            "latitude": 51.50853,
            "longitude": -0.12574,
            "admin1": "England",
            "country": "United Kingdom",
            "timezone": "Europe/London",
        },
        {
            "id": 6058560,
            "name": "London",
            "latitude": 42.98339,
            "longitude": -81.23304,
            "admin1": "Ontario",
            "country": "Canada",
            "timezone": "America/Toronto",
        },
    ],
    "generationtime_ms": 0.7,
}

SAMPLE_FORECAST = {
    "latitude": 51.5,
    "longitude": -0.120000124,
    "timezone": "Europe/London",
    "current_weather": {
        "temperature": 14.3,
        "windspeed": 11.2,
        "winddirection": 247.0,
        "weathercode": 2,
        "is_day": 1,
        "time": "2024-05-01T14:00",
    },
}


class UpstreamStub:
    """Routes requests by host to canned responses and records them."""

    def __init__(
        self,
        geocoding: Any = SAMPLE_GEOCODING,
        forecast: Any = SAMPLE_FORECAST,
        geocoding_status: int = 200,
        forecast_status: int = 200,
        error: Optional[Callable[[httpx.Request], Exception]] = None,
    ):
        self.geocoding = geocoding
        self.forecast = forecast
        self.geocoding_status = geocoding_status
        self.forecast_status = forecast_status
        self.error = error
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        if request.url.host == GEOCODING_HOST:
            return self._respond(self.geocoding_status, self.geocoding)
        if request.url.host == FORECAST_HOST:
            return self._respond(self.forecast_status, self.forecast)
        return httpx.Response(404)

    @staticmethod
    def _respond(status: int, body: Any) -> httpx.Response:
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def requests_to(self, host: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def client(self) -> httpx.AsyncClient:
        """HTTP client routed to this stub; close it with async with."""
        return httpx.AsyncClient(transport=self.transport())


def forecast_without_current() -> Dict[str, Any]:
    return {k: v for k, v in SAMPLE_FORECAST.items() if k != "current_weather"}
