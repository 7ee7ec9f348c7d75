"""Errors raised while resolving a query to current weather."""


class ResolveError(Exception):
    """Base class for failures of a single search.

    Every subclass carries the message shown to the user and the HTTP status
    the API answers with. None of them are retried.
    """

    message: str = "Network or API error. Please try again."
    status_code: int = 502

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class ValidationError(ResolveError, ValueError):
    """Raised when the query is empty or whitespace only."""

    message = "Please enter a city name."
    status_code = 400


class GeocodingError(ResolveError):
    """Raised when the geocoding request fails."""


class NotFoundError(ResolveError):
    """Raised when geocoding returns no candidates."""

    message = "No matching location found. Try a different city name."
    status_code = 404


class WeatherError(ResolveError):
    """Raised when the forecast request fails."""


class DataUnavailableError(ResolveError):
    """Raised when the forecast response has no current conditions."""

    message = "Weather data unavailable for this location."
