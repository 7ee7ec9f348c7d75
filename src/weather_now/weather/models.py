"""Data models for the current weather service."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Location(BaseModel):
    """Resolved location for a search."""
    display_name: str = Field(..., description="Place name, region and country joined by commas")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")
    timezone: str = Field(..., description="Timezone identifier reported by geocoding")


class WeatherObservation(BaseModel):
    """Current conditions at a location."""
    temperature_celsius: float = Field(..., description="Air temperature in Celsius")
    wind_speed_kmh: float = Field(..., description="Wind speed in km/h")
    wind_direction_degrees: float = Field(..., description="Wind direction in degrees (0-360)")
    weather_code: int = Field(..., description="WMO weather code")
    observation_time: str = Field(..., description="Observation timestamp in the location's timezone")
    raw: Dict[str, Any] = Field(default_factory=dict, description="Upstream current_weather payload")


class WeatherReport(BaseModel):
    """API response combining location, observation and display fields."""
    location: Location = Field(..., description="Resolved location")
    weather: WeatherObservation = Field(..., description="Current conditions")
    description: str = Field(..., description="Text for the weather code")
    glyph: str = Field(..., description="Emoji for the weather code")
    compass_point: str = Field(..., description="16-point compass label for the wind direction")
    source: str = Field(..., description="Data provider")


class GeocodingCandidate(BaseModel):
    """Single result from the Open-Meteo geocoding API."""
    name: str = Field(..., description="Place name")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")
    admin1: Optional[str] = Field(None, description="First-level administrative region")
    country: Optional[str] = Field(None, description="Country name")
    timezone: str = Field(..., description="Timezone identifier")


class GeocodingResponse(BaseModel):
    """Raw response from the Open-Meteo geocoding API."""
    results: List[GeocodingCandidate] = Field(default_factory=list, description="Ranked candidates")


class CurrentWeather(BaseModel):
    """Raw current_weather object from the Open-Meteo forecast API."""
    temperature: float
    windspeed: float
    winddirection: float
    weathercode: int
    time: str


class ErrorResponse(BaseModel):
    """Error response model."""
    detail: str = Field(..., description="Message shown to the user")
