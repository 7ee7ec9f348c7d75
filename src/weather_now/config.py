"""Configuration settings for the current weather service."""

import os
from typing import Final
from dotenv import load_dotenv

load_dotenv()

# Open-Meteo API configuration
GEOCODING_API_URL: Final[str] = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_API_URL: Final[str] = "https://api.open-meteo.com/v1/forecast"
USER_AGENT: Final[str] = "WeatherNow/0.1"
DATA_SOURCE: Final[str] = "Open-Meteo"

# Geocoding request settings
GEOCODING_RESULT_COUNT: Final[int] = 5
GEOCODING_LANGUAGE: Final[str] = "en"

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO")

# Outbound HTTP
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
