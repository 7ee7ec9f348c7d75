"""WMO weather code table and small presentation helpers."""

import math
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional


class WeatherCondition(NamedTuple):
    description: str
    glyph: str


UNKNOWN_CONDITION: WeatherCondition = WeatherCondition("Unknown", "🌈")

# Codes reported by Open-Meteo in current_weather.weathercode
WEATHER_CODES: Mapping[int, WeatherCondition] = MappingProxyType({
    0: WeatherCondition("Clear sky", "☀️"),
    1: WeatherCondition("Mainly clear", "🌤️"),
    2: WeatherCondition("Partly cloudy", "⛅"),
    3: WeatherCondition("Overcast", "☁️"),
    45: WeatherCondition("Fog", "🌫️"),
    48: WeatherCondition("Depositing rime fog", "🌫️"),
    51: WeatherCondition("Light drizzle", "🌧️"),
    53: WeatherCondition("Moderate drizzle", "🌧️"),
    55: WeatherCondition("Dense drizzle", "🌧️"),
    56: WeatherCondition("Freezing drizzle", "🧊🌧️"),
    57: WeatherCondition("Dense freezing drizzle", "🧊🌧️"),
    61: WeatherCondition("Slight rain", "🌧️"),
    63: WeatherCondition("Moderate rain", "🌧️"),
    65: WeatherCondition("Heavy rain", "⛈️"),
    66: WeatherCondition("Freezing rain", "🧊🌧️"),
    67: WeatherCondition("Heavy freezing rain", "🧊🌧️"),
    71: WeatherCondition("Slight snow fall", "🌨️"),
    73: WeatherCondition("Moderate snow fall", "🌨️"),
    75: WeatherCondition("Heavy snow fall", "❄️"),
    77: WeatherCondition("Snow grains", "🌨️"),
    80: WeatherCondition("Slight rain showers", "🌦️"),
    81: WeatherCondition("Moderate rain showers", "🌦️"),
    82: WeatherCondition("Violent rain showers", "⛈️"),
    85: WeatherCondition("Slight snow showers", "🌨️"),
    86: WeatherCondition("Heavy snow showers", "❄️"),
    95: WeatherCondition("Thunderstorm", "⛈️"),
    96: WeatherCondition("Thunderstorm with slight hail", "⛈️"),
    99: WeatherCondition("Thunderstorm with heavy hail", "⛈️"),
})

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def lookup_condition(code: Optional[int]) -> WeatherCondition:
    """Return the table entry for a weather code, or the unknown fallback."""
    return WEATHER_CODES.get(code, UNKNOWN_CONDITION)


def code_to_description(code: Optional[int]) -> str:
    return lookup_condition(code).description


def code_to_glyph(code: Optional[int]) -> str:
    return lookup_condition(code).glyph


def degrees_to_compass_point(degrees: Optional[float]) -> str:
    """Map a bearing in degrees to one of 16 compass labels.

    Args:
        degrees: Bearing, expected in 0-360. Values outside that range are not
            clamped; they land wherever the modulo puts them.

    Returns:
        Compass label such as "NNE", or "" when degrees is None, NaN or
        infinite
    """
    if degrees is None or not math.isfinite(degrees):
        return ""
    index = math.floor(degrees / 22.5 + 0.5)
    return COMPASS_POINTS[index % len(COMPASS_POINTS)]
