"""Weather Now: current weather for a city name, backed by Open-Meteo."""

__version__ = "0.1.0"
