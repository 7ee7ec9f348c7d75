"""Geocoding, forecast and weather-code helpers."""
