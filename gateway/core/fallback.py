"""Canned forecast served when the upstream API cannot be used.

The template is a frozen module constant. ``synthesize_forecast`` derives a
new record from it for every request, replacing only the coordinates.
"""
from __future__ import annotations

from dataclasses import replace

from gateway.core.abstractions import Coordinates, CurrentConditions, DailyForecast, Forecast


FAKE_FORECAST = Forecast(
    fake_data=True,
    latitude=0.0,
    longitude=0.0,
    timezone="America/New_York",
    currently=CurrentConditions(
        time=0,
        summary="Clear",
        icon="clear-day",
        temperature=43.4,
        humidity=0.62,
        wind_speed=3.74,
        wind_bearing=208,
    ),
    daily=(
        DailyForecast(0, "partly-cloudy-night", 1553079633, 1553123320, 52.91, 41.35),
        DailyForecast(86400, "rain", 1553165933, 1553209784, 48.01, 44.17),
        DailyForecast(172800, "rain", 1553252232, 1553296247, 50.31, 33.61),
        DailyForecast(259200, "partly-cloudy-night", 1553338532, 1553382710, 46.44, 33.82),
        DailyForecast(345600, "partly-cloudy-night", 1553424831, 1553469172, 60.5, 43.82),
        DailyForecast(432000, "rain", 1553511130, 1553555635, 61.79, 32.8),
        DailyForecast(518400, "rain", 1553597430, 1553642098, 48.28, 33.49),
        DailyForecast(604800, "snow", 1553683730, 1553728560, 43.58, 33.68),
    ),
)


def synthesize_forecast(coordinates: Coordinates) -> Forecast:
    """Return a copy of the canned forecast placed at ``coordinates``."""
    return replace(FAKE_FORECAST, latitude=coordinates.latitude, longitude=coordinates.longitude)


__all__ = ["FAKE_FORECAST", "synthesize_forecast"]
