"""Core abstractions for the forecast domain."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Protocol, Tuple, Union


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Latitude/longitude pair parsed from a request."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class CurrentConditions:
    time: int
    summary: str
    icon: str
    temperature: float
    humidity: float
    wind_speed: float
    wind_bearing: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "time": self.time,
            "summary": self.summary,
            "icon": self.icon,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "windBearing": self.wind_bearing,
        }


@dataclass(frozen=True, slots=True)
class DailyForecast:
    time: int
    icon: str
    sunrise_time: int
    sunset_time: int
    temperature_high: float
    temperature_low: float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "time": self.time,
            "icon": self.icon,
            "sunriseTime": self.sunrise_time,
            "sunsetTime": self.sunset_time,
            "temperatureHigh": self.temperature_high,
            "temperatureLow": self.temperature_low,
        }


@dataclass(frozen=True, slots=True)
class Forecast:
    """Forecast record in the wire shape served to clients.

    ``fake_data`` marks synthesized records and is only emitted when set, so a
    record built from upstream data has exactly the upstream keys.
    """

    latitude: float
    longitude: float
    timezone: str
    currently: CurrentConditions
    daily: Tuple[DailyForecast, ...] = field(default_factory=tuple)
    fake_data: bool = False

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.fake_data:
            payload["fakeData"] = True
        payload.update(
            {
                "latitude": self.latitude,
                "longitude": self.longitude,
                "timezone": self.timezone,
                "currently": self.currently.as_dict(),
                "daily": {"data": [entry.as_dict() for entry in self.daily]},
            }
        )
        return payload


class FailureKind(str, enum.Enum):
    TRANSPORT = "transport"
    STATUS = "status"
    PAYLOAD = "payload"


@dataclass(frozen=True, slots=True)
class UpstreamSuccess:
    payload: Dict[str, Any]


@dataclass(frozen=True, slots=True)
class UpstreamFailure:
    kind: FailureKind
    reason: str


UpstreamResult = Union[UpstreamSuccess, UpstreamFailure]


@dataclass(frozen=True, slots=True)
class ResolvedForecast:
    """Payload handed back to the API layer and whether it was synthesized."""

    payload: Dict[str, Any]
    synthesized: bool


class ForecastProvider(Protocol):
    """A data source capable of returning a raw forecast document."""

    name: str

    def fetch(self, coordinates: Coordinates) -> UpstreamResult:
        """Fetch the forecast for the coordinates, reporting failures as values."""
        ...


__all__ = [
    "Coordinates",
    "CurrentConditions",
    "DailyForecast",
    "FailureKind",
    "Forecast",
    "ForecastProvider",
    "ResolvedForecast",
    "UpstreamFailure",
    "UpstreamResult",
    "UpstreamSuccess",
]
