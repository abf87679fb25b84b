"""Forecast resolver: upstream passthrough with a synthesized fallback."""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from gateway.core.abstractions import (
    Coordinates,
    ForecastProvider,
    ResolvedForecast,
    UpstreamFailure,
    UpstreamSuccess,
)
from gateway.core.fallback import synthesize_forecast
from gateway.core.location import DEFAULT_LOCATION, parse_location


logger = logging.getLogger(__name__)


class ForecastResolver:
    """Resolve forecasts from a single provider, never failing outward.

    Upstream data is returned verbatim after ``delay_ms`` milliseconds. Any
    upstream failure is logged and answered immediately with the canned
    forecast placed at the requested coordinates.
    """

    def __init__(
        self,
        provider: ForecastProvider,
        *,
        delay_ms: int = 0,
        default_location: str = DEFAULT_LOCATION,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._provider = provider
        self._delay_ms = delay_ms
        self._default_location = default_location
        self._sleep = sleep

    @property
    def provider(self) -> ForecastProvider:
        return self._provider

    def resolve_location(self, location: Optional[str]) -> ResolvedForecast:
        coordinates = parse_location(location, default=self._default_location)
        return self.resolve(coordinates)

    def resolve(self, coordinates: Coordinates) -> ResolvedForecast:
        result = self._provider.fetch(coordinates)

        if isinstance(result, UpstreamSuccess):
            if self._delay_ms > 0:
                self._sleep(self._delay_ms / 1000)
            return ResolvedForecast(payload=result.payload, synthesized=False)

        if isinstance(result, UpstreamFailure):
            logger.warning("Forecast provider %s error: %s", self._provider.name, result.reason)
        else:  # pragma: no cover - providers only return the two result types
            logger.error("Forecast provider %s returned %r", self._provider.name, result)
        forecast = synthesize_forecast(coordinates)
        return ResolvedForecast(payload=forecast.as_dict(), synthesized=True)


__all__ = ["ForecastResolver"]
