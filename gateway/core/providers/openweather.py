"""OpenWeather One Call forecast provider."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from gateway.core.abstractions import (
    Coordinates,
    FailureKind,
    ForecastProvider,
    UpstreamFailure,
    UpstreamResult,
    UpstreamSuccess,
)


logger = logging.getLogger(__name__)

ONE_CALL_URL = "https://api.openweathermap.org/data/2.5/onecall"


class OpenWeatherProvider(ForecastProvider):
    """Integration with the OpenWeather One Call endpoint (metric units)."""

    name = "openweather"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = ONE_CALL_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, coordinates: Coordinates) -> UpstreamResult:  # noqa: D401
        """Return the raw One Call document, or the reason it is unusable."""
        params = {
            "units": "metric",
            "lat": coordinates.latitude,
            "lon": coordinates.longitude,
            "appid": self.api_key,
        }
        logger.debug("Requesting %s lat=%s lon=%s", self.base_url, coordinates.latitude, coordinates.longitude)
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            return UpstreamFailure(FailureKind.TRANSPORT, str(exc) or exc.__class__.__name__)

        if response.status_code != 200:
            return UpstreamFailure(FailureKind.STATUS, f"HTTP {response.status_code} {response.reason or ''}".strip())

        try:
            data = response.json()
        except ValueError as exc:
            return UpstreamFailure(FailureKind.PAYLOAD, f"invalid json: {exc}")
        if not isinstance(data, dict):
            return UpstreamFailure(FailureKind.PAYLOAD, f"expected an object, got {type(data).__name__}")
        return UpstreamSuccess(data)


__all__ = ["ONE_CALL_URL", "OpenWeatherProvider"]
