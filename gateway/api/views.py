"""REST API views for forecast information."""
from __future__ import annotations

import math
from functools import lru_cache
from typing import Any

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from gateway.core.providers.openweather import OpenWeatherProvider
from gateway.core.services.forecast_service import ForecastResolver


@lru_cache(maxsize=1)
def get_forecast_resolver() -> ForecastResolver:
    provider = OpenWeatherProvider(
        api_key=settings.FORECAST_API_KEY,
        base_url=settings.FORECAST_BASE_URL,
        timeout=settings.FORECAST_UPSTREAM_TIMEOUT,
    )
    return ForecastResolver(
        provider,
        delay_ms=settings.FORECAST_DELAY_MS,
        default_location=settings.FORECAST_DEFAULT_LOCATION,
    )


def json_safe(value: Any) -> Any:
    """Replace non-finite floats with ``None`` so the body stays valid JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [json_safe(item) for item in value]
    return value


class ForecastView(APIView):
    """Serve the forecast for ``location``, falling back to canned data."""

    permission_classes = [AllowAny]

    def get(self, request, location: str | None = None, *args, **kwargs):  # noqa: D401
        """Return the forecast for the requested (or default) location."""
        resolved = get_forecast_resolver().resolve_location(location)
        return Response(json_safe(resolved.payload), status=status.HTTP_200_OK)
