"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from gateway.api.views import ForecastView

urlpatterns = [
    path("forecast/<str:location>", ForecastView.as_view(), name="forecast-location"),
    path("forecast/", ForecastView.as_view(), name="forecast-default"),
    path("forecast", ForecastView.as_view(), name="forecast"),
]
