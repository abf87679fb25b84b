from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "gateway.settings")
os.environ.setdefault("HTTPS_REDIRECT", "0")
os.environ.setdefault("OPEN_WEATHER_MAP_API_KEY", "test-key")
os.environ.setdefault("FORECAST_DELAY_MS", "0")

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker


@pytest.fixture(autouse=True)
def fresh_resolver():
    from gateway.api.views import get_forecast_resolver

    get_forecast_resolver.cache_clear()
    yield
    get_forecast_resolver.cache_clear()
