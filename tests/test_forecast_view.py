from __future__ import annotations

import requests
from django.test import Client, override_settings

from gateway.core.fallback import FAKE_FORECAST
from gateway.core.providers.openweather import ONE_CALL_URL


UPSTREAM_BODY = {
    "lat": 40.0,
    "lon": -73.0,
    "timezone": "America/New_York",
    "current": {"dt": 1690000000, "temp": 21.3, "humidity": 60},
    "daily": [{"dt": 1690000000, "temp": {"min": 18.0, "max": 25.0}}],
}

CANNED_DAILY = FAKE_FORECAST.as_dict()["daily"]


def test_forecast_passes_upstream_body_through(requests_mock) -> None:
    requests_mock.get(ONE_CALL_URL, json=UPSTREAM_BODY)

    response = Client().get("/forecast/40.0,-73.0")

    assert response.status_code == 200
    assert response.json() == UPSTREAM_BODY
    assert requests_mock.last_request.qs["lat"] == ["40.0"]
    assert requests_mock.last_request.qs["lon"] == ["-73.0"]


def test_forecast_falls_back_on_upstream_error(requests_mock) -> None:
    requests_mock.get(ONE_CALL_URL, status_code=500, text="server error")

    response = Client().get("/forecast/40.0,-73.0")

    assert response.status_code == 200
    payload = response.json()
    assert payload["latitude"] == 40.0
    assert payload["longitude"] == -73.0
    assert payload["fakeData"] is True
    assert payload["daily"] == CANNED_DAILY


def test_forecast_without_location_uses_default(requests_mock) -> None:
    requests_mock.get(ONE_CALL_URL, exc=requests.exceptions.ConnectionError("unreachable"))

    for path in ("/forecast", "/forecast/"):
        response = Client().get(path)

        assert response.status_code == 200
        payload = response.json()
        assert payload["latitude"] == 40.7720232
        assert payload["longitude"] == -73.9732319
        assert payload["fakeData"] is True


def test_forecast_with_non_numeric_location(requests_mock) -> None:
    requests_mock.get(ONE_CALL_URL, status_code=400, json={"cod": "400", "message": "wrong latitude"})

    response = Client().get("/forecast/not-a-number,also-bad")

    assert response.status_code == 200
    payload = response.json()
    assert payload["latitude"] is None
    assert payload["longitude"] is None
    assert payload["daily"] == CANNED_DAILY


def test_forecast_accepts_encoded_space(requests_mock) -> None:
    requests_mock.get(ONE_CALL_URL, status_code=503)

    response = Client().get("/forecast/11.92988,%20-85.95602")

    payload = response.json()
    assert payload["latitude"] == 11.92988
    assert payload["longitude"] == -85.95602


@override_settings(FORECAST_DEFAULT_LOCATION="1.5,2.5", FORECAST_API_KEY="abc123")
def test_forecast_uses_configured_key_and_default(requests_mock) -> None:
    requests_mock.get(ONE_CALL_URL, status_code=401)

    payload = Client().get("/forecast").json()

    assert requests_mock.last_request.qs["appid"] == ["abc123"]
    assert (payload["latitude"], payload["longitude"]) == (1.5, 2.5)


def test_forecast_rejects_other_methods(requests_mock) -> None:
    response = Client().post("/forecast/40.0,-73.0")

    assert response.status_code == 405
    assert requests_mock.call_count == 0
