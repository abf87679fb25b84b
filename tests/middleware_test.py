from __future__ import annotations

import logging

from django.http import HttpResponse
from django.test import RequestFactory, override_settings

from gateway.middleware import AccessLogMiddleware, HttpsRedirectMiddleware


def _ok(request):
    return HttpResponse("ok")


@override_settings(HTTPS_REDIRECT=True, HTTPS_REDIRECT_IGNORE_HOSTS=[r"localhost:\d{4}"])
def test_http_requests_are_redirected() -> None:
    request = RequestFactory().get("/forecast/1,2?x=1", HTTP_HOST="weather.example.com")

    response = HttpsRedirectMiddleware(_ok)(request)

    assert response.status_code == 301
    assert response["Location"] == "https://weather.example.com/forecast/1,2?x=1"


@override_settings(HTTPS_REDIRECT=True, HTTPS_REDIRECT_IGNORE_HOSTS=[r"localhost:\d{4}"])
def test_local_dev_host_is_not_redirected() -> None:
    request = RequestFactory().get("/", HTTP_HOST="localhost:8000")

    response = HttpsRedirectMiddleware(_ok)(request)

    assert response.status_code == 200


@override_settings(HTTPS_REDIRECT=True, HTTPS_REDIRECT_IGNORE_HOSTS=[])
def test_forwarded_https_is_not_redirected() -> None:
    request = RequestFactory().get("/", HTTP_HOST="weather.example.com", HTTP_X_FORWARDED_PROTO="https")

    response = HttpsRedirectMiddleware(_ok)(request)

    assert response.status_code == 200


@override_settings(HTTPS_REDIRECT=False)
def test_redirect_can_be_disabled() -> None:
    request = RequestFactory().get("/", HTTP_HOST="weather.example.com")

    response = HttpsRedirectMiddleware(_ok)(request)

    assert response.status_code == 200


def test_access_log_line(caplog) -> None:
    request = RequestFactory().get("/forecast/40.0,-73.0", REMOTE_ADDR="10.0.0.7")

    with caplog.at_level(logging.INFO, logger="gateway.access"):
        response = AccessLogMiddleware(_ok)(request)

    assert response.status_code == 200
    [record] = [r for r in caplog.records if r.name == "gateway.access"]
    message = record.getMessage()
    assert message.startswith("10.0.0.7 - ")
    assert message.endswith(' - "GET /forecast/40.0,-73.0"')
