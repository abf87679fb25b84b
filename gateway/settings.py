"""Django settings for the forecast gateway."""
from __future__ import annotations

from pathlib import Path
import os

from django.core.exceptions import ImproperlyConfigured
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


SECRET_KEY = env("DJANGO_SECRET_KEY")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "rest_framework",
    "gateway.api",
]

MIDDLEWARE = [
    "gateway.middleware.AccessLogMiddleware",
    "gateway.middleware.HttpsRedirectMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "gateway.urls"

WSGI_APPLICATION = "gateway.wsgi.application"

DATABASES: dict = {}

# /forecast and /forecast/ are both routed explicitly.
APPEND_SLASH = False

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
HTTPS_REDIRECT = env("HTTPS_REDIRECT", "1") == "1"
HTTPS_REDIRECT_IGNORE_HOSTS = [
    pattern for pattern in env("HTTPS_REDIRECT_IGNORE_HOSTS", r"localhost:\d{4}").split(",") if pattern
]

FORECAST_API_KEY = env("OPEN_WEATHER_MAP_API_KEY", "")
FORECAST_BASE_URL = env("FORECAST_BASE_URL", "https://api.openweathermap.org/data/2.5/onecall")
FORECAST_DELAY_MS = int(env("FORECAST_DELAY_MS", "0"))
FORECAST_UPSTREAM_TIMEOUT = float(env("FORECAST_UPSTREAM_TIMEOUT", "10"))
FORECAST_DEFAULT_LOCATION = env("FORECAST_DEFAULT_LOCATION", "40.7720232, -73.9732319")

PUBLIC_DIR = Path(env("PUBLIC_DIR", str(BASE_DIR / "public")))

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
}

LOG_LEVEL = env("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "gateway.access": {"level": "INFO"},
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True
