"""Root URL configuration: forecast API first, then static files."""
from __future__ import annotations

from django.urls import include, path, re_path

from gateway.public import public_file

urlpatterns = [
    path("", include("gateway.api.urls")),
    re_path(r"^(?P<path>.*)$", public_file, name="public"),
]
