"""Serve the static front-end from ``PUBLIC_DIR`` at the site root."""
from __future__ import annotations

from django.conf import settings
from django.http import HttpRequest, HttpResponse
from django.views.static import serve


def public_file(request: HttpRequest, path: str = "") -> HttpResponse:
    """Serve ``path`` from the public directory, ``index.html`` for directories."""
    if not path or path.endswith("/") or (settings.PUBLIC_DIR / path).is_dir():
        path = f"{path.rstrip('/')}/index.html".lstrip("/")
    return serve(request, path, document_root=settings.PUBLIC_DIR)
