"""Request middleware: access logging and HTTP to HTTPS redirects."""
from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Callable, List, Optional

from django.conf import settings
from django.http import HttpRequest, HttpResponse, HttpResponsePermanentRedirect


access_logger = logging.getLogger("gateway.access")


class AccessLogMiddleware:
    """Log ``<ip> - <date> - <time> - "<METHOD> <path>"`` for each request."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        now = datetime.now()
        access_logger.info(
            '%s - %s - %s - "%s %s"',
            request.META.get("REMOTE_ADDR", "-"),
            now.strftime("%Y-%m-%d"),
            now.strftime("%H:%M:%S"),
            request.method,
            request.path,
        )
        return self.get_response(request)


class HttpsRedirectMiddleware:
    """Permanently redirect plain HTTP requests to HTTPS.

    Hosts matching ``HTTPS_REDIRECT_IGNORE_HOSTS`` (local development servers
    by default) are served over HTTP as-is.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self._redirect(request)
        if response is not None:
            return response
        return self.get_response(request)

    def _redirect(self, request: HttpRequest) -> Optional[HttpResponse]:
        if not settings.HTTPS_REDIRECT or request.is_secure():
            return None
        host = request.get_host()
        if any(pattern.search(host) for pattern in self._ignored_hosts()):
            return None
        return HttpResponsePermanentRedirect(f"https://{host}{request.get_full_path()}")

    def _ignored_hosts(self) -> List[re.Pattern[str]]:
        return [re.compile(pattern) for pattern in settings.HTTPS_REDIRECT_IGNORE_HOSTS]
