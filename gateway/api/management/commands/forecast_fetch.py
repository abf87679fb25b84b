"""Management command to resolve a forecast using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand

from gateway.api.views import get_forecast_resolver, json_safe


class Command(BaseCommand):
    help = "Resolve the forecast for a location, falling back to canned data"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--location", type=str, help='Location as "<lat>,<lon>"; defaults to the configured one')
        parser.add_argument(
            "--show-source",
            action="store_true",
            help="Report on stderr whether the forecast is upstream or synthesized",
        )

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        resolved = get_forecast_resolver().resolve_location(options.get("location"))
        if options.get("show_source"):
            self.stderr.write("source: synthesized" if resolved.synthesized else "source: upstream")
        self.stdout.write(json.dumps(json_safe(resolved.payload)))
