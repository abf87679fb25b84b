"""Parse ``"<lat>,<lon>"`` location strings into coordinates."""
from __future__ import annotations

import math
import re
from typing import Optional

from gateway.core.abstractions import Coordinates


DEFAULT_LOCATION = "40.7720232, -73.9732319"

# Longest numeric prefix, the way browsers implement parseFloat.
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_float(value: str) -> float:
    """Parse the leading number in ``value``; ``nan`` when there is none."""
    match = _FLOAT_PREFIX.match(value.lstrip())
    if match is None:
        return math.nan
    text = match.group(0)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def parse_location(location: Optional[str], default: str = DEFAULT_LOCATION) -> Coordinates:
    """Split ``location`` on its first comma and parse both halves.

    Missing input or input without a comma falls back to ``default``.
    Non-numeric halves become ``nan``; no range checks are applied.
    """
    if not location or "," not in location:
        location = default
    latitude, _, longitude = location.partition(",")
    return Coordinates(latitude=parse_float(latitude), longitude=parse_float(longitude))


__all__ = ["DEFAULT_LOCATION", "parse_float", "parse_location"]
