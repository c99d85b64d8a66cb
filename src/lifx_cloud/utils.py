"""Asynchronous Python client for the LIFX cloud API."""

from __future__ import annotations

import math
from datetime import UTC, datetime
from functools import lru_cache
from urllib.parse import quote

from .exceptions import LIFXInvalidParameterError


@lru_cache
def format_number(value: float) -> str:
    """Return a compact string for a number as used in color strings."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0")


def quote_segment(value: object) -> str:
    """Return the value percent-encoded for use as a single URL path segment."""
    return quote(str(value), safe=":,")


def parse_rate_limit_reset(value: str | None) -> datetime | None:
    """Return the moment the rate limit resets, from the response header."""
    if not value:
        return None
    try:
        return datetime.fromtimestamp(int(value), tz=UTC)
    except (OverflowError, ValueError):
        return None


def check_range(label: str, value: float, minimum: float, maximum: float) -> None:
    """Raise if a value falls outside of the inclusive range given."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"{label} must be a number, got {value!r}"
        raise LIFXInvalidParameterError(msg)
    if math.isnan(value):
        msg = f"{label} can not be NaN"
        raise LIFXInvalidParameterError(msg)
    if value > maximum:
        msg = f"{label} {value} is too large (max: {maximum})"
        raise LIFXInvalidParameterError(msg)
    if value < minimum:
        msg = f"{label} {value} is too small (min: {minimum})"
        raise LIFXInvalidParameterError(msg)
