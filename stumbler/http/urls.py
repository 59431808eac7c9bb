"""URL checks shared by the HTTP clients."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlparse

SUPPORTED_SCHEMES = ("http", "https")


def is_http_url(url: Any) -> bool:
    """True if ``url`` is an absolute http or https URL with a host."""
    if not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in SUPPORTED_SCHEMES and bool(parsed.hostname)
