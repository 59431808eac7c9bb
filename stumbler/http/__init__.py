"""
HTTP Client Module

Proxy-aware GET helpers and gzip-compressing POST uploads.
"""

from .base import BaseHttpClient
from .client import HttpClient
from .mock import MockHttpClient
from .proxy import proxies_for, select_proxy
from .response import HttpError, HttpResponse

__all__ = [
    "BaseHttpClient",
    "HttpClient",
    "HttpError",
    "HttpResponse",
    "MockHttpClient",
    "proxies_for",
    "select_proxy",
]
