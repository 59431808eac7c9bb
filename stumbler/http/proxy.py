"""
Proxy Selection

Resolves the forward proxy for a URL from the system proxy settings
(``HTTP_PROXY``, ``HTTPS_PROXY``, ``ALL_PROXY``, ``NO_PROXY``). Nothing is
cached; the environment is consulted on every call.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlparse

from requests.utils import get_environ_proxies
from requests.utils import select_proxy as select_from_mapping

from .response import HttpError
from .urls import is_http_url

logger = logging.getLogger(__name__)


def select_proxy(url: str, override: Optional[str] = None) -> Optional[str]:
    """
    Pick the proxy to use for ``url``.

    Args:
        url: Target URL
        override: Proxy URL that wins over the system settings

    Returns:
        The proxy URL, or None for a direct connection

    Raises:
        HttpError: If ``url`` is not an http(s) URL
    """
    if not is_http_url(url):
        raise HttpError(f"Invalid URL: {url!r}", url=url)

    if override:
        return override

    return select_from_mapping(url, get_environ_proxies(url))


def proxies_for(url: str, override: Optional[str] = None) -> dict[str, str]:
    """Build the ``requests`` proxies mapping for ``url``; empty means direct."""
    proxy = select_proxy(url, override)
    if proxy is None:
        return {}

    logger.debug(f"Using proxy {proxy} for {url}")
    return {urlparse(url).scheme: proxy}
