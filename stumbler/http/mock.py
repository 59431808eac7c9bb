"""
Mock HTTP Client

In-memory stand-in for HttpClient, for code that takes a BaseHttpClient.
"""

from __future__ import annotations

import io
from typing import Any, BinaryIO, Mapping, Optional, Union

from .base import BaseHttpClient, PathT
from .response import HttpError, HttpResponse


class MockHttpClient(BaseHttpClient):
    """
    Mock client for testing.

    GET bodies are configured per URL; unknown URLs raise HttpError with a
    404 status. POSTs return the preset response (None for an error status), or 200
    with an empty body.
    """

    def __init__(
        self,
        *,
        bodies: Optional[dict[str, Union[bytes, str]]] = None,
        post_response: Optional[HttpResponse] = None,
        user_agent: str = "mock",
    ) -> None:
        self._bodies: dict[str, bytes] = {}
        for url, body in (bodies or {}).items():
            self.set_body(url, body)
        self._post_response = post_response
        self._post_fails = False
        self.user_agent = user_agent
        self._calls: list[dict[str, Any]] = []

    @property
    def calls(self) -> list[dict[str, Any]]:
        """Get all recorded calls."""
        return self._calls

    def set_body(self, url: str, body: Union[bytes, str]) -> None:
        """Set the body served for GETs of ``url``."""
        self._bodies[url] = body.encode("utf-8") if isinstance(body, str) else body

    def set_post_response(self, response: Optional[HttpResponse], *, fail: bool = False) -> None:
        """Set the POST result; ``fail=True`` makes ``post`` return None."""
        self._post_response = response
        self._post_fails = fail

    def _body(self, url: str) -> bytes:
        if url not in self._bodies:
            raise HttpError(f"404 Client Error: Not Found for url: {url}", status_code=404, url=url)
        return self._bodies[url]

    def get_as_string(self, url: str) -> Optional[str]:
        self._calls.append({"method": "get_as_string", "url": url})
        line = io.StringIO(self._body(url).decode("utf-8"), newline=None).readline()
        return line.rstrip("\n") if line else None

    def get_as_stream(self, url: str) -> BinaryIO:
        self._calls.append({"method": "get_as_stream", "url": url})
        return io.BytesIO(self._body(url))

    def get_as_file(self, url: str, destination: PathT) -> PathT:
        self._calls.append({"method": "get_as_file", "url": url, "destination": destination})
        body = self._body(url)
        with open(destination, "wb") as out:
            out.write(body)
        return destination

    def post(
        self,
        url: str,
        data: bytes,
        headers: Optional[Mapping[str, str]] = None,
        precompressed: bool = False,
    ) -> Optional[HttpResponse]:
        self._check_post_args(url, data)
        self._calls.append({
            "method": "post",
            "url": url,
            "data": data,
            "headers": dict(headers or {}),
            "precompressed": precompressed,
        })

        if self._post_fails:
            return None
        if self._post_response is not None:
            if self._post_response.status_code >= 400:
                return None
            return self._post_response
        return HttpResponse(status_code=200, body="", bytes_sent=len(data))
