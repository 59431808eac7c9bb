"""
HTTP Client

Synchronous GET/POST helpers built on ``requests``. Every call opens its own
session and releases the connection before returning (except
``get_as_stream``, which hands the open stream to the caller).
"""

from __future__ import annotations

import codecs
import io
import logging
from typing import BinaryIO, Mapping, Optional

import requests
import urllib3
from requests.structures import CaseInsensitiveDict

from stumbler.compression import zip_data
from stumbler.config import get_default_config

from .base import BaseHttpClient, PathT
from .proxy import proxies_for
from .response import HttpError, HttpResponse

logger = logging.getLogger(__name__)

BUFFER_LENGTH = 8192
USER_AGENT_HEADER = "User-Agent"
JSON_CONTENT_TYPE = "application/json"


def _text_encoding(response: requests.Response) -> str:
    # requests falls back to ISO-8859-1 for text/* without a charset
    content_type = response.headers.get("content-type", "")
    if "charset=" in content_type.lower() and response.encoding:
        try:
            return codecs.lookup(response.encoding).name
        except LookupError:
            logger.debug(f"Unknown charset {response.encoding!r}, decoding as utf-8")
    return "utf-8"


def _join_lines(text: str) -> str:
    """Concatenate the lines of ``text`` without their terminators."""
    return text.replace("\r", "").replace("\n", "")


class HttpClient(BaseHttpClient):
    """
    HTTP client for fetching resources and uploading reports.

    Usage:
        client = HttpClient("MyApp/1.0")

        line = client.get_as_string("https://example.com/version.txt")
        response = client.post("https://example.com/submit", payload)
        if response is not None and response.is_success_code_2xx:
            ...
    """

    def __init__(
        self,
        user_agent: Optional[str] = None,
        *,
        proxy: Optional[str] = None,
    ) -> None:
        """
        Initialize HTTP client.

        Args:
            user_agent: User-Agent sent with POST requests (default: from config)
            proxy: Proxy URL used instead of the system proxy settings
                (default: from config)
        """
        config = get_default_config()
        self._user_agent = user_agent if user_agent is not None else config.http.user_agent
        self._proxy = proxy if proxy is not None else config.proxy

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def proxy(self) -> Optional[str]:
        return self._proxy

    @staticmethod
    def _new_session() -> requests.Session:
        # Proxies are always passed explicitly
        session = requests.Session()
        session.trust_env = False
        return session

    def _open(self, url: str, proxies: dict[str, str]) -> requests.Response:
        """Send a streaming GET and return the response with its body unread."""
        route = ", ".join(proxies.values()) or "direct"
        logger.debug(f"GET {url} via {route}")

        with self._new_session() as session:
            try:
                response = session.get(url, proxies=proxies, stream=True)
                response.raise_for_status()
            except requests.HTTPError as e:
                status_code = None
                if e.response is not None:
                    status_code = e.response.status_code
                    e.response.close()
                raise HttpError(str(e), status_code=status_code, url=url) from e
            except requests.RequestException as e:
                raise HttpError(str(e), url=url) from e

        return response

    def get_as_string(self, url: str) -> Optional[str]:
        """
        Fetch ``url`` through the system proxy and return the first body line.

        Returns:
            The first line without its terminator, or None for an empty body

        Raises:
            HttpError: If the connection fails or the body cannot be read
        """
        response = self._open(url, proxies_for(url, self._proxy))
        with response:
            response.raw.decode_content = True
            # Lines end at CR, LF or CRLF only
            reader = io.TextIOWrapper(
                io.BufferedReader(response.raw, BUFFER_LENGTH),
                encoding=_text_encoding(response),
                errors="replace",
                newline=None,
            )
            try:
                line = reader.readline()
            except (urllib3.exceptions.HTTPError, OSError) as e:
                raise HttpError(str(e), url=url) from e
        if not line:
            return None
        return line.rstrip("\n")

    def get_as_stream(self, url: str) -> BinaryIO:
        """
        Fetch ``url`` over a direct connection and return the body stream.

        The stream is file-like and must be closed by the caller.
        """
        response = self._open(url, {})
        response.raw.decode_content = True
        return response.raw

    def get_as_file(self, url: str, destination: PathT) -> PathT:
        """
        Download ``url`` through the system proxy into ``destination``.

        A partially written file is left in place if the transfer fails.

        Raises:
            HttpError: If the connection fails or the body cannot be read
            OSError: If the destination cannot be written
        """
        response = self._open(url, proxies_for(url, self._proxy))
        with response, open(destination, "wb") as out:
            try:
                for chunk in response.iter_content(chunk_size=BUFFER_LENGTH):
                    out.write(chunk)
            except requests.RequestException as e:
                raise HttpError(str(e), url=url) from e
        return destination

    def post(
        self,
        url: str,
        data: bytes,
        headers: Optional[Mapping[str, str]] = None,
        precompressed: bool = False,
    ) -> Optional[HttpResponse]:
        """
        POST ``data`` as JSON over a direct connection.

        Args:
            url: Request URL
            data: Request body
            headers: Extra headers, applied after User-Agent and Content-Type
            precompressed: ``data`` is already gzip-encoded

        Returns:
            HttpResponse with status, body and bytes sent, or None if the
            request failed or the server replied with an error status

        Raises:
            ValueError: If ``url`` is malformed or ``data`` is not bytes
        """
        self._check_post_args(url, data)

        request_headers: CaseInsensitiveDict = CaseInsensitiveDict()
        request_headers[USER_AGENT_HEADER] = self._user_agent
        request_headers["Content-Type"] = JSON_CONTENT_TYPE
        request_headers.update(headers or {})

        wire_data = data
        if not precompressed:
            compressed = zip_data(data)
            if compressed is not None:
                wire_data = compressed
                request_headers["Content-Encoding"] = "gzip"
            else:
                logger.warning("Couldn't compress data, falling back to raw data.")
        else:
            request_headers["Content-Encoding"] = "gzip"

        request_headers["Content-Length"] = str(len(wire_data))

        try:
            with self._new_session() as session:
                with session.post(url, data=wire_data, headers=request_headers, proxies={}) as response:
                    if response.status_code >= 400:
                        logger.info(f"post error: HTTP {response.status_code} from {url} Data: {len(data)} bytes")
                        return None
                    body = _join_lines(response.content.decode(_text_encoding(response), errors="replace"))
                    logger.debug(f"POST {url} -> {response.status_code} ({len(wire_data)} bytes sent)")
                    return HttpResponse(
                        status_code=response.status_code,
                        body=body,
                        bytes_sent=len(wire_data),
                    )
        except requests.RequestException as e:
            logger.info(f"post error: {e} Data: {len(data)} bytes")
            return None
