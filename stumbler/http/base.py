"""
HTTP Client Interface

Abstract base shared by the real client and the in-memory test double.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import BinaryIO, Mapping, Optional, TypeVar, Union

from .response import HttpResponse
from .urls import is_http_url

PathT = TypeVar("PathT", bound=Union[str, os.PathLike])


class BaseHttpClient(ABC):
    """
    Interface for the GET/POST helpers.

    GET helpers raise ``HttpError`` on I/O failure. ``post`` never raises
    for I/O failures or error statuses; it returns None instead.
    """

    @abstractmethod
    def get_as_string(self, url: str) -> Optional[str]:
        """Return the first line of the body, or None for an empty body."""
        ...

    @abstractmethod
    def get_as_stream(self, url: str) -> BinaryIO:
        """Return the live body stream. The caller must close it."""
        ...

    @abstractmethod
    def get_as_file(self, url: str, destination: PathT) -> PathT:
        """Write the body to ``destination`` and return it."""
        ...

    @abstractmethod
    def post(
        self,
        url: str,
        data: bytes,
        headers: Optional[Mapping[str, str]] = None,
        precompressed: bool = False,
    ) -> Optional[HttpResponse]:
        """Upload ``data``; None if the request could not be completed."""
        ...

    @staticmethod
    def _check_post_args(url: str, data: object) -> None:
        """Raise ValueError for arguments that must never reach the network."""
        if not is_http_url(url):
            raise ValueError(f"Invalid URL: {url!r}")
        if data is None:
            raise ValueError("Data must be not None")
        if not isinstance(data, (bytes, bytearray)):
            raise ValueError(f"Data must be bytes, not {type(data).__name__}")
