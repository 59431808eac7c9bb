"""
HTTP Response

Value returned by POST uploads, plus the I/O error raised by GET helpers.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class HttpResponse:
    """
    Response from a POST request.

    ``bytes_sent`` is the length of the body that went on the wire, i.e.
    the compressed size when the payload was gzipped.
    """
    status_code: int
    body: str
    bytes_sent: int = 0

    @property
    def is_success_code_2xx(self) -> bool:
        """Check if request was successful (2xx status)."""
        return 200 <= self.status_code < 300

    @property
    def is_error_code_4xx(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_error_code_400_bad_request(self) -> bool:
        return self.status_code == 400

    @property
    def is_error_code_5xx(self) -> bool:
        return 500 <= self.status_code < 600

    def json(self) -> Any:
        """Parse the body as JSON."""
        return json.loads(self.body)


class HttpError(OSError):
    """HTTP request error."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url
