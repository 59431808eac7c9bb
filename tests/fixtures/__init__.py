"""
Test fixtures package for Stumbler HTTP tests.

- http_server.py: local threaded HTTP server that records requests

Usage:
    from fixtures import LocalHTTPServer

    def test_something():
        server = LocalHTTPServer().start()
        server.set_route("/file", b"payload")
"""

from .http_server import (
    LocalHTTPServer,
    RecordedRequest,
    unused_port,
)

__all__ = [
    "LocalHTTPServer",
    "RecordedRequest",
    "unused_port",
]
