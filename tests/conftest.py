"""
Pytest configuration and shared fixtures for Stumbler HTTP tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Isolates tests from the host's proxy and STUMBLER_* settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_http_server = importlib.import_module("fixtures.http_server")

LocalHTTPServer = _http_server.LocalHTTPServer
unused_port = _http_server.unused_port

_PROXY_ENV_VARS = (
    "HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "NO_PROXY",
    "http_proxy", "https_proxy", "all_proxy", "no_proxy",
    "REQUEST_METHOD",
)

_STUMBLER_ENV_VARS = (
    "STUMBLER_USER_AGENT",
    "STUMBLER_HTTP_PROXY",
    "STUMBLER_LOG_LEVEL",
    "STUMBLER_DEBUG",
)


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test without system proxies or STUMBLER_* overrides."""
    from stumbler.config import set_default_config

    for name in _PROXY_ENV_VARS + _STUMBLER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def http_server():
    """Provide a running local HTTP server."""
    server = LocalHTTPServer().start()
    yield server
    server.stop()


@pytest.fixture
def proxy_server():
    """Provide a second local server to act as a forward proxy."""
    server = LocalHTTPServer().start()
    yield server
    server.stop()


@pytest.fixture
def closed_port():
    """Provide a local port that refuses connections."""
    return unused_port()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
