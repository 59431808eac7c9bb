"""
Stumbler CLI

Command-line interface for the HTTP helpers.

Usage:
    python -m stumbler_cli get <url>
    python -m stumbler_cli download <url> <dest>
    python -m stumbler_cli post <url> --file report.json
    python -m stumbler_cli config --show
"""

from stumbler import __version__

__all__ = ["__version__"]
