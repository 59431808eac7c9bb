"""
CLI command modules.
"""

from stumbler_cli.commands import fetch, upload

__all__ = ["fetch", "upload"]
