"""
CLI Fetch Commands

Usage:
    stumbler get <url>
    stumbler download <url> <dest>
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from pathlib import Path

from stumbler.http import HttpError


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def get_cmd(args: Namespace) -> int:
    """Print the first line of the body at ``args.url``."""
    try:
        line = args.client.get_as_string(args.url)
    except HttpError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    print(line if line is not None else "")
    return EXIT_SUCCESS


def download_cmd(args: Namespace) -> int:
    """Save the body at ``args.url`` to ``args.dest``."""
    dest = Path(args.dest)
    if dest.exists() and not args.overwrite:
        print(f"Error: File already exists: {dest} (use --overwrite)", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        path = args.client.get_as_file(args.url, dest)
    except OSError as e:
        logger.debug(f"Download of {args.url} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    print(f"Saved {args.url} to {path} ({path.stat().st_size} bytes)")
    return EXIT_SUCCESS
