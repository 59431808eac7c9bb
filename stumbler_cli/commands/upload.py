"""
CLI Post Command

Upload a JSON payload, gzip-compressed unless it already is.

Usage:
    stumbler post <url> --file report.json [--header "Name: value"] [--json]
    stumbler post <url> --data '{"items": []}' --precompressed
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_POST_FAILED = 2


def parse_headers(values: list[str] | None) -> dict[str, str]:
    """Parse ``Name: value`` strings into a header mapping."""
    headers: dict[str, str] = {}
    for value in values or []:
        name, sep, content = value.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Invalid header (expected 'Name: value'): {value!r}")
        headers[name.strip()] = content.strip()
    return headers


def _read_payload(args: Namespace) -> bytes:
    if args.file:
        return Path(args.file).read_bytes()
    return args.data.encode("utf-8")


def post_cmd(args: Namespace) -> int:
    """Handle post command."""
    try:
        headers = parse_headers(args.header)
        payload = _read_payload(args)
        response = args.client.post(
            args.url,
            payload,
            headers=headers,
            precompressed=args.precompressed,
        )
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if response is None:
        print(f"Error: POST to {args.url} failed", file=sys.stderr)
        return EXIT_POST_FAILED

    if args.json:
        print(json.dumps({
            "status_code": response.status_code,
            "body": response.body,
            "bytes_sent": response.bytes_sent,
        }, indent=2))
    else:
        print(f"HTTP {response.status_code} ({response.bytes_sent} bytes sent)")
        if response.body:
            print(response.body)

    return EXIT_SUCCESS if response.is_success_code_2xx else EXIT_POST_FAILED
