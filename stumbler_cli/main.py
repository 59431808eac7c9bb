"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m stumbler_cli get <url>
    python -m stumbler_cli download <url> <dest> [--overwrite]
    python -m stumbler_cli post <url> (--data TEXT | --file PATH) [--header "Name: value"]... [--precompressed] [--json]
    python -m stumbler_cli config --init | --show

Environment Variables:
    STUMBLER_USER_AGENT         User-Agent sent with POST requests
    STUMBLER_HTTP_PROXY         Proxy URL used instead of the system proxy
    STUMBLER_LOG_LEVEL          Log level (default: INFO)
    STUMBLER_DEBUG              Enable debug logging (true/false)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml

from stumbler import __version__
from stumbler.config import RuntimeConfig
from stumbler.http import BaseHttpClient, HttpClient
from stumbler_cli.commands import fetch, upload


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_POST_FAILED = 2

DEFAULT_CONFIG_PATH = "stumbler.yaml"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def load_config(path: Optional[Path] = None) -> RuntimeConfig:
    """Load the YAML config at ``path`` (if any), then overlay env vars."""
    if path is None:
        return RuntimeConfig.from_env()
    return RuntimeConfig.from_yaml(path).with_env_overrides()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="stumbler",
        description="Stumbler HTTP CLI - Fetch resources and upload compressed reports.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write log records to this file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- get command ---
    get_parser = subparsers.add_parser(
        "get",
        help="Print the first line of a URL's body",
    )
    get_parser.add_argument("url", type=str, help="URL to fetch")
    get_parser.set_defaults(func=fetch.get_cmd)

    # --- download command ---
    download_parser = subparsers.add_parser(
        "download",
        help="Save a URL's body to a file",
    )
    download_parser.add_argument("url", type=str, help="URL to fetch")
    download_parser.add_argument("dest", type=str, help="Destination file")
    download_parser.add_argument(
        "--overwrite",
        action="store_true",
        default=False,
        help="Replace the destination if it exists",
    )
    download_parser.set_defaults(func=fetch.download_cmd)

    # --- post command ---
    post_parser = subparsers.add_parser(
        "post",
        help="POST a JSON payload",
        description="Upload a payload as application/json, gzip-compressed unless --precompressed.",
    )
    post_parser.add_argument("url", type=str, help="Request URL")
    payload_group = post_parser.add_mutually_exclusive_group(required=True)
    payload_group.add_argument("--data", "-d", type=str, help="Payload text")
    payload_group.add_argument("--file", "-f", type=str, help="Read the payload from a file")
    post_parser.add_argument(
        "--header", "-H",
        action="append",
        default=None,
        help="Extra header as 'Name: value' (repeatable)",
    )
    post_parser.add_argument(
        "--precompressed",
        action="store_true",
        default=False,
        help="Payload is already gzip-encoded",
    )
    post_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    post_parser.set_defaults(func=upload.post_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path for config file (default: {DEFAULT_CONFIG_PATH})",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(yaml.safe_dump(RuntimeConfig().to_dict(), sort_keys=False))
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (STUMBLER_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: stumbler config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(
    argv: Sequence[str] | None = None,
    *,
    client: Optional[BaseHttpClient] = None,
) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        client: HTTP client to use instead of one built from the config

    Returns:
        Exit code (0=success, 1=error, 2=POST failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or ("DEBUG" if config.logging.debug else config.logging.level)
    setup_logging(level=log_level, log_file=args.log_file)

    args.runtime_config = config
    args.client = client or HttpClient(config.http.user_agent, proxy=config.proxy)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
