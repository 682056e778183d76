#!/usr/bin/env python3
"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from pvfs_bridge.config import logging_config
from pvfs_bridge.configuration import Configuration
from pvfs_bridge.connections.loader import load_connections
from pvfs_bridge.constants import ACCESS_KEY, SECRET_KEY, SESSION_TOKEN
from pvfs_bridge.exceptions import PvfsError
from pvfs_bridge.resolver import resolve_uri_and_conf
from pvfs_bridge.utils import mask_secret

SECRET_KEYS = {ACCESS_KEY, SECRET_KEY, SESSION_TOKEN}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pvfs-bridge",
        description="Resolve pvfs://<connection>/<path> URIs into backend URIs",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Print the backend URI for a pvfs URI")
    resolve.add_argument("uri", help="URI to resolve, e.g. pvfs://prod/bucket/key")
    resolve.add_argument(
        "--connections",
        required=True,
        help="JSON file with a top-level 'connections' list",
    )
    resolve.add_argument(
        "--show-config",
        action="store_true",
        help="Also print the backend configuration (secrets masked)",
    )
    return parser


def _resolve(args: argparse.Namespace) -> int:
    registry = load_connections(args.connections)
    pair = resolve_uri_and_conf(args.uri, Configuration(), registry)
    print(pair.uri)
    if args.show_config:
        for key in sorted(pair.conf):
            value = pair.conf[key]
            print(f"{key}={mask_secret(value) if key in SECRET_KEYS else value}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the pvfs-bridge command."""
    # Loads .env from the current working directory
    load_dotenv()
    logging.basicConfig(level=logging_config.level, format="%(levelname)s %(name)s: %(message)s")

    args = build_parser().parse_args(argv)
    try:
        return _resolve(args)
    except (PvfsError, ValidationError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
