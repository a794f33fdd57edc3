"""
Command line interface for downloading PANGAEA datasets and managing the cache.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import requests
from PIL import UnidentifiedImageError

from .client import PangaeaClient
from .errors import PangaeaError
from .settings import load_settings

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_client(args: argparse.Namespace) -> PangaeaClient:
    settings = load_settings(Path(args.config) if args.config else None)
    if args.cache_dir:
        settings = settings.with_cache_dir(args.cache_dir)
    return PangaeaClient(settings=settings)


def handle_get(args: argparse.Namespace) -> None:
    client = build_client(args)
    records = client.get_data(args.doi, verbose=not args.quiet)
    for record in records:
        print(record)
        print()


def handle_cache_list(args: argparse.Namespace) -> None:
    client = build_client(args)
    for entry in client.cache_list():
        print(f"{entry.path}\t{entry.size}\t{entry.modified.isoformat(timespec='seconds')}")


def handle_cache_clear(args: argparse.Namespace) -> None:
    client = build_client(args)
    removed = client.cache_clear(dois=args.doi or None, prompt=not args.yes)
    print(f"Removed {len(removed)} files")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Download PANGAEA datasets by DOI")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("--cache-dir", help="Override cache directory")
    subparsers = parser.add_subparsers(dest="command", required=True)

    get = subparsers.add_parser("get", help="Download and parse the datasets behind a DOI")
    get.add_argument("doi", help="DOI (10.1594/PANGAEA.<id>) or doi.pangaea.de URL")
    get.add_argument("--quiet", action="store_true", help="Hide progress messages")
    get.set_defaults(handler=handle_get)

    cache = subparsers.add_parser("cache", help="Inspect or clear the local cache")
    cache_sub = cache.add_subparsers(dest="cache_command", required=True)

    cache_list = cache_sub.add_parser("list", help="List cached files")
    cache_list.set_defaults(handler=handle_cache_list)

    cache_clear = cache_sub.add_parser("clear", help="Remove cached files")
    cache_clear.add_argument("--doi", action="append", help="Only remove this DOI (repeatable)")
    cache_clear.add_argument("--yes", action="store_true", help="Do not ask before clearing everything")
    cache_clear.set_defaults(handler=handle_cache_clear)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        args.handler(args)
    except (PangaeaError, requests.RequestException, UnidentifiedImageError) as exc:
        logger.error("Command failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
