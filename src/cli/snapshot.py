"""CLI for fetching the artist directory snapshot outside the web server.

Usage::

    # Print per-collection record counts
    python -m src.cli.snapshot summary

    # Write the full snapshot as JSON
    python -m src.cli.snapshot dump --output snapshot.json

    # Point at a mirror instead of the public API
    python -m src.cli.snapshot --base-url http://localhost:9000/api summary

Exits with status 1 when any of the four upstream fetches fails.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

import httpx

from src.config.settings import Settings
from src.models.snapshot import Snapshot
from src.providers.directory.groupie_api_provider import GroupieAPIProvider
from src.services.artist_store import ArtistStore
from src.utils.errors import GroupieTrackerError


async def _load_snapshot(base_url: str, timeout: float | None) -> Snapshot:
    async with httpx.AsyncClient(timeout=timeout) as client:
        store = ArtistStore(GroupieAPIProvider(client, base_url=base_url))
        return await store.load()


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


async def _handle_summary(args: argparse.Namespace) -> int:
    """Fetch the snapshot and print record counts."""
    try:
        snapshot = await _load_snapshot(args.base_url, args.timeout)
    except GroupieTrackerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for resource, count in snapshot.counts().items():
        print(f"{resource:<10} {count}")
    return 0


async def _handle_dump(args: argparse.Namespace) -> int:
    """Fetch the snapshot and write it as JSON to a file or stdout."""
    try:
        snapshot = await _load_snapshot(args.base_url, args.timeout)
    except GroupieTrackerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    payload = snapshot.model_dump_json(by_alias=True, indent=2)
    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"Wrote snapshot to {args.output}")
    else:
        print(payload)
    return 0


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the argparse parser for the snapshot CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m src.cli.snapshot",
        description="Fetch the Groupie Trackers directory snapshot.",
    )
    parser.add_argument(
        "--base-url",
        default=settings.upstream_base_url,
        help="Upstream API base URL (default: %(default)s)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.upstream_timeout,
        help="Per-request timeout in seconds (default: none)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("summary", help="Print record counts per collection")
    dump_parser = subparsers.add_parser("dump", help="Write the snapshot as JSON")
    dump_parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and dispatch to the subcommand handler."""
    parser = _build_parser(Settings())
    args = parser.parse_args(argv)

    if args.command == "summary":
        return asyncio.run(_handle_summary(args))
    return asyncio.run(_handle_dump(args))


if __name__ == "__main__":
    sys.exit(main())
