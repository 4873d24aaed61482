#!/usr/bin/env python3
"""
Export the directory's games, controllers and contributor credits.

Reads either a JSON dump of the backend tables or the live backend, and writes
one sheet per table as JSON or YAML.

Usage:
    python scripts/export_directory.py --dump directory.json --output-dir export/
    python scripts/export_directory.py --url https://xyz.supabase.co --api-key KEY --format yaml
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from padmatch import MemorySource, SourceConfig, SupabaseSource
from padmatch.core.exceptions import PadmatchError
from padmatch.core.export import controller_rows, credit_rows, dump_rows, game_rows
from padmatch.sources.base import DataSource


def build_source(args: argparse.Namespace) -> DataSource:
    """Create the data source selected on the command line."""
    if args.dump:
        with open(args.dump, encoding="utf-8") as f:
            data = json.load(f)
        return MemorySource(games=data.get("games", []), controllers=data.get("controllers", []))

    return SupabaseSource(SourceConfig(url=args.url, api_key=args.api_key))


async def export(args: argparse.Namespace) -> list[Path]:
    """Fetch the pool and write the three sheets."""
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    async with build_source(args) as source:
        games, controllers = await asyncio.gather(
            source.fetch_games(),
            source.fetch_controllers(),
        )

    sheets = {
        "games": game_rows(games),
        "controllers": controller_rows(controllers),
        "credits": credit_rows(games),
    }
    return [
        dump_rows(rows, output_dir / f"{name}.{args.format}")
        for name, rows in sheets.items()
    ]


def main() -> int:
    parser = argparse.ArgumentParser(description="Export the game/controller directory")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--dump", help="JSON file with 'games' and 'controllers' records")
    group.add_argument("--url", help="Backend base URL")
    parser.add_argument("--api-key", default="", help="Backend API key (with --url)")
    parser.add_argument("--output-dir", default="export", help="Directory to write sheets to")
    parser.add_argument("--format", choices=["json", "yaml"], default="json")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        paths = asyncio.run(export(args))
    except PadmatchError as e:
        print(f"Export failed: {e}", file=sys.stderr)
        return 1

    for path in paths:
        print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
