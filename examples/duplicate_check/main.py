#!/usr/bin/env python3
"""Example: Duplicate Check

This example checks new submission names against the approved games of a
directory hosted on Supabase.

To run:
    export SUPABASE_URL="https://xyz.supabase.co"
    export SUPABASE_ANON_KEY="your_anon_key"
    python main.py "Genshin Impakt"
"""

from __future__ import annotations

import asyncio
import os
import sys

from padmatch import DirectoryClient, SourceConfig, SupabaseSource


async def main() -> None:
    url = os.getenv("SUPABASE_URL", "")
    api_key = os.getenv("SUPABASE_ANON_KEY", "")

    if not url or not api_key:
        print("Please set SUPABASE_URL and SUPABASE_ANON_KEY environment variables")
        sys.exit(1)

    names = sys.argv[1:] or ["Genshin Impakt"]

    async with DirectoryClient(SupabaseSource(SourceConfig(url=url, api_key=api_key))) as client:
        print(f"Checking against {len(client.games)} approved games\n")
        for name in names:
            entry, score = client.score_similar(name)
            if entry is None:
                print(f"{name}: no similar game")
            else:
                print(f"{name}: similar to '{entry.name}' ({score:.0%})")


if __name__ == "__main__":
    asyncio.run(main())
