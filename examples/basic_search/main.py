#!/usr/bin/env python3
"""Example: Basic Search

This example searches an in-memory directory, first browsing declared
protocols, then resolving against a selected controller.

To run:
    python main.py [query]
"""

from __future__ import annotations

import asyncio
import sys

from padmatch import DirectoryClient, MemorySource

GAMES = [
    {
        "id": "g1",
        "name": "Call of Duty: Mobile",
        "is_approved": True,
        "android_tested": True,
        "ios_tested": True,
        "android_xinput": "Wired/2.4GHz",
        "ios_xinput": "Wired/2.4GHz/Bluetooth",
    },
    {
        "id": "g2",
        "name": "Genshin Impact",
        "is_approved": True,
        "android_tested": True,
        "ios_tested": True,
        "android_hid": "Wired/2.4GHz",
        "ios_hid": "Bluetooth",
        "ios_gtouch": "Bluetooth",
    },
    {
        "id": "g3",
        "name": "Mario Kart Tour",
        "is_approved": True,
        "android_tested": True,
        "android_ns": "Wired/2.4GHz/Bluetooth",
    },
]

CONTROLLERS = [
    {
        "id": "kishi",
        "name": "Kishi",
        "manufacturer": "Razer",
        "wired_protocols": ["XINPUT", "HID"],
        "bluetooth_protocols": ["HID"],
    },
]


async def main() -> None:
    query = sys.argv[1] if len(sys.argv) > 1 else ""

    async with DirectoryClient(MemorySource(GAMES, CONTROLLERS)) as client:
        print(f"Browsing '{query}' without a controller:\n")
        for result in client.search(query):
            protocols = ", ".join(str(p) for p in result.protocols) or "none"
            print(f"  {result.game.name}: {protocols}")

        for controller in client.controllers:
            print(f"\nWith {controller.name}:\n")
            for result in client.search(query, controller=controller.id):
                status = "playable" if result.is_supported else "not playable"
                protocols = ", ".join(str(p) for p in result.protocols)
                print(f"  {result.game.name}: {status} {protocols}")


if __name__ == "__main__":
    asyncio.run(main())
