"""Tabular export of the directory.

Builds the rows of the games, controllers and credits sheets, and writes
them as JSON or YAML.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from padmatch.core.compatibility import platform_protocols
from padmatch.core.exceptions import InvalidConfigurationError
from padmatch.types.common import Controller, Game, Platform, Protocol

NONE_LABEL = "None"


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def _date(value: datetime | None) -> str:
    return value.date().isoformat() if value else ""


def _join(values: Iterable[str]) -> str:
    return ", ".join(values) or NONE_LABEL


def _protocol_labels(protocols: Iterable[Protocol]) -> list[str]:
    # Keep the vocabulary order rather than set order
    wanted = set(protocols)
    return [p.value for p in Protocol if p in wanted]


def game_rows(games: Iterable[Game]) -> list[dict[str, Any]]:
    """Build one row per game, with protocols rendered per platform."""
    rows = []
    for game in games:
        per_platform = platform_protocols(game.profile)
        rows.append(
            {
                "Game Name": game.name,
                "Description": game.description,
                "IGDB ID": game.igdb_id or "",
                "Android Tested": _yes_no(game.profile.is_tested(Platform.ANDROID)),
                "Android Protocols": _join(str(p) for p in per_platform.get(Platform.ANDROID, ())),
                "iOS Tested": _yes_no(game.profile.is_tested(Platform.IOS)),
                "iOS Protocols": _join(str(p) for p in per_platform.get(Platform.IOS, ())),
                "Testing Controllers": _join(game.testing_controllers),
                "Testing Notes": game.testing_notes,
                "Discord Username": game.discord_username,
                "Approved By": game.approved_by,
                "Approved At": _date(game.approved_at),
                "Created At": _date(game.created_at),
            }
        )
    return rows


def controller_rows(controllers: Iterable[Controller]) -> list[dict[str, Any]]:
    """Build one row per controller."""
    return [
        {
            "Controller Name": controller.name,
            "Manufacturer": controller.manufacturer,
            "Wired/2.4GHz Protocols": _join(_protocol_labels(controller.capability.wired_protocols)),
            "Bluetooth Protocols": _join(_protocol_labels(controller.capability.bluetooth_protocols)),
            "All Supported Protocols": _join(
                _protocol_labels(controller.capability.supported_protocols)
            ),
            "Created At": _date(controller.created_at),
        }
        for controller in controllers
    ]


def credit_rows(games: Iterable[Game]) -> list[dict[str, Any]]:
    """Build one row per contributor, listing their approved games.

    Games without a Discord username are not credited.
    """
    credits: dict[str, list[str]] = {}
    for game in games:
        if not game.is_approved or not game.discord_username:
            continue
        credits.setdefault(game.discord_username, []).append(game.name)

    return [
        {
            "Discord Username": username,
            "Games Contributed": len(names),
            "Game Names": ", ".join(sorted(names)),
        }
        for username, names in sorted(credits.items())
    ]


def dump_rows(rows: list[dict[str, Any]], path: str | Path) -> Path:
    """Write rows to a JSON or YAML file, chosen by the file suffix.

    Args:
        rows: Rows to write
        path: Destination (.json, .yaml or .yml)

    Returns:
        The path written to

    Raises:
        InvalidConfigurationError: If the suffix is not supported
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        content = json.dumps(rows, indent=2, ensure_ascii=False)
    elif suffix in (".yaml", ".yml"):
        content = yaml.safe_dump(rows, allow_unicode=True, sort_keys=False)
    else:
        raise InvalidConfigurationError(f"unsupported export format '{path.suffix}'")

    path.write_text(content, encoding="utf-8")
    return path
