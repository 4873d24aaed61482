"""Conversion of backend records into padmatch types.

The directory backend stores one column per platform and protocol
(``android_hid``, ``ios_gtouch``, ...). These helpers fold those columns into
the tagged profile used by the engine.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from padmatch.core.exceptions import InvalidRecordError
from padmatch.types.common import (
    Connectivity,
    Controller,
    ControllerCapability,
    Game,
    GameProtocolProfile,
    Platform,
    PlatformProtocols,
    Protocol,
)

logger = logging.getLogger(__name__)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp as returned by the backend."""
    if isinstance(value, datetime):
        return value
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Ignoring unparseable timestamp: %r", value)
        return None


def parse_igdb_id(value: Any) -> int | None:
    """Parse an IGDB id, which the backend may hand back as a string."""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring malformed IGDB id: %r", value)
        return None


def parse_protocols(values: Iterable[Any] | None) -> frozenset[Protocol]:
    """Parse a list of protocol labels, dropping unrecognized ones."""
    protocols: set[Protocol] = set()
    for value in values or ():
        protocol = Protocol.parse(value)
        if protocol is None:
            logger.debug("Dropping unknown protocol: %r", value)
            continue
        protocols.add(protocol)
    return frozenset(protocols)


def parse_platform(record: Mapping[str, Any], platform: Platform) -> PlatformProtocols:
    """Read the ``<platform>_tested`` flag and protocol columns of a record."""
    tested = bool(record.get(f"{platform.value}_tested"))
    protocols: dict[Protocol, Connectivity] = {}

    for protocol in Protocol:
        raw = record.get(f"{platform.value}_{protocol.column}")
        connectivity = Connectivity.parse(raw)
        if connectivity is None:
            if raw and raw != "Not Supported":
                logger.debug(
                    "Dropping unknown connectivity %r for %s %s",
                    raw,
                    platform.label,
                    protocol.value,
                )
            continue
        protocols[protocol] = connectivity

    return PlatformProtocols(tested=tested, protocols=protocols)


def parse_profile(record: Mapping[str, Any]) -> GameProtocolProfile:
    """Build a GameProtocolProfile from a flat game record."""
    return GameProtocolProfile(
        android=parse_platform(record, Platform.ANDROID),
        ios=parse_platform(record, Platform.IOS),
    )


def _controller_name(value: Any) -> str | None:
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, Mapping):
        if "controllers" in value:
            return _controller_name(value["controllers"])
        return value.get("name") or None
    if isinstance(value, str):
        return value or None
    return None


def parse_testing_controllers(record: Mapping[str, Any]) -> tuple[str, ...]:
    """Collect testing controller names from a game record.

    Accepts the joined shape returned by the backend
    (``[{"controllers": {"name": ...}}]``), plain dictionaries and plain
    names. The primary testing controller, if joined, comes first.
    """
    names: list[str] = []

    primary = _controller_name(record.get("controllers"))
    if primary:
        names.append(primary)

    for item in record.get("testing_controllers") or ():
        name = _controller_name(item)
        if name and name not in names:
            names.append(name)

    return tuple(names)


def parse_game_record(record: Mapping[str, Any]) -> Game:
    """Create a Game from a backend record.

    Args:
        record: A row of the games table, optionally with joined controllers

    Returns:
        The parsed Game

    Raises:
        InvalidRecordError: If the record has no name
    """
    name = record.get("name")
    if not name or not isinstance(name, str):
        raise InvalidRecordError("game", f"missing name (id={record.get('id')!r})")

    return Game(
        id=str(record.get("id") or ""),
        name=name,
        profile=parse_profile(record),
        is_approved=bool(record.get("is_approved")),
        rejected_reason=record.get("rejected_reason") or "",
        description=record.get("description") or "",
        igdb_id=parse_igdb_id(record.get("igdb_id")),
        image_url=record.get("image_url") or "",
        testing_notes=record.get("testing_notes") or "",
        discord_username=record.get("discord_username") or "",
        approved_by=record.get("approved_by") or "",
        approved_at=parse_timestamp(record.get("approved_at")),
        created_at=parse_timestamp(record.get("created_at")),
        testing_controllers=parse_testing_controllers(record),
    )


def parse_controller_record(record: Mapping[str, Any]) -> Controller:
    """Create a Controller from a backend record.

    Raises:
        InvalidRecordError: If the record has no name
    """
    name = record.get("name")
    if not name or not isinstance(name, str):
        raise InvalidRecordError("controller", f"missing name (id={record.get('id')!r})")

    return Controller(
        id=str(record.get("id") or ""),
        name=name,
        manufacturer=record.get("manufacturer") or "",
        capability=ControllerCapability(
            wired_protocols=parse_protocols(record.get("wired_protocols")),
            bluetooth_protocols=parse_protocols(record.get("bluetooth_protocols")),
        ),
        created_at=parse_timestamp(record.get("created_at")),
    )
