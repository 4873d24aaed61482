"""Protocol compatibility resolution between games and controllers.

A game declares, per tested platform, which protocols it responds to and over
which connection. A controller declares which protocols it emits wired and
over bluetooth. Resolving the two gives the protocols a player can actually
use, with at most one entry per protocol even when Android and iOS both
declare it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from padmatch.types.common import (
    CompatibilityResult,
    CompatibleProtocol,
    Connectivity,
    ControllerCapability,
    GameProtocolProfile,
    Platform,
    Protocol,
)

logger = logging.getLogger(__name__)


def merge_connectivity(existing: Connectivity, new: Connectivity) -> Connectivity:
    """Merge a new observation for a protocol into the one already recorded.

    Anything merged with BOTH gives BOTH, and WIRED merged with BLUETOOTH
    gives BOTH as well. Repeating the same value keeps it.

    Examples:
        >>> merge_connectivity(Connectivity.WIRED, Connectivity.BOTH)
        <Connectivity.BOTH: 'Wired/2.4GHz/Bluetooth'>
        >>> merge_connectivity(Connectivity.WIRED, Connectivity.BLUETOOTH)
        <Connectivity.BOTH: 'Wired/2.4GHz/Bluetooth'>
        >>> merge_connectivity(Connectivity.WIRED, Connectivity.WIRED)
        <Connectivity.WIRED: 'Wired/2.4GHz'>
    """
    if existing is new:
        return existing
    return Connectivity.BOTH


def achievable_connectivity(
    entry: CompatibleProtocol,
    capability: ControllerCapability,
) -> Connectivity | None:
    """Work out the connectivity a controller can reach for a declared pair.

    A game that requires BOTH gets nothing unless the controller supports the
    protocol wired and over bluetooth.

    Args:
        entry: Declared protocol and connectivity
        capability: Controller support

    Returns:
        The achievable connectivity, or None if the pair is unusable
    """
    wired = capability.supports_wired(entry.protocol)
    bluetooth = capability.supports_bluetooth(entry.protocol)

    if entry.connectivity is Connectivity.BOTH:
        return Connectivity.BOTH if wired and bluetooth else None
    if entry.connectivity is Connectivity.WIRED:
        return Connectivity.WIRED if wired else None
    if entry.connectivity is Connectivity.BLUETOOTH:
        return Connectivity.BLUETOOTH if bluetooth else None
    return None


def merge_protocols(entries: Iterable[CompatibleProtocol]) -> CompatibilityResult:
    """Deduplicate pairs by protocol using the merge rule.

    Protocols keep the position they were first seen at.
    """
    merged: dict[Protocol, Connectivity] = {}
    for entry in entries:
        existing = merged.get(entry.protocol)
        if existing is None:
            merged[entry.protocol] = entry.connectivity
        else:
            merged[entry.protocol] = merge_connectivity(existing, entry.connectivity)

    return CompatibilityResult(
        tuple(CompatibleProtocol(protocol, connectivity) for protocol, connectivity in merged.items())
    )


def _declared(profile: GameProtocolProfile) -> Iterable[CompatibleProtocol]:
    for platform in Platform:
        yield from profile.declared(platform)


def resolve(
    profile: GameProtocolProfile,
    capability: ControllerCapability,
) -> CompatibilityResult:
    """Resolve which protocols a game and a controller can use together.

    Args:
        profile: The game's per-platform protocol requirements
        capability: The controller's protocol support

    Returns:
        The deduplicated set of usable protocol/connectivity pairs

    Examples:
        >>> profile = GameProtocolProfile.build(
        ...     android={Protocol.HID: Connectivity.WIRED},
        ...     ios={Protocol.HID: Connectivity.BLUETOOTH},
        ... )
        >>> capability = ControllerCapability.build([Protocol.HID], [Protocol.HID])
        >>> resolve(profile, capability).get(Protocol.HID)
        <Connectivity.BOTH: 'Wired/2.4GHz/Bluetooth'>
    """
    achievable: list[CompatibleProtocol] = []

    for entry in _declared(profile):
        connectivity = achievable_connectivity(entry, capability)
        if connectivity is None:
            continue
        achievable.append(CompatibleProtocol(entry.protocol, connectivity))

    result = merge_protocols(achievable)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Resolved %d compatible protocol(s): %s",
            len(result),
            ", ".join(str(p) for p in result) or "none",
        )

    return result


def declared_protocols(profile: GameProtocolProfile) -> CompatibilityResult:
    """Merge the raw declared pairs of every tested platform.

    Same merge rule as resolve, with no controller gating. Used when browsing
    without a controller selected.
    """
    return merge_protocols(_declared(profile))


def platform_protocols(
    profile: GameProtocolProfile,
) -> dict[Platform, tuple[CompatibleProtocol, ...]]:
    """Get the declared pairs per tested platform, in declaration order.

    Untested platforms are left out.
    """
    return {platform: tuple(profile.declared(platform)) for platform in profile.tested_platforms}
