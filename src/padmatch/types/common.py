"""Common type definitions used across the padmatch library.

These types describe games, controllers and the protocol/connectivity pairs
under which a controller can drive a game. They are plain read-only values;
nothing in the engine mutates them once built.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class Protocol(str, Enum):
    """Input-emulation standards a controller emits and a game understands."""

    HID = "HID"
    XINPUT = "XINPUT"
    DS4 = "DS4"
    NS = "NS"
    GIP = "GIP"
    G_TOUCH = "G-TOUCH"

    @property
    def column(self) -> str:
        """Suffix used by the backend columns (e.g. ``android_gtouch``)."""
        return self.value.lower().replace("-", "")

    @classmethod
    def parse(cls, value: Any) -> Protocol | None:
        """Parse a protocol label, returning None for anything unrecognized.

        Accepts the canonical label case-insensitively as well as the column
        suffix form ("gtouch").

        Examples:
            >>> Protocol.parse("ds4")
            <Protocol.DS4: 'DS4'>
            >>> Protocol.parse("gtouch")
            <Protocol.G_TOUCH: 'G-TOUCH'>
            >>> Protocol.parse("PS5") is None
            True
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().upper().replace("-", "").replace("_", "")
        return _PROTOCOL_KEYS.get(key)


_PROTOCOL_KEYS: dict[str, Protocol] = {
    p.value.replace("-", ""): p for p in Protocol
}


class Connectivity(str, Enum):
    """How a protocol is reached: wired (or 2.4GHz dongle), bluetooth or both."""

    WIRED = "Wired/2.4GHz"
    BLUETOOTH = "Bluetooth"
    BOTH = "Wired/2.4GHz/Bluetooth"

    @classmethod
    def parse(cls, value: Any) -> Connectivity | None:
        """Parse a stored connectivity value.

        Empty values, "Not Supported" and unknown labels all mean the
        protocol is not used, so they parse to None.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        value = value.strip()
        for member in cls:
            if value == member.value or value.upper() == member.name:
                return member
        return None


class Platform(str, Enum):
    """Mobile platforms a game can be tested on."""

    ANDROID = "android"
    IOS = "ios"

    @property
    def label(self) -> str:
        return "Android" if self is Platform.ANDROID else "iOS"


@dataclass(frozen=True)
class CompatibleProtocol:
    """A protocol together with the connectivity it is usable over."""

    protocol: Protocol
    connectivity: Connectivity

    def __str__(self) -> str:
        return f"{self.protocol.value} ({self.connectivity.value})"


@dataclass(frozen=True)
class PlatformProtocols:
    """Declared protocol requirements of a game on one platform.

    Attributes:
        tested: Whether the platform was tested at all
        protocols: Protocol -> connectivity, in declaration order
    """

    tested: bool = False
    protocols: Mapping[Protocol, Connectivity] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class GameProtocolProfile:
    """Per-platform protocol requirements for a game.

    Attributes:
        android: Android requirements
        ios: iOS requirements
    """

    android: PlatformProtocols = field(default_factory=PlatformProtocols)
    ios: PlatformProtocols = field(default_factory=PlatformProtocols)

    @classmethod
    def build(
        cls,
        android: Mapping[Protocol, Connectivity] | None = None,
        ios: Mapping[Protocol, Connectivity] | None = None,
        android_tested: bool | None = None,
        ios_tested: bool | None = None,
    ) -> GameProtocolProfile:
        """Build a profile from plain mappings.

        A platform counts as tested when a mapping is given for it, unless the
        tested flag says otherwise.
        """
        if android_tested is None:
            android_tested = android is not None
        if ios_tested is None:
            ios_tested = ios is not None
        return cls(
            android=PlatformProtocols(android_tested, dict(android or {})),
            ios=PlatformProtocols(ios_tested, dict(ios or {})),
        )

    def platform(self, platform: Platform) -> PlatformProtocols:
        return self.android if platform is Platform.ANDROID else self.ios

    def is_tested(self, platform: Platform) -> bool:
        return self.platform(platform).tested

    @property
    def tested_platforms(self) -> list[Platform]:
        return [p for p in Platform if self.is_tested(p)]

    def declared(self, platform: Platform) -> Iterator[CompatibleProtocol]:
        """Yield the effective declared pairs of a platform.

        Untested platforms yield nothing, whatever values are stored for them.
        """
        entry = self.platform(platform)
        if not entry.tested:
            return
        for protocol, connectivity in entry.protocols.items():
            if isinstance(protocol, Protocol) and isinstance(connectivity, Connectivity):
                yield CompatibleProtocol(protocol, connectivity)


@dataclass(frozen=True)
class ControllerCapability:
    """Protocols a controller can emit, split by connection type.

    Attributes:
        wired_protocols: Protocols available wired or over a 2.4GHz dongle
        bluetooth_protocols: Protocols available over bluetooth
    """

    wired_protocols: frozenset[Protocol] = frozenset()
    bluetooth_protocols: frozenset[Protocol] = frozenset()

    @classmethod
    def build(
        cls,
        wired: Iterable[Protocol] = (),
        bluetooth: Iterable[Protocol] = (),
    ) -> ControllerCapability:
        return cls(frozenset(wired), frozenset(bluetooth))

    @property
    def supported_protocols(self) -> frozenset[Protocol]:
        return self.wired_protocols | self.bluetooth_protocols

    def supports_wired(self, protocol: Protocol) -> bool:
        return protocol in self.wired_protocols

    def supports_bluetooth(self, protocol: Protocol) -> bool:
        return protocol in self.bluetooth_protocols


@dataclass(frozen=True)
class CompatibilityResult:
    """Deduplicated protocol/connectivity pairs for a game.

    Each protocol appears at most once.
    """

    protocols: tuple[CompatibleProtocol, ...] = ()

    def __iter__(self) -> Iterator[CompatibleProtocol]:
        return iter(self.protocols)

    def __len__(self) -> int:
        return len(self.protocols)

    @property
    def is_supported(self) -> bool:
        return bool(self.protocols)

    @property
    def connectivity_modes(self) -> tuple[Connectivity, ...]:
        """Distinct connectivity values, in first-seen order."""
        return tuple(dict.fromkeys(p.connectivity for p in self.protocols))

    def get(self, protocol: Protocol) -> Connectivity | None:
        for entry in self.protocols:
            if entry.protocol is protocol:
                return entry.connectivity
        return None

    def is_supported_only_via(self, protocol: Protocol) -> bool:
        """Check if the given protocol is the only one available.

        Useful for flagging games that are e.g. playable only through
        touch-mapping (G-TOUCH).
        """
        return len(self.protocols) == 1 and self.protocols[0].protocol is protocol


@dataclass(frozen=True)
class Controller:
    """A game controller listed in the directory.

    Attributes:
        id: Backend identifier
        name: Controller name
        manufacturer: Manufacturer name
        capability: Protocol support per connection type
        created_at: Creation timestamp
    """

    id: str
    name: str
    manufacturer: str = ""
    capability: ControllerCapability = field(default_factory=ControllerCapability)
    created_at: datetime | None = None


@dataclass(frozen=True)
class Game:
    """A game entry in the directory.

    Attributes:
        id: Backend identifier
        name: Game name
        profile: Per-platform protocol requirements
        is_approved: Whether the entry is publicly visible
        rejected_reason: Reason given when a submission was rejected
        description: Free-text description
        igdb_id: IGDB game ID
        image_url: Cover image URL
        testing_notes: Notes left by the tester
        discord_username: Contributor credited for the submission
        approved_by: Name of the approver
        approved_at: Approval timestamp
        created_at: Submission timestamp
        testing_controllers: Names of the controllers used for testing
    """

    id: str
    name: str
    profile: GameProtocolProfile = field(default_factory=GameProtocolProfile)
    is_approved: bool = False
    rejected_reason: str = ""
    description: str = ""
    igdb_id: int | None = None
    image_url: str = ""
    testing_notes: str = ""
    discord_username: str = ""
    approved_by: str = ""
    approved_at: datetime | None = None
    created_at: datetime | None = None
    testing_controllers: tuple[str, ...] = ()

    @property
    def is_public(self) -> bool:
        return self.is_approved


@dataclass(frozen=True)
class GameCompatibility:
    """A search result: a game annotated with its usable protocols.

    Attributes:
        game: The matched game
        protocols: Protocol/connectivity pairs (gated by the controller if one
            was selected, the raw declared pairs otherwise)
        controller: The selected controller, if any
    """

    game: Game
    protocols: CompatibilityResult = field(default_factory=CompatibilityResult)
    controller: Controller | ControllerCapability | None = None

    @property
    def is_supported(self) -> bool:
        if self.controller is None:
            return True
        return self.protocols.is_supported

    @property
    def connectivity_modes(self) -> tuple[Connectivity, ...]:
        if self.controller is None:
            return ()
        return self.protocols.connectivity_modes

    @property
    def testing_controllers(self) -> tuple[str, ...]:
        return self.game.testing_controllers

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for the presentation layer."""
        return {
            "game": self.game.name,
            "game_id": self.game.id,
            "is_supported": self.is_supported,
            "supported_protocols": [
                {"protocol": p.protocol.value, "connectivity": p.connectivity.value}
                for p in self.protocols
            ],
            "connectivity_modes": [c.value for c in self.connectivity_modes],
            "testing_controllers": list(self.testing_controllers),
        }
