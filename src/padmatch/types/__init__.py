"""Type definitions for the padmatch library."""

from padmatch.types.common import (
    CompatibilityResult,
    CompatibleProtocol,
    Connectivity,
    Controller,
    ControllerCapability,
    Game,
    GameCompatibility,
    GameProtocolProfile,
    Platform,
    PlatformProtocols,
    Protocol,
)

__all__ = [
    "CompatibilityResult",
    "CompatibleProtocol",
    "Connectivity",
    "Controller",
    "ControllerCapability",
    "Game",
    "GameCompatibility",
    "GameProtocolProfile",
    "Platform",
    "PlatformProtocols",
    "Protocol",
]
