"""
padmatch: Game and controller compatibility resolution for mobile gaming.

This library answers which mobile games can be played with which game
controllers, over which input protocols and connection modes. It also
provides tolerant name search and near-duplicate detection for game
submissions.

Example usage:
    from padmatch import DirectoryClient, SourceConfig, SupabaseSource

    source = SupabaseSource(SourceConfig(url="https://xyz.supabase.co", api_key="..."))

    async with DirectoryClient(source) as client:
        for result in client.search("genshin", controller="kishi-v2"):
            print(result.game.name, [str(p) for p in result.protocols])
"""

from padmatch.core.client import DirectoryClient, DirectorySnapshot
from padmatch.core.compatibility import declared_protocols, resolve
from padmatch.core.config import DirectoryConfig, EngineConfig, SourceConfig
from padmatch.core.duplicates import find_similar
from padmatch.core.exceptions import (
    ControllerNotFoundError,
    InvalidConfigurationError,
    InvalidRecordError,
    PadmatchError,
    SourceAuthenticationError,
    SourceConnectionError,
    SourceError,
)
from padmatch.core.matching import matches
from padmatch.core.search import search
from padmatch.core.similarity import distance, similarity
from padmatch.sources import DataSource, MemorySource, SupabaseSource
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
    Protocol,
)

__version__ = "1.0.0"

__all__ = [
    # Core
    "DirectoryClient",
    "DirectorySnapshot",
    "DirectoryConfig",
    "EngineConfig",
    "SourceConfig",
    # Sources
    "DataSource",
    "MemorySource",
    "SupabaseSource",
    # Exceptions
    "PadmatchError",
    "SourceError",
    "SourceConnectionError",
    "SourceAuthenticationError",
    "InvalidRecordError",
    "ControllerNotFoundError",
    "InvalidConfigurationError",
    # Engine
    "declared_protocols",
    "distance",
    "find_similar",
    "matches",
    "resolve",
    "search",
    "similarity",
    # Types
    "CompatibilityResult",
    "CompatibleProtocol",
    "Connectivity",
    "Controller",
    "ControllerCapability",
    "Game",
    "GameCompatibility",
    "GameProtocolProfile",
    "Platform",
    "Protocol",
]
