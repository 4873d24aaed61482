"""Core functionality for padmatch."""

from padmatch.core.client import DirectoryClient, DirectorySnapshot
from padmatch.core.compatibility import (
    declared_protocols,
    merge_connectivity,
    platform_protocols,
    resolve,
)
from padmatch.core.config import DirectoryConfig, EngineConfig, SourceConfig
from padmatch.core.duplicates import find_similar, score_similar
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
from padmatch.core.search import search, supported_only
from padmatch.core.similarity import distance, similarity

__all__ = [
    "DirectoryClient",
    "DirectorySnapshot",
    "DirectoryConfig",
    "EngineConfig",
    "SourceConfig",
    "PadmatchError",
    "SourceError",
    "SourceConnectionError",
    "SourceAuthenticationError",
    "InvalidRecordError",
    "ControllerNotFoundError",
    "InvalidConfigurationError",
    "declared_protocols",
    "distance",
    "find_similar",
    "matches",
    "merge_connectivity",
    "platform_protocols",
    "resolve",
    "score_similar",
    "search",
    "similarity",
    "supported_only",
]
