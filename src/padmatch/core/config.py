"""Configuration classes for the padmatch library."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from padmatch.core.exceptions import InvalidConfigurationError


@dataclass
class EngineConfig:
    """Tuning for the matching engine.

    Attributes:
        similarity_threshold: A pool entry is reported as a likely duplicate
            only when its similarity is strictly greater than this value
        min_name_length: Names shorter than this are never checked for
            duplicates
    """

    similarity_threshold: float = 0.7
    min_name_length: int = 3

    def __post_init__(self) -> None:
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise InvalidConfigurationError(
                f"similarity_threshold must be between 0 and 1, got {self.similarity_threshold}"
            )
        if self.min_name_length < 0:
            raise InvalidConfigurationError(
                f"min_name_length must not be negative, got {self.min_name_length}"
            )


@dataclass
class SourceConfig:
    """Configuration for a remote data source.

    Attributes:
        url: Base URL of the backend (e.g. "https://xyz.supabase.co")
        api_key: Anonymous API key sent with every request
        timeout: Request timeout in seconds
        user_agent: User agent string for HTTP requests
        options: Additional source-specific options
    """

    url: str = ""
    api_key: str = ""
    timeout: int = 30
    user_agent: str = "padmatch/1.0"
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def is_configured(self) -> bool:
        """Check if the source has a URL and key configured."""
        return bool(self.url) and bool(self.api_key)


@dataclass
class DirectoryConfig:
    """Main configuration for the DirectoryClient.

    Attributes:
        engine: Matching engine configuration
        source: Remote data source configuration
    """

    engine: EngineConfig = field(default_factory=EngineConfig)
    source: SourceConfig = field(default_factory=SourceConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DirectoryConfig:
        """Create a DirectoryConfig from a dictionary."""
        kwargs: dict[str, Any] = {}

        try:
            if "engine" in data:
                kwargs["engine"] = EngineConfig(**data["engine"])
            if "source" in data:
                kwargs["source"] = SourceConfig(**data["source"])
        except TypeError as e:
            raise InvalidConfigurationError(str(e)) from e

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary."""
        return asdict(self)
