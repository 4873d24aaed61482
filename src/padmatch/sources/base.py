"""Abstract base class for directory data sources."""

from __future__ import annotations

import abc

from padmatch.types.common import Controller, Game


class DataSource(abc.ABC):
    """Abstract base class for data sources.

    A data source supplies the pool the engine computes over. It must only
    return games whose approval flag reflects their public visibility.

    Attributes:
        name: Source name used in errors and logs
    """

    name: str = "base"

    @abc.abstractmethod
    async def fetch_games(self) -> list[Game]:
        """Fetch the approved games, ordered by name.

        Returns:
            List of approved games
        """

    @abc.abstractmethod
    async def fetch_controllers(self) -> list[Controller]:
        """Fetch all controllers, ordered by name.

        Returns:
            List of controllers
        """

    async def close(self) -> None:
        """Close any connections and clean up resources.

        Default implementation does nothing.
        Sources with connections should override.
        """

    async def __aenter__(self) -> DataSource:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
