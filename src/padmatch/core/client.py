"""DirectoryClient - Main entry point for the padmatch library."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from padmatch.core.config import DirectoryConfig
from padmatch.core.duplicates import score_similar
from padmatch.core.exceptions import ControllerNotFoundError
from padmatch.core.search import search
from padmatch.sources.base import DataSource
from padmatch.types.common import Controller, ControllerCapability, Game, GameCompatibility

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectorySnapshot:
    """An immutable view of the directory pool.

    Attributes:
        games: Approved games, ordered by name
        controllers: Controllers, ordered by name
    """

    games: tuple[Game, ...] = ()
    controllers: tuple[Controller, ...] = ()

    def get_controller(self, controller_id: str) -> Controller | None:
        for controller in self.controllers:
            if controller.id == controller_id:
                return controller
        return None


class DirectoryClient:
    """Search and duplicate checks over a snapshot of the directory.

    The snapshot is replaced as a whole on refresh, so every search or
    duplicate check reads one consistent pool.

    Example:
        from padmatch import DirectoryClient, MemorySource

        async with DirectoryClient(MemorySource(games, controllers)) as client:
            results = client.search("genshin", controller="kishi-v2")
            similar = client.find_similar("Genshin Impakt")
    """

    def __init__(
        self,
        source: DataSource,
        config: DirectoryConfig | None = None,
    ) -> None:
        """Initialize the DirectoryClient.

        Args:
            source: Where games and controllers are fetched from
            config: Configuration (uses defaults if None)
        """
        self.source = source
        self.config = config or DirectoryConfig()
        self._snapshot = DirectorySnapshot()

    async def __aenter__(self) -> DirectoryClient:
        """Async context manager entry."""
        await self.refresh()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    @property
    def snapshot(self) -> DirectorySnapshot:
        return self._snapshot

    @property
    def games(self) -> tuple[Game, ...]:
        return self._snapshot.games

    @property
    def controllers(self) -> tuple[Controller, ...]:
        return self._snapshot.controllers

    async def refresh(self) -> DirectorySnapshot:
        """Fetch games and controllers and swap in a new snapshot.

        Returns:
            The new snapshot
        """
        games, controllers = await asyncio.gather(
            self.source.fetch_games(),
            self.source.fetch_controllers(),
        )
        self._snapshot = DirectorySnapshot(tuple(games), tuple(controllers))
        logger.debug(
            "Refreshed directory from %s: %d games, %d controllers",
            self.source.name,
            len(games),
            len(controllers),
        )
        return self._snapshot

    def get_controller(self, controller_id: str) -> Controller:
        """Get a controller by id.

        Raises:
            ControllerNotFoundError: If no controller has this id
        """
        controller = self._snapshot.get_controller(controller_id)
        if controller is None:
            raise ControllerNotFoundError(controller_id)
        return controller

    def search(
        self,
        query: str = "",
        controller: Controller | ControllerCapability | str | None = None,
    ) -> list[GameCompatibility]:
        """Search the directory.

        Args:
            query: Free-text query (empty lists every game)
            controller: A controller, its capability, a controller id, or None
                to browse declared protocols

        Returns:
            Annotated results in directory order

        Raises:
            ControllerNotFoundError: If a controller id is not in the snapshot
        """
        snapshot = self._snapshot
        if isinstance(controller, str):
            controller_id = controller
            controller = snapshot.get_controller(controller_id)
            if controller is None:
                raise ControllerNotFoundError(controller_id)
        return search(snapshot.games, query, controller)

    def find_similar(self, name: str) -> Game | None:
        """Find an approved game with a name close to a new submission."""
        entry, _ = self.score_similar(name)
        return entry

    def score_similar(self, name: str) -> tuple[Game | None, float]:
        """Like find_similar, also returning the similarity score."""
        engine = self.config.engine
        return score_similar(
            name,
            self._snapshot.games,
            threshold=engine.similarity_threshold,
            min_name_length=engine.min_name_length,
        )

    async def close(self) -> None:
        """Close the data source."""
        await self.source.close()
