"""In-memory data source."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from padmatch.sources.base import DataSource
from padmatch.sources.records import parse_controller_record, parse_game_record
from padmatch.types.common import Controller, Game


class MemorySource(DataSource):
    """Data source backed by in-memory lists.

    Accepts model objects or raw backend records, so a JSON dump of the
    backend tables can be loaded directly.

    Example:
        source = MemorySource(
            games=[{"id": "1", "name": "Genshin Impact", "is_approved": True}],
            controllers=[{"id": "c1", "name": "Kishi", "wired_protocols": ["XINPUT"]}],
        )
        games = await source.fetch_games()
    """

    name = "memory"

    def __init__(
        self,
        games: Iterable[Game | Mapping[str, Any]] = (),
        controllers: Iterable[Controller | Mapping[str, Any]] = (),
    ) -> None:
        self._games: tuple[Game, ...] = tuple(
            g if isinstance(g, Game) else parse_game_record(g) for g in games
        )
        self._controllers: tuple[Controller, ...] = tuple(
            c if isinstance(c, Controller) else parse_controller_record(c) for c in controllers
        )

    @property
    def all_games(self) -> tuple[Game, ...]:
        """Every game held by the source, approved or not."""
        return self._games

    async def fetch_games(self) -> list[Game]:
        return sorted((g for g in self._games if g.is_approved), key=lambda g: g.name)

    async def fetch_controllers(self) -> list[Controller]:
        return sorted(self._controllers, key=lambda c: c.name)
