"""Tests for the DirectoryClient."""

import pytest

from padmatch import DirectoryClient, DirectoryConfig, EngineConfig, MemorySource
from padmatch.core.exceptions import ControllerNotFoundError
from padmatch.core.search import search
from padmatch.types.common import Connectivity, Protocol


class TestDirectoryClient:
    """Tests for DirectoryClient over an in-memory source."""

    async def test_refresh_on_enter(self, memory_source):
        """Test that entering the context loads a snapshot."""
        async with DirectoryClient(memory_source) as client:
            # Unapproved games are not part of the public pool
            assert [g.name for g in client.games] == [
                "Call of Duty: Mobile",
                "Genshin Impact",
                "Mario Kart Tour",
            ]
            assert [c.name for c in client.controllers] == ["Kishi", "Pro Controller"]

    def test_empty_before_refresh(self, memory_source):
        """Test that a client that was never refreshed has an empty pool."""
        client = DirectoryClient(memory_source)
        assert client.search("") == []
        assert client.find_similar("Genshin Impact") is None

    async def test_search_by_controller_id(self, memory_source, kishi):
        """Test that a controller id resolves to the snapshot's controller."""
        async with DirectoryClient(memory_source) as client:
            by_id = client.search("genshin", controller="c-kishi")
            by_model = search(client.games, "genshin", kishi)
            assert by_id == by_model
            assert by_id[0].protocols.get(Protocol.HID) is Connectivity.BOTH

    async def test_search_unknown_controller(self, memory_source):
        """Test that an unknown controller id raises."""
        async with DirectoryClient(memory_source) as client:
            with pytest.raises(ControllerNotFoundError):
                client.search("", controller="missing")

    async def test_browse(self, memory_source):
        """Test searching without a controller."""
        async with DirectoryClient(memory_source) as client:
            results = client.search("mario")
            assert len(results) == 1
            assert results[0].protocols.get(Protocol.NS) is Connectivity.BOTH

    async def test_find_similar(self, memory_source):
        """Test duplicate detection over the snapshot."""
        async with DirectoryClient(memory_source) as client:
            similar = client.find_similar("Genshin Impakt")
            assert similar is not None
            assert similar.id == "g2"

    async def test_find_similar_ignores_unapproved(self, memory_source):
        """Test that unapproved games never show up as duplicates."""
        async with DirectoryClient(memory_source) as client:
            assert client.find_similar("Pokemon Go") is None

    async def test_threshold_from_config(self, memory_source):
        """Test that the configured threshold is applied."""
        config = DirectoryConfig(engine=EngineConfig(similarity_threshold=0.95))
        async with DirectoryClient(memory_source, config) as client:
            assert client.find_similar("Genshin Impakt") is None
            entry, score = client.score_similar("genshin impact")
            assert entry is not None
            assert score == 1.0

    async def test_refresh_replaces_snapshot(self, games, kishi):
        """Test that refresh swaps in a new snapshot object."""
        source = MemorySource(games=games[:1], controllers=[kishi])
        client = DirectoryClient(source)
        first = await client.refresh()
        second = await client.refresh()
        assert first == second
        assert first is not second
        assert client.snapshot is second

    async def test_close_closes_source(self, memory_source):
        """Test that closing the client closes its source."""
        closed = []

        async def close():
            closed.append(True)

        memory_source.close = close
        async with DirectoryClient(memory_source):
            pass
        assert closed == [True]

    async def test_memory_source_accepts_records(self):
        """Test loading the pool from raw backend records."""
        source = MemorySource(
            games=[
                {"id": "1", "name": "Brawl Stars", "is_approved": True, "android_tested": True, "android_hid": "Bluetooth"},
                {"id": "2", "name": "Hidden Game", "is_approved": False},
            ],
            controllers=[{"id": "c", "name": "Pad", "bluetooth_protocols": ["HID"]}],
        )
        async with DirectoryClient(source) as client:
            results = client.search("", controller="c")
            assert [r.game.name for r in results] == ["Brawl Stars"]
            assert results[0].is_supported
        assert len(source.all_games) == 2
