"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from padmatch import (
    Connectivity,
    Controller,
    ControllerCapability,
    DirectoryConfig,
    EngineConfig,
    Game,
    GameProtocolProfile,
    MemorySource,
    Protocol,
    SourceConfig,
)


@pytest.fixture
def mock_config() -> DirectoryConfig:
    """Create a configuration for testing."""
    return DirectoryConfig(
        engine=EngineConfig(similarity_threshold=0.7, min_name_length=3),
        source=SourceConfig(url="https://test.supabase.co", api_key="test-key", timeout=5),
    )


@pytest.fixture
def kishi() -> Controller:
    """A controller with XINPUT and HID wired, HID over bluetooth."""
    return Controller(
        id="c-kishi",
        name="Kishi",
        manufacturer="Razer",
        capability=ControllerCapability.build(
            wired=[Protocol.XINPUT, Protocol.HID],
            bluetooth=[Protocol.HID],
        ),
    )


@pytest.fixture
def switch_pad() -> Controller:
    """A bluetooth-only controller speaking NS."""
    return Controller(
        id="c-pro",
        name="Pro Controller",
        manufacturer="Nintendo",
        capability=ControllerCapability.build(bluetooth=[Protocol.NS]),
    )


@pytest.fixture
def games() -> list[Game]:
    """A small pool of games, in the order the directory returns them."""
    return [
        Game(
            id="g1",
            name="Call of Duty: Mobile",
            is_approved=True,
            profile=GameProtocolProfile.build(
                android={Protocol.XINPUT: Connectivity.WIRED},
                ios={Protocol.XINPUT: Connectivity.BOTH},
            ),
            discord_username="tester1",
        ),
        Game(
            id="g2",
            name="Genshin Impact",
            is_approved=True,
            profile=GameProtocolProfile.build(
                android={Protocol.HID: Connectivity.WIRED},
                ios={Protocol.HID: Connectivity.BLUETOOTH},
            ),
            testing_controllers=("Kishi",),
        ),
        Game(
            id="g3",
            name="Mario Kart Tour",
            is_approved=True,
            profile=GameProtocolProfile.build(
                android={Protocol.NS: Connectivity.BOTH},
            ),
            discord_username="tester1",
        ),
        Game(
            id="g4",
            name="Pokemon Go",
            is_approved=False,
            profile=GameProtocolProfile.build(
                android={Protocol.G_TOUCH: Connectivity.BLUETOOTH},
            ),
        ),
    ]


@pytest.fixture
def memory_source(games, kishi, switch_pad) -> MemorySource:
    """An in-memory source over the game pool and both controllers."""
    return MemorySource(games=games, controllers=[switch_pad, kishi])
