"""Search over the game directory.

Filters games by name and annotates each hit with the protocols it can be
played with, either for a selected controller or, when browsing, as declared
by the game itself.
"""

from __future__ import annotations

from collections.abc import Iterable

from padmatch.core.compatibility import declared_protocols, resolve
from padmatch.core.matching import matches
from padmatch.types.common import (
    Controller,
    ControllerCapability,
    Game,
    GameCompatibility,
)


def _capability(controller: Controller | ControllerCapability) -> ControllerCapability:
    if isinstance(controller, Controller):
        return controller.capability
    return controller


def annotate(
    game: Game,
    selected_controller: Controller | ControllerCapability | None = None,
) -> GameCompatibility:
    """Attach the usable protocols to a single game.

    Args:
        game: The game to annotate
        selected_controller: Controller to gate protocols by, or None to
            expose the game's declared protocols

    Returns:
        The annotated game
    """
    if selected_controller is None:
        return GameCompatibility(game=game, protocols=declared_protocols(game.profile))

    return GameCompatibility(
        game=game,
        protocols=resolve(game.profile, _capability(selected_controller)),
        controller=selected_controller,
    )


def search(
    games: Iterable[Game],
    query: str,
    selected_controller: Controller | ControllerCapability | None = None,
) -> list[GameCompatibility]:
    """Search games by name and resolve their compatibility.

    The input order of ``games`` is preserved; results are not re-ranked by
    match quality. Calling this twice with the same arguments gives equal
    results.

    Args:
        games: The games to search
        query: Free-text query (empty matches every game)
        selected_controller: Controller to resolve against, or None to browse

    Returns:
        One GameCompatibility per matching game
    """
    return [
        annotate(game, selected_controller)
        for game in games
        if matches(game.name, query)
    ]


def supported_only(results: Iterable[GameCompatibility]) -> list[GameCompatibility]:
    """Keep only the results the selected controller can play."""
    return [result for result in results if result.is_supported]
