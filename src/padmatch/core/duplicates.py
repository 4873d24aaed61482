"""Near-duplicate detection for game submissions.

When someone submits a game, the directory warns them if a publicly visible
entry already has a very similar name. Only approved entries are considered,
since the submitter cannot see anything else.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final

from padmatch.core.similarity import similarity
from padmatch.types.common import Game

logger = logging.getLogger(__name__)

# Default similarity a pool entry must exceed to be reported
DEFAULT_THRESHOLD: Final[float] = 0.7

# Shorter names are too generic for similarity to mean anything
MIN_NAME_LENGTH: Final[int] = 3


def score_similar(
    candidate_name: str,
    pool: Iterable[Game],
    threshold: float = DEFAULT_THRESHOLD,
    min_name_length: int = MIN_NAME_LENGTH,
) -> tuple[Game | None, float]:
    """Find the approved entry closest to a candidate name, with its score.

    Args:
        candidate_name: The name being submitted
        pool: Existing entries to compare against
        threshold: The best score must be strictly greater than this
        min_name_length: Candidates shorter than this are never matched

    Returns:
        Tuple of (entry, similarity_score) or (None, 0.0) if nothing qualifies.
        On equal scores the first entry in pool order wins.
    """
    if len(candidate_name) < min_name_length:
        return None, 0.0

    candidate = candidate_name.lower()
    best_entry: Game | None = None
    best_score: float = 0.0

    for entry in pool:
        if not entry.is_public:
            continue

        score = similarity(candidate, entry.name.lower())

        if best_entry is None or score > best_score:
            best_entry = entry
            best_score = score

            if score == 1.0:
                break

    if best_entry is not None and best_score > threshold:
        logger.debug(
            "Possible duplicate for '%s': '%s' (%.3f)", candidate_name, best_entry.name, best_score
        )
        return best_entry, best_score

    return None, 0.0


def find_similar(
    candidate_name: str,
    pool: Iterable[Game],
    threshold: float = DEFAULT_THRESHOLD,
    min_name_length: int = MIN_NAME_LENGTH,
) -> Game | None:
    """Find an approved entry whose name is suspiciously close to a candidate.

    Args:
        candidate_name: The name being submitted
        pool: Existing entries to compare against
        threshold: Similarity the best entry must strictly exceed (default: 0.7)
        min_name_length: Candidates shorter than this return None (default: 3)

    Returns:
        The closest approved entry, or None

    Examples:
        >>> pool = [Game("1", "Mario Kart Tour", is_approved=True)]
        >>> find_similar("Mario Kart Tuor", pool).name
        'Mario Kart Tour'
    """
    entry, _ = score_similar(candidate_name, pool, threshold, min_name_length)
    return entry
