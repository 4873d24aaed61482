"""Edit-distance based string similarity.

Both functions are case-sensitive; callers lowercase their inputs first when
case should not matter.
"""

from __future__ import annotations

from typing import Final

from strsimpy.levenshtein import Levenshtein

# Create a single instance for reuse
_levenshtein: Final = Levenshtein()


def distance(a: str, b: str) -> int:
    """Calculate the Levenshtein edit distance between two strings.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character insertions, deletions or
        substitutions needed to turn ``a`` into ``b``

    Examples:
        >>> distance("kitten", "sitting")
        3
        >>> distance("", "abc")
        3
    """
    return int(_levenshtein.distance(a, b))


def similarity(a: str, b: str) -> float:
    """Calculate a normalized similarity score between two strings.

    The score is ``(longest - distance) / longest``, so identical strings
    score 1.0 and completely different strings of equal length score 0.0.

    Args:
        a: First string
        b: Second string

    Returns:
        Similarity score between 0 and 1 (1.0 when both strings are empty)
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return (longest - distance(a, b)) / longest
