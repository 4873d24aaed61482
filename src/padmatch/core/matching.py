"""Tolerant matching of search queries against game names."""

from __future__ import annotations


def is_subsequence(text: str, query: str) -> bool:
    """Check if the characters of ``query`` appear in ``text`` in order.

    Gaps are allowed, reordering is not.

    Examples:
        >>> is_subsequence("pokemon", "pkmn")
        True
        >>> is_subsequence("pokemon", "nmkp")
        False
    """
    text_index = 0
    query_index = 0

    while text_index < len(text) and query_index < len(query):
        if text[text_index] == query[query_index]:
            query_index += 1
        text_index += 1

    return query_index == len(query)


def matches(text: str, query: str) -> bool:
    """Check if a search query matches a piece of text.

    An empty query matches everything. Otherwise the comparison is
    case-insensitive: a contiguous substring matches first, and failing that
    an ordered subsequence of the text matches.

    Args:
        text: The text to search in (typically a game name)
        query: The user's search query

    Returns:
        True if the query matches the text

    Examples:
        >>> matches("Pokemon Go", "pokemon")
        True
        >>> matches("Call of Duty Mobile", "codm")
        True
        >>> matches("Pokemon Go", "ogn")
        False
    """
    if not query:
        return True

    text_lower = text.lower()
    query_lower = query.lower()

    if query_lower in text_lower:
        return True

    return is_subsequence(text_lower, query_lower)
