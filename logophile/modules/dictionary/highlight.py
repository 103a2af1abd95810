"""Locate the part of a term that matches a search query."""

from typing import NamedTuple


class HighlightedTerm(NamedTuple):
    """A term split around the matched query text."""

    before: str
    match: str
    after: str


def highlight_match(term: str, query: str) -> HighlightedTerm | None:
    """Split ``term`` around the first case-insensitive occurrence of ``query``.

    Returns None when the query is blank or does not occur in the term.

    Example:
        >>> highlight_match("Beautiful", " beau")
        HighlightedTerm(before='', match='Beau', after='tiful')
    """
    needle = query.strip().lower()
    if not needle:
        return None

    index = term.lower().find(needle)
    if index == -1:
        return None

    end = index + len(needle)
    return HighlightedTerm(term[:index], term[index:end], term[end:])
