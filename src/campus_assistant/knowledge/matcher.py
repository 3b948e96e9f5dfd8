"""Keyword matching of free-text queries against the knowledge base.

Hidden design decisions:
- Case folding of the query
- Which parts of an entry count as a hit (phrase, category, single word)
- The order in which entries are tried
"""

from .models import GENERAL_CATEGORY, CampusData, MatchResult


def _phrase_hit(query: str, category: str, phrase: str) -> bool:
    return phrase in query


def _category_hit(query: str, category: str, phrase: str) -> bool:
    return category in query


def _word_hit(query: str, category: str, phrase: str) -> bool:
    return any(word in query for word in phrase.split())


# Tried in this order; each pass walks the whole table in declaration order.
MATCH_PASSES = (_phrase_hit, _category_hit, _word_hit)


def find_relevant_info(query: str, data: CampusData) -> MatchResult:
    """Pick the canned response for a query.

    The query is lowercased and checked against every
    (category, phrase, response) entry. An entry hits when the query
    contains the whole phrase, the category name, or any single word of the
    phrase. Whole-phrase hits are preferred over category hits, which are
    preferred over single-word hits; within a pass the first entry in
    declaration order wins. Plain substring containment is used throughout,
    so "classes" contains "class".

    Args:
        query: Free text typed by the user
        data: Knowledge base to search

    Returns:
        The matched entry, or the fallback response with category "general"
    """
    lowered = query.lower()
    if lowered.strip():
        for hit in MATCH_PASSES:
            for category, phrase, response in data.iter_entries():
                if hit(lowered, category, phrase):
                    return MatchResult(content=response, category=category, phrase=phrase)

    return MatchResult(content=data.fallback, category=GENERAL_CATEGORY)


class KeywordMatcher:
    """Matcher bound to a single knowledge base."""

    def __init__(self, data: CampusData) -> None:
        self._data = data

    @property
    def data(self) -> CampusData:
        return self._data

    def match(self, query: str) -> MatchResult:
        """Match a query against the bound knowledge base."""
        return find_relevant_info(query, self._data)
