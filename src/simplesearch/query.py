"""
Query engine: ALL / ANY / NONE matching over an inverted index.

Every strategy lowercases and whitespace-splits the raw query itself, so
callers may pass user input as typed. Lookups of words missing from the index
always yield an empty posting list; no strategy raises for any query string.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Set

from .index import InvertedIndex, tokenize
from .records import RecordStore

logger = logging.getLogger(__name__)


# ---------------------------
# Matching strategies
# ---------------------------

class MatchingStrategy(Enum):
    ALL = "ALL"
    ANY = "ANY"
    NONE = "NONE"

    @classmethod
    def parse(cls, text: str) -> "MatchingStrategy":
        """Case-insensitive lookup; raises ValueError for anything else."""
        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(f"Invalid matching strategy: {text!r}") from None


def query_words(query: str) -> List[str]:
    return tokenize(query)


def unknown_words(index: InvertedIndex, query: str) -> List[str]:
    """Query words the index has never seen, in query order."""
    seen: List[str] = []
    for w in query_words(query):
        if w not in index and w not in seen:
            seen.append(w)
    return seen


def find_with_all(index: InvertedIndex, query: str) -> Set[int]:
    """Records containing every recognized query word.

    The first word seeds the result, so an unknown first word gives an empty
    result. Unknown later words are skipped and do not narrow it.
    """
    words = query_words(query)
    if not words:
        return set()

    result = set(index.postings(words[0]))
    for w in words[1:]:
        if w in index:
            result = result & set(index.postings(w))
    return result


def find_with_any(index: InvertedIndex, query: str) -> Set[int]:
    """Records containing at least one query word."""
    result: Set[int] = set()
    for w in query_words(query):
        result = result | set(index.postings(w))
    return result


def find_with_none(index: InvertedIndex, store: RecordStore, query: str) -> Set[int]:
    """Records containing none of the query words."""
    if len(store) == 0:
        return set()

    result = set(store.positions())
    words = query_words(query)
    if not words:
        return result

    for w in words:
        if w in index:
            result = result - set(index.postings(w))
        if not result:
            break
    return result


def search(
    strategy: MatchingStrategy,
    index: InvertedIndex,
    store: RecordStore,
    query: str,
) -> Set[int]:
    """Run `query` under the given strategy."""
    if strategy is MatchingStrategy.ALL:
        hits = find_with_all(index, query)
    elif strategy is MatchingStrategy.ANY:
        hits = find_with_any(index, query)
    else:
        hits = find_with_none(index, store, query)
    logger.debug("%s %r -> %d records", strategy.value, query, len(hits))
    return hits
