"""Inverted index: lowercase token -> positions of the records containing it."""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterator, List, Tuple

from .records import RecordStore

logger = logging.getLogger(__name__)

EMPTY_POSTINGS: Tuple[int, ...] = ()


def tokenize(text: str) -> List[str]:
    """Lowercase and split on runs of whitespace."""
    return text.lower().split()


class InvertedIndex:
    """Read-only token -> posting list mapping.

    Posting lists are in record order and keep duplicate positions when a
    token repeats within a record.
    """

    def __init__(self, inv: Dict[str, Tuple[int, ...]]):
        self._inv = inv

    def postings(self, token: str) -> Tuple[int, ...]:
        """Return the posting list for a token, or an empty one."""
        return self._inv.get(token, EMPTY_POSTINGS)

    def tokens(self) -> Iterator[str]:
        return iter(self._inv)

    def __contains__(self, token: str) -> bool:
        return token in self._inv

    def __len__(self) -> int:
        return len(self._inv)


def build_index(store: RecordStore) -> InvertedIndex:
    """Build the inverted index in a single pass over the store."""
    building: Dict[str, List[int]] = defaultdict(list)
    for record in store:
        for token in tokenize(record.text):
            building[token].append(record.position)

    index = InvertedIndex({t: tuple(ps) for t, ps in building.items()})
    logger.info("Indexed %d distinct tokens from %d records", len(index), len(store))
    return index
