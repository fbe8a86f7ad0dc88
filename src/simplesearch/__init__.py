"""In-memory line search: record store, inverted index and ALL/ANY/NONE queries."""

from .records import Record, RecordStore, load_records, read_records
from .index import InvertedIndex, build_index, tokenize
from .query import (
    MatchingStrategy,
    find_with_all,
    find_with_any,
    find_with_none,
    search,
    unknown_words,
)
from .menu import FindRequest, MenuCommand, MenuOutcome, dispatch, run_menu

__all__ = [
    "Record",
    "RecordStore",
    "load_records",
    "read_records",
    "InvertedIndex",
    "build_index",
    "tokenize",
    "MatchingStrategy",
    "find_with_all",
    "find_with_any",
    "find_with_none",
    "search",
    "unknown_words",
    "FindRequest",
    "MenuCommand",
    "MenuOutcome",
    "dispatch",
    "run_menu",
]
