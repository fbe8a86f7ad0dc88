"""Record store: the ordered lines a search runs over.

Purpose
-------
Hold the loaded input as an immutable sequence of records. Each record keeps
its raw text (case preserved for display) and the 0-based position it was
loaded at. Positions are the ids the inverted index and the query strategies
work with.

Loading
-------
- `load_records(lines)`: wrap any sequence of strings.
- `read_records(path)`: read a UTF-8 text file, one record per line. Blank
  lines are kept so positions match line numbers; they just carry no tokens.
  Only LF, CR and CRLF end a line; other Unicode separators stay
  inside the record text.
- HTML input is an extension beyond plain text: `.html`/`.htm` files are
  reduced to their visible text with BeautifulSoup first, and every non-blank
  text line becomes a record.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

HTML_SUFFIXES = (".html", ".htm")


@dataclass(frozen=True)
class Record:
    position: int
    text: str


class RecordStore:
    """Immutable, positionally indexed sequence of records."""

    def __init__(self, texts: Iterable[str]):
        self._records: Tuple[Record, ...] = tuple(
            Record(position=i, text=t) for i, t in enumerate(texts)
        )

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, position: int) -> Record:
        return self._records[position]

    def texts(self) -> List[str]:
        return [r.text for r in self._records]

    def positions(self) -> range:
        """Every valid record position, 0..N-1."""
        return range(len(self._records))


def load_records(lines: Iterable[str]) -> RecordStore:
    """Build a store from raw lines, dropping any trailing line terminator."""
    store = RecordStore(line.rstrip("\r\n") for line in lines)
    logger.debug("Loaded %d records", len(store))
    return store


def _text_from_html(html: str) -> str:
    """Extract visible text from HTML, one block per line."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.extract()
    return soup.get_text(separator="\n")


def read_records(path: Union[str, Path]) -> RecordStore:
    """Load the records of a data file (plain text or HTML)."""
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Data file not found: {path}")

    if p.suffix.lower() in HTML_SUFFIXES:
        text = p.read_text(encoding="utf-8")
        lines = [ln.strip() for ln in _text_from_html(text).splitlines()]
        store = load_records(ln for ln in lines if ln)
    else:
        # universal newlines: only \n, \r and \r\n end a record
        with open(p, "r", encoding="utf-8", newline=None) as fh:
            store = load_records(fh)

    logger.info("Read %d records from %s", len(store), p)
    return store
