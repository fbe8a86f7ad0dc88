"""Interactive menu.

`dispatch` executes one already-validated command and returns what to show;
`run_menu` is the console loop that reads choices and feeds `dispatch`.
Reading and writing go through the `read`/`write` callables so the loop can
be driven from anything, not only a terminal.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from .index import InvertedIndex
from .query import MatchingStrategy, search, unknown_words
from .records import RecordStore

logger = logging.getLogger(__name__)

MENU_LINES = [
    "",
    "=== Menu ===",
    "1. Find a record",
    "2. Print all records",
    "0. Exit",
]


class MenuCommand(Enum):
    EXIT = 0
    FIND = 1
    LIST = 2

    @classmethod
    def parse(cls, choice: str) -> "MenuCommand":
        """Map the first character of a menu choice to a command.

        The raw first character counts, so leading whitespace is an incorrect option.
        """
        if not choice or not choice[0].isdigit():
            raise ValueError(f"Incorrect option: {choice!r}")
        try:
            return cls(int(choice[0]))
        except ValueError:
            raise ValueError(f"Incorrect option: {choice!r}") from None


@dataclass(frozen=True)
class FindRequest:
    strategy: MatchingStrategy
    query: str


@dataclass
class MenuOutcome:
    lines: List[str] = field(default_factory=list)
    keep_running: bool = True


def dispatch(
    command: MenuCommand,
    store: RecordStore,
    index: InvertedIndex,
    request: Optional[FindRequest] = None,
) -> MenuOutcome:
    """Execute one menu command."""
    if command is MenuCommand.EXIT:
        return MenuOutcome(keep_running=False)

    if command is MenuCommand.LIST:
        return MenuOutcome(lines=["", "=== List of records ===", *store.texts()])

    if request is None:
        raise ValueError("FIND needs a FindRequest")

    missing = unknown_words(index, request.query)
    if missing:
        logger.debug("Unknown query words: %s", ", ".join(missing))

    hits = search(request.strategy, index, store, request.query)
    if not hits:
        return MenuOutcome(lines=["No records found"])
    return MenuOutcome(lines=[store[i].text for i in sorted(hits)])


def _read_find_request(read: Callable[[], str], write: Callable[[str], None]) -> Optional[FindRequest]:
    write("")
    write("Select a matching strategy: ALL, ANY, NONE")
    raw_strategy = read()
    write("")
    write("Enter search query:")
    query = read().strip().lower()
    try:
        strategy = MatchingStrategy.parse(raw_strategy)
    except ValueError:
        # no "No records found" follow-up; nothing was searched
        write("Invalid matching strategy")
        return None
    return FindRequest(strategy=strategy, query=query)


def run_menu(
    store: RecordStore,
    index: InvertedIndex,
    read: Optional[Callable[[], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> None:
    """Console loop: runs until EXIT or end of input, then says goodbye.

    Defaults to `input` and `print`.
    """
    read = read or input
    write = write or print
    while True:
        for line in MENU_LINES:
            write(line)
        try:
            choice = read()
            command = MenuCommand.parse(choice)
        except EOFError:
            break
        except ValueError:
            write("")
            write("Incorrect option! Try again.")
            continue

        request = None
        if command is MenuCommand.FIND:
            try:
                request = _read_find_request(read, write)
            except EOFError:
                break
            if request is None:
                continue

        outcome = dispatch(command, store, index, request)
        for line in outcome.lines:
            write(line)
        if not outcome.keep_running:
            break

    write("")
    write("Bye!")
