"""Simple search launcher.

Purpose
-------
Load a data file, build the inverted index over its lines and hand both to
the interactive menu.

Usage
-----
python -m simplesearch.main --data names.txt
python -m simplesearch.main --data page.html --log-level DEBUG
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional

from .index import build_index
from .menu import run_menu
from .records import read_records

DEFAULT_DATA_FILE = "names.txt"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search the lines of a text file (ALL / ANY / NONE)")
    parser.add_argument(
        "--data",
        default=DEFAULT_DATA_FILE,
        help=f"Text or HTML file to search, one record per line (default: {DEFAULT_DATA_FILE})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        store = read_records(args.data)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not load %s", args.data, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    index = build_index(store)
    run_menu(store, index)
    return 0


if __name__ == "__main__":
    sys.exit(main())
