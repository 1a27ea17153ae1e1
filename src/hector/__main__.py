"""
Command line viewer for Hector documents.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .core.document import Document
from .core.position import Position, SearchDirection
from .core.syntax import colorize
from .utils.graphemes import split_graphemes

LOG_LEVEL_ENV = 'HECTOR_LOG_LEVEL'

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="hector",
        description="Hector - view and search text files by grapheme"
    )
    parser.add_argument(
        "file",
        type=str,
        help="File to open"
    )
    parser.add_argument(
        "--find",
        metavar="QUERY",
        help="Print the line:column of every match instead of the text; "
             "exits with status 1 when nothing matches"
    )
    parser.add_argument(
        "--backward",
        action="store_true",
        help="Search from the end of the document towards the start"
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Colour rows with the syntax highlighter"
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)"
    )
    return parser.parse_args(argv)


def find_all(document: Document, query: str, direction: SearchDirection) -> List[Position]:
    """Collect every match of query in scan order."""

    matches: List[Position] = []
    if document.is_empty():
        return matches

    if direction is SearchDirection.FORWARD:
        at = Position(0, 0)
    else:
        last = len(document) - 1
        at = Position(document.row(last).length(), last)

    while True:
        found = document.find(query, at, direction)
        if found is None:
            break

        matches.append(found)
        if direction is SearchDirection.FORWARD:
            at = Position(found.x + 1, found.y)
        else:
            at = found

    return matches


def print_rows(document: Document, color: bool) -> None:
    if color:
        document.highlight()

    for index in range(len(document)):
        row = document.row(index)
        if color:
            print(colorize(split_graphemes(row.text), row.highlighting))
        else:
            print(row.render(0, row.length()))


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        document = Document.open(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error loading {args.file}: {e}", file=sys.stderr)
        return 1

    if args.find is None:
        print_rows(document, args.color)
        return 0

    direction = SearchDirection.BACKWARD if args.backward else SearchDirection.FORWARD
    matches = find_all(document, args.find, direction)
    logger.info("Found %d matches for %r", len(matches), args.find)

    for position in matches:
        print(f"{position.y + 1}:{position.x + 1}")

    return 0 if matches else 1


if __name__ == "__main__":
    sys.exit(main())
