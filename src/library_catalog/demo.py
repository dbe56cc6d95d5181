"""
Replay the reference lending scenario against a fresh catalog.

The scenario:
1. Adds three authors, five books, and two users
2. Borrows books (1, 1), (3, 1), (2, 2)
3. Returns books (1, 1), (3, 1)
4. Lists the books by author 2

Each borrow/return prints its status line; the search prints one line per
book.

Usage:
    library-catalog-demo [--id-strategy {sequential,legacy}] [--verbose]
"""

import argparse
import logging
import sys
from collections.abc import Callable

from library_catalog.catalog import ID_STRATEGIES, LibraryCatalog
from library_catalog.config import get_config
from library_catalog.models import Book, LendingStatus
from library_catalog.server import LOG_FORMAT

logger = logging.getLogger(__name__)

AUTHORS = ["Author A", "Author B", "Author C"]
BOOKS = [
    ("Book 1", 1),
    ("Book 2", 2),
    ("Book 3", 1),
    ("Book 4", 3),
    ("Book 5", 2),
]
USERS = ["User X", "User Y"]
BORROWS = [(1, 1), (3, 1), (2, 2)]
RETURNS = [(1, 1), (3, 1)]
SEARCH_AUTHOR_ID = 2


def seed_catalog(catalog: LibraryCatalog) -> None:
    """Add the scenario's authors, books, and users."""
    for name in AUTHORS:
        catalog.add_author(name)
    for title, author_id in BOOKS:
        catalog.add_book(title, author_id)
    for name in USERS:
        catalog.add_user(name)


def run_scenario(
    catalog: LibraryCatalog, emit: Callable[[str], None] = print
) -> tuple[list[LendingStatus], list[Book]]:
    """
    Run the lending scenario on an already seeded catalog.

    Args:
        catalog: Catalog seeded with ``seed_catalog``
        emit: Receives each output line

    Returns:
        The lending statuses in call order and the search result
    """
    statuses: list[LendingStatus] = []

    for book_id, user_id in BORROWS:
        statuses.append(catalog.borrow_book(book_id, user_id))
        emit(statuses[-1].message)

    for book_id, user_id in RETURNS:
        statuses.append(catalog.return_book(book_id, user_id))
        emit(statuses[-1].message)

    books = catalog.search_books_by_author(SEARCH_AUTHOR_ID)
    emit(f"Books by Author {SEARCH_AUTHOR_ID}:")
    for book in books:
        emit(f"  {book.model_dump()}")

    return statuses, books


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``library-catalog-demo`` command."""
    config = get_config()

    parser = argparse.ArgumentParser(description="Run the library catalog lending scenario")
    parser.add_argument(
        "--id-strategy",
        choices=ID_STRATEGIES,
        default=config.id_strategy,
        help="How record ids are assigned (default: %(default)s)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log catalog activity to stderr",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose or config.debug else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    catalog = LibraryCatalog(id_strategy=args.id_strategy)
    seed_catalog(catalog)
    logger.info(
        "Seeded catalog with %d authors, %d books, %d users",
        len(catalog.authors),
        len(catalog.books),
        len(catalog.users),
    )
    run_scenario(catalog)
    return 0


if __name__ == "__main__":
    sys.exit(main())
