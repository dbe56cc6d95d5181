"""
The Library Catalog aggregate.

LibraryCatalog owns four ordered collections (authors, books, users, and
active loans) and is the only place they are mutated. Relationships between
records are by id lookup:

- Book.author_id -> Author.id (never validated)
- Loan.book_id -> Book.id
- Loan.user_id -> User.id

Every operation is total. Unknown ids never raise: removals silently do
nothing, and borrow/return report a LendingStatus. Removals do not cascade,
so a removed author, book, or user can leave dangling ids behind in books and
loans.

All public methods hold a single lock over the four collections so the
catalog can be shared by concurrent request handlers. Books are handed out as
copies; callers see a snapshot and cannot change lending state behind the
catalog's back.
"""

import logging
import threading
from collections.abc import Iterable
from typing import TypeVar

from .models import Author, Book, LendingStatus, Loan, User

logger = logging.getLogger(__name__)

ID_STRATEGIES = ("sequential", "legacy")

_Record = TypeVar("_Record", Author, Book, User)


class LibraryCatalog:
    """
    In-memory catalog of authors, books, users, and loans.

    Args:
        id_strategy: ``"sequential"`` (default) assigns ids from a per-type
            counter that never goes backwards, so ids are unique for the
            catalog's lifetime. ``"legacy"`` assigns ``len(collection) + 1``,
            which can hand out an id that already belongs to another record
            once something has been removed.
    """

    def __init__(self, id_strategy: str = "sequential") -> None:
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy {id_strategy!r}; expected one of {ID_STRATEGIES}"
            )
        self.id_strategy = id_strategy

        self._authors: list[Author] = []
        self._books: list[Book] = []
        self._users: list[User] = []
        self._loans: list[Loan] = []
        self._last_ids: dict[str, int] = {"author": 0, "book": 0, "user": 0}
        self._lock = threading.RLock()

    # ------------------------------------------------------------------ #
    # Authors
    # ------------------------------------------------------------------ #

    def add_author(self, name: str) -> Author:
        """Create an author and append it to the catalog."""
        with self._lock:
            author = Author(id=self._next_id("author", self._authors), name=name)
            self._authors.append(author)
        logger.info("Author added | author_id=%s name=%s", author.id, name)
        return author

    def remove_author(self, author_id: int) -> bool:
        """
        Remove the first author with ``author_id``.

        Books by this author keep their ``author_id``.

        Returns:
            True if an author was removed, False if the id was unknown
        """
        with self._lock:
            removed = self._remove_first(self._authors, author_id)
        self._log_removal("Author", author_id, removed)
        return removed

    def get_author(self, author_id: int) -> Author | None:
        with self._lock:
            return self._find(self._authors, author_id)

    @property
    def authors(self) -> list[Author]:
        with self._lock:
            return list(self._authors)

    # ------------------------------------------------------------------ #
    # Books
    # ------------------------------------------------------------------ #

    def add_book(self, title: str, author_id: int) -> Book:
        """Create an available book and append it to the catalog.

        ``author_id`` is stored as given; it does not have to name an
        existing author.
        """
        with self._lock:
            book = Book(
                id=self._next_id("book", self._books),
                title=title,
                author_id=author_id,
            )
            self._books.append(book)
            snapshot = book.model_copy()
        logger.info(
            "Book added | book_id=%s title=%s author_id=%s", book.id, title, author_id
        )
        return snapshot

    def remove_book(self, book_id: int) -> bool:
        """
        Remove the first book with ``book_id``.

        An open loan for the book is left in place; it can still be closed
        with return_book.

        Returns:
            True if a book was removed, False if the id was unknown
        """
        with self._lock:
            removed = self._remove_first(self._books, book_id)
            if removed and any(loan.book_id == book_id for loan in self._loans):
                logger.warning("Removed book_id=%s while it is on loan", book_id)
        self._log_removal("Book", book_id, removed)
        return removed

    def get_book(self, book_id: int) -> Book | None:
        with self._lock:
            book = self._find(self._books, book_id)
            return book.model_copy() if book else None

    @property
    def books(self) -> list[Book]:
        with self._lock:
            return self._copy_books(self._books)

    # ------------------------------------------------------------------ #
    # Users
    # ------------------------------------------------------------------ #

    def add_user(self, name: str) -> User:
        """Create a user and append it to the catalog."""
        with self._lock:
            user = User(id=self._next_id("user", self._users), name=name)
            self._users.append(user)
        logger.info("User added | user_id=%s name=%s", user.id, name)
        return user

    def remove_user(self, user_id: int) -> bool:
        """
        Remove the first user with ``user_id``.

        Loans held by the user stay open.

        Returns:
            True if a user was removed, False if the id was unknown
        """
        with self._lock:
            removed = self._remove_first(self._users, user_id)
        self._log_removal("User", user_id, removed)
        return removed

    def get_user(self, user_id: int) -> User | None:
        with self._lock:
            return self._find(self._users, user_id)

    @property
    def users(self) -> list[User]:
        with self._lock:
            return list(self._users)

    # ------------------------------------------------------------------ #
    # Circulation
    # ------------------------------------------------------------------ #

    def borrow_book(self, book_id: int, user_id: int) -> LendingStatus:
        """
        Lend a book to a user.

        Returns:
            NOT_FOUND if either id does not resolve, UNAVAILABLE if the book
            is already on loan, otherwise BORROWED after opening a loan
        """
        with self._lock:
            book = self._find(self._books, book_id)
            user = self._find(self._users, user_id)

            if book is None or user is None:
                status = LendingStatus.NOT_FOUND
            elif not book.available:
                status = LendingStatus.UNAVAILABLE
            else:
                book.mark_borrowed()
                self._loans.append(Loan(book_id=book_id, user_id=user_id))
                status = LendingStatus.BORROWED

        logger.info("Borrow %s | book_id=%s user_id=%s", status.value, book_id, user_id)
        return status

    def return_book(self, book_id: int, user_id: int) -> LendingStatus:
        """
        Close the loan of ``book_id`` held by ``user_id``.

        Unknown ids and a book that this user never borrowed both produce
        NOT_FOUND. A second return of the same loan is NOT_FOUND as well.

        Returns:
            RETURNED if a matching loan was closed, otherwise NOT_FOUND
        """
        with self._lock:
            loan = self._find_loan(book_id, user_id)
            if loan is None:
                status = LendingStatus.NOT_FOUND
            else:
                self._loans.remove(loan)
                book = self._find(self._books, book_id)
                if book is None:
                    logger.warning(
                        "Closed loan for book_id=%s which is no longer in the catalog",
                        book_id,
                    )
                else:
                    book.mark_returned()
                status = LendingStatus.RETURNED

        logger.info("Return %s | book_id=%s user_id=%s", status.value, book_id, user_id)
        return status

    def find_loan(self, book_id: int, user_id: int) -> Loan | None:
        with self._lock:
            return self._find_loan(book_id, user_id)

    @property
    def loans(self) -> list[Loan]:
        with self._lock:
            return list(self._loans)

    # ------------------------------------------------------------------ #
    # Search
    # ------------------------------------------------------------------ #

    def search_books_by_author(self, author_id: int) -> list[Book]:
        """Return every book whose ``author_id`` matches, in catalog order."""
        with self._lock:
            return self._copy_books(b for b in self._books if b.author_id == author_id)

    # ------------------------------------------------------------------ #
    # Internals (callers hold the lock)
    # ------------------------------------------------------------------ #

    def _next_id(self, kind: str, collection: list[_Record]) -> int:
        if self.id_strategy == "legacy":
            return len(collection) + 1
        self._last_ids[kind] += 1
        return self._last_ids[kind]

    @staticmethod
    def _find(collection: list[_Record], record_id: int) -> _Record | None:
        return next((record for record in collection if record.id == record_id), None)

    @staticmethod
    def _remove_first(collection: list[_Record], record_id: int) -> bool:
        for index, record in enumerate(collection):
            if record.id == record_id:
                del collection[index]
                return True
        return False

    def _find_loan(self, book_id: int, user_id: int) -> Loan | None:
        return next((loan for loan in self._loans if loan.matches(book_id, user_id)), None)

    @staticmethod
    def _copy_books(books: Iterable[Book]) -> list[Book]:
        return [book.model_copy() for book in books]

    @staticmethod
    def _log_removal(kind: str, record_id: int, removed: bool) -> None:
        if removed:
            logger.info("%s removed | id=%s", kind, record_id)
        else:
            logger.debug("%s not found for removal | id=%s", kind, record_id)
