"""
Circulation models for the Library Catalog.

- Loan: an open borrow linking one book to the user holding it
- LendingStatus: the outcome of a borrow or return request

The catalog never raises for an unknown id or an unavailable book. Instead,
``borrow_book`` and ``return_book`` return a LendingStatus and leave it to the
presentation layer (MCP tools, the console demo) to render the outcome.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LendingStatus(str, Enum):
    """Outcome of a borrow or return request."""

    BORROWED = "borrowed"
    UNAVAILABLE = "unavailable"
    NOT_FOUND = "not_found"
    RETURNED = "returned"

    @property
    def message(self) -> str:
        """Human-readable status line for this outcome."""
        return _MESSAGES[self]

    @property
    def succeeded(self) -> bool:
        """True if the request changed the catalog."""
        return self in (LendingStatus.BORROWED, LendingStatus.RETURNED)


_MESSAGES = {
    LendingStatus.BORROWED: "Book successfully borrowed.",
    LendingStatus.UNAVAILABLE: "The book is currently unavailable.",
    LendingStatus.NOT_FOUND: "Invalid book or user ID.",
    LendingStatus.RETURNED: "Book successfully returned.",
}


class Loan(BaseModel):
    """
    Represents a book currently held by a user.

    A loan exists exactly as long as the book is borrowed: it is created by a
    successful borrow and deleted by the matching return. At most one loan
    references a given book.
    """

    book_id: int = Field(
        ...,
        description="Identifier of the borrowed book",
        examples=[1, 3],
    )

    user_id: int = Field(
        ...,
        description="Identifier of the user holding the book",
        examples=[1, 2],
    )

    def matches(self, book_id: int, user_id: int) -> bool:
        """Check if this loan is for the given book and user."""
        return self.book_id == book_id and self.user_id == user_id

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"book_id": 1, "user_id": 1}},
    )
