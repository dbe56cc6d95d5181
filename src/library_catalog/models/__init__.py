"""
Library Catalog Models.

This package contains Pydantic models for the records held by the catalog.
These models provide:

1. Data validation using Pydantic v2
2. Serialization to/from JSON for MCP tool responses
3. Type hints for all fields

The models represent:
- Author: Book authors
- Book: Catalog items with a lending status
- User: People who can borrow books
- Loan: An open borrow of one book by one user
- LendingStatus: Outcome of a borrow or return request
"""

from .author import Author
from .book import Book
from .loan import LendingStatus, Loan
from .user import User

__all__ = [
    "Author",
    "Book",
    "LendingStatus",
    "Loan",
    "User",
]
