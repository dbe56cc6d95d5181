"""
Book model for the Library Catalog.

A book has a two-state lending lifecycle:

    Available --borrow--> Borrowed --return--> Available

Books start out available. The catalog flips ``available`` when a loan is
opened or closed; nothing else mutates a book after creation.
"""

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """
    Represents a book in the catalog.

    ``author_id`` is not checked against the catalog's authors, either when
    the book is added or when the author is later removed.
    """

    id: int = Field(
        ...,
        description="Catalog-assigned identifier for the book",
        examples=[1, 5],
    )

    title: str = Field(
        ...,
        description="The title of the book",
        examples=["Book 1", "The Great Gatsby"],
    )

    author_id: int = Field(
        ...,
        description="Identifier of the book's author",
        examples=[1, 2],
    )

    available: bool = Field(
        default=True,
        description="Whether the book can currently be borrowed",
    )

    @property
    def is_borrowed(self) -> bool:
        """Check if the book is currently on loan."""
        return not self.available

    def mark_borrowed(self) -> None:
        """Move the book from Available to Borrowed."""
        self.available = False

    def mark_returned(self) -> None:
        """Move the book from Borrowed back to Available."""
        self.available = True

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "id": 2,
                "title": "Book 2",
                "author_id": 2,
                "available": True,
            }
        },
    )
