"""
Author model for the Library Catalog.

Authors are referenced by books through ``Book.author_id``. The reference is a
plain id lookup, so removing an author leaves any of their books pointing at
an id that no longer resolves.
"""

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    """
    Represents an author in the catalog.

    Authors are immutable once created; the only lifecycle operations are
    adding and removing them.
    """

    id: int = Field(
        ...,
        description="Catalog-assigned identifier for the author",
        examples=[1, 2, 3],
    )

    name: str = Field(
        ...,
        description="Full name of the author",
        examples=["Author A", "Harper Lee"],
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"id": 1, "name": "Author A"}},
    )
