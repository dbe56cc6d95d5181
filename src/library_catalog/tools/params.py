"""
Parameter types shared by the tool input schemas and the MCP tool functions.

FastMCP builds each tool's published input schema from the function
signature, so the constraints live on these annotated types and the
pydantic input models reuse the same ones.
"""

from typing import Annotated

from pydantic import Field, StringConstraints

AuthorId = Annotated[int, Field(ge=1, description="Identifier of the author", examples=[1, 2])]

BookId = Annotated[int, Field(ge=1, description="Identifier of the book", examples=[1, 3])]

UserId = Annotated[int, Field(ge=1, description="Identifier of the user", examples=[1, 2])]

PersonName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=200),
    Field(description="Name of the person", examples=["Author A", "User X"]),
]

BookTitle = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=500),
    Field(description="Title of the book", examples=["Book 1", "To Kill a Mockingbird"]),
]
