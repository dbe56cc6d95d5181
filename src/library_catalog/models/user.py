"""User model for the Library Catalog."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A library user who can borrow books."""

    id: int = Field(
        ...,
        description="Catalog-assigned identifier for the user",
        examples=[1, 2],
    )

    name: str = Field(
        ...,
        description="Display name of the user",
        examples=["User X", "Jane Doe"],
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"id": 1, "name": "User X"}},
    )
