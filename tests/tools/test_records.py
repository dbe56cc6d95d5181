"""
Tests for record management tools.

These tests cover adding and removing authors, books, and users through the
MCP tool handlers, including the silent no-op for unknown ids.
"""

import pytest

from library_catalog.tools.records import (
    add_author_handler,
    add_book_handler,
    add_user_handler,
    record_tools,
    remove_author_handler,
    remove_book_handler,
    remove_user_handler,
)


class TestAddTools:
    """Test the add_* MCP tools."""

    async def test_add_author(self, catalog):
        result = await add_author_handler(catalog, {"name": "  Harper Lee  "})

        assert "isError" not in result
        assert result["content"][0]["text"] == "Added author 'Harper Lee' with id 1."
        assert result["data"]["author"] == {"id": 1, "name": "Harper Lee"}
        assert catalog.get_author(1).name == "Harper Lee"

    async def test_add_book(self, catalog):
        result = await add_book_handler(catalog, {"title": "Book 1", "author_id": 7})

        assert result["data"]["book"] == {
            "id": 1,
            "title": "Book 1",
            "author_id": 7,
            "available": True,
        }

    async def test_add_user(self, catalog):
        await add_user_handler(catalog, {"name": "User X"})
        result = await add_user_handler(catalog, {"name": "User Y"})

        assert result["data"]["user"] == {"id": 2, "name": "User Y"}
        assert len(catalog.users) == 2

    @pytest.mark.parametrize("name", ["", "   ", None])
    async def test_blank_names_are_rejected(self, catalog, name):
        result = await add_author_handler(catalog, {"name": name})

        assert result["isError"] is True
        assert catalog.authors == []

    async def test_book_requires_author_id(self, catalog):
        result = await add_book_handler(catalog, {"title": "Book 1"})

        assert result["isError"] is True
        assert "Invalid add_book parameters" in result["content"][0]["text"]
        assert catalog.books == []


class TestRemoveTools:
    """Test the remove_* MCP tools."""

    async def test_remove_existing_records(self, seeded_catalog):
        author = await remove_author_handler(seeded_catalog, {"author_id": 3})
        book = await remove_book_handler(seeded_catalog, {"book_id": 4})
        user = await remove_user_handler(seeded_catalog, {"user_id": 2})

        assert author["data"] == {"author_id": 3, "removed": True}
        assert book["data"] == {"book_id": 4, "removed": True}
        assert user["data"] == {"user_id": 2, "removed": True}
        assert book["content"][0]["text"] == "Removed book 4."

    async def test_remove_unknown_id_is_not_an_error(self, seeded_catalog):
        result = await remove_book_handler(seeded_catalog, {"book_id": 99})

        assert "isError" not in result
        assert result["data"] == {"book_id": 99, "removed": False}
        assert result["content"][0]["text"] == "No book with id 99."
        assert len(seeded_catalog.books) == 5

    async def test_remove_invalid_id(self, seeded_catalog):
        result = await remove_user_handler(seeded_catalog, {"user_id": "abc"})

        assert result["isError"] is True
        assert len(seeded_catalog.users) == 2


def test_record_tool_names():
    assert [tool["name"] for tool in record_tools] == [
        "add_author",
        "remove_author",
        "add_book",
        "remove_book",
        "add_user",
        "remove_user",
    ]
