"""Tests for the search_books_by_author tool."""

from library_catalog.tools.search import search_books_by_author_handler


class TestSearchBooksByAuthorTool:
    """Test the search_books_by_author MCP tool."""

    async def test_search_returns_books_in_order(self, seeded_catalog):
        result = await search_books_by_author_handler(seeded_catalog, {"author_id": 2})

        assert "isError" not in result
        assert result["data"]["author_id"] == 2
        assert result["data"]["count"] == 2
        assert [b["id"] for b in result["data"]["books"]] == [2, 5]
        assert result["content"][0]["text"].splitlines() == [
            "Books by Author 2:",
            "  2. Book 2 (available)",
            "  5. Book 5 (available)",
        ]

    async def test_search_lists_borrowed_books(self, seeded_catalog):
        seeded_catalog.borrow_book(5, 1)

        result = await search_books_by_author_handler(seeded_catalog, {"author_id": 2})

        assert result["data"]["count"] == 2
        assert result["data"]["books"][1]["available"] is False
        assert "5. Book 5 (on loan)" in result["content"][0]["text"]

    async def test_search_without_matches(self, seeded_catalog):
        result = await search_books_by_author_handler(seeded_catalog, {"author_id": 9})

        assert "isError" not in result
        assert result["data"] == {"author_id": 9, "count": 0, "books": []}
        assert result["content"][0]["text"] == "No books found for author 9."

    async def test_search_after_author_removed(self, seeded_catalog):
        seeded_catalog.remove_author(1)

        result = await search_books_by_author_handler(seeded_catalog, {"author_id": 1})

        assert [b["id"] for b in result["data"]["books"]] == [1, 3]

    async def test_search_invalid_arguments(self, seeded_catalog):
        result = await search_books_by_author_handler(seeded_catalog, {"author": "Author B"})

        assert result["isError"] is True
        assert "Invalid search_books_by_author parameters" in result["content"][0]["text"]
