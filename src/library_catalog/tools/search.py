"""
Search tool for the Library Catalog.

search_books_by_author returns every book whose author id matches, in the
order the books were added. Lending status does not filter the results;
borrowed books are listed with ``available: false``. There is no pagination,
so the full match list is returned.
"""

import logging
from typing import Any

from fastmcp.tools import ToolResult
from pydantic import BaseModel, ValidationError

from ..catalog import LibraryCatalog
from .params import AuthorId
from .responses import invalid_arguments, text_response, to_tool_result, unexpected_error

logger = logging.getLogger(__name__)


class SearchByAuthorInput(BaseModel):
    """Input schema for the search_books_by_author tool."""

    author_id: AuthorId


async def search_books_by_author_handler(
    catalog: LibraryCatalog, arguments: dict[str, Any]
) -> dict[str, Any]:
    """
    Handler for the search_books_by_author tool.

    The author does not have to exist: books left behind by a removed author
    are still found by the old id, and an unknown id simply matches nothing.
    """
    try:
        try:
            params = SearchByAuthorInput.model_validate(arguments)
        except ValidationError as e:
            return invalid_arguments("search_books_by_author", e)

        books = catalog.search_books_by_author(params.author_id)
        logger.debug("Author %s matched %d books", params.author_id, len(books))

        if books:
            lines = [f"Books by Author {params.author_id}:"]
            for book in books:
                state = "available" if book.available else "on loan"
                lines.append(f"  {book.id}. {book.title} ({state})")
            text = "\n".join(lines)
        else:
            text = f"No books found for author {params.author_id}."

        return text_response(
            text,
            {
                "author_id": params.author_id,
                "count": len(books),
                "books": [book.model_dump() for book in books],
            },
        )

    except Exception as e:
        return unexpected_error("search_books_by_author", e)


def _bind_search_books_by_author(catalog: LibraryCatalog):
    async def search_books_by_author(author_id: AuthorId) -> ToolResult:
        return to_tool_result(
            await search_books_by_author_handler(catalog, {"author_id": author_id})
        )

    return search_books_by_author


search_books_by_author = {
    "name": "search_books_by_author",
    "description": (
        "List all books with the given author id, in catalog order. "
        "Includes books that are currently on loan."
    ),
    "handler": search_books_by_author_handler,
    "bind": _bind_search_books_by_author,
}

search_tools = [search_books_by_author]
