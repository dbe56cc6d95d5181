"""
Record management tools for the Library Catalog.

This module exposes creation and removal of catalog records as MCP tools:
1. add_author / remove_author
2. add_book / remove_book
3. add_user / remove_user

Removal of an unknown id is not an error. The catalog treats it as a no-op,
so the tool reports ``removed: false`` rather than flagging ``isError``.
Only arguments that fail schema validation produce an error response.
"""

from typing import Any

from fastmcp.tools import ToolResult
from pydantic import BaseModel, ValidationError

from ..catalog import LibraryCatalog
from .params import AuthorId, BookId, BookTitle, PersonName, UserId
from .responses import invalid_arguments, text_response, to_tool_result, unexpected_error


# =============================================================================
# INPUT SCHEMAS
# =============================================================================


class AddAuthorInput(BaseModel):
    """Input schema for the add_author tool."""

    name: PersonName


class AddBookInput(BaseModel):
    """Input schema for the add_book tool.

    The author id is not checked against the catalog.
    """

    title: BookTitle
    author_id: AuthorId


class AddUserInput(BaseModel):
    """Input schema for the add_user tool."""

    name: PersonName


class AuthorIdInput(BaseModel):
    author_id: AuthorId


class BookIdInput(BaseModel):
    book_id: BookId


class UserIdInput(BaseModel):
    user_id: UserId


# =============================================================================
# HANDLERS
# =============================================================================


async def add_author_handler(catalog: LibraryCatalog, arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the add_author tool."""
    try:
        try:
            params = AddAuthorInput.model_validate(arguments)
        except ValidationError as e:
            return invalid_arguments("add_author", e)

        author = catalog.add_author(params.name)
        return text_response(
            f"Added author '{author.name}' with id {author.id}.",
            {"author": author.model_dump()},
        )
    except Exception as e:
        return unexpected_error("add_author", e)


async def add_book_handler(catalog: LibraryCatalog, arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the add_book tool."""
    try:
        try:
            params = AddBookInput.model_validate(arguments)
        except ValidationError as e:
            return invalid_arguments("add_book", e)

        book = catalog.add_book(params.title, params.author_id)
        return text_response(
            f"Added book '{book.title}' with id {book.id}.",
            {"book": book.model_dump()},
        )
    except Exception as e:
        return unexpected_error("add_book", e)


async def add_user_handler(catalog: LibraryCatalog, arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the add_user tool."""
    try:
        try:
            params = AddUserInput.model_validate(arguments)
        except ValidationError as e:
            return invalid_arguments("add_user", e)

        user = catalog.add_user(params.name)
        return text_response(
            f"Added user '{user.name}' with id {user.id}.",
            {"user": user.model_dump()},
        )
    except Exception as e:
        return unexpected_error("add_user", e)


def _removal_response(kind: str, record_id: int, removed: bool) -> dict[str, Any]:
    text = f"Removed {kind} {record_id}." if removed else f"No {kind} with id {record_id}."
    return text_response(text, {f"{kind}_id": record_id, "removed": removed})


async def remove_author_handler(catalog: LibraryCatalog, arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the remove_author tool. Books by the author are kept."""
    try:
        try:
            params = AuthorIdInput.model_validate(arguments)
        except ValidationError as e:
            return invalid_arguments("remove_author", e)

        removed = catalog.remove_author(params.author_id)
        return _removal_response("author", params.author_id, removed)
    except Exception as e:
        return unexpected_error("remove_author", e)


async def remove_book_handler(catalog: LibraryCatalog, arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the remove_book tool."""
    try:
        try:
            params = BookIdInput.model_validate(arguments)
        except ValidationError as e:
            return invalid_arguments("remove_book", e)

        removed = catalog.remove_book(params.book_id)
        return _removal_response("book", params.book_id, removed)
    except Exception as e:
        return unexpected_error("remove_book", e)


async def remove_user_handler(catalog: LibraryCatalog, arguments: dict[str, Any]) -> dict[str, Any]:
    """Handler for the remove_user tool."""
    try:
        try:
            params = UserIdInput.model_validate(arguments)
        except ValidationError as e:
            return invalid_arguments("remove_user", e)

        removed = catalog.remove_user(params.user_id)
        return _removal_response("user", params.user_id, removed)
    except Exception as e:
        return unexpected_error("remove_user", e)


# =============================================================================
# TOOL FUNCTIONS
# =============================================================================
#
# FastMCP publishes a tool's input schema from its function signature. Each
# factory closes a typed function over the catalog and forwards the flat
# arguments to the handler above.


def _bind_add_author(catalog: LibraryCatalog):
    async def add_author(name: PersonName) -> ToolResult:
        return to_tool_result(await add_author_handler(catalog, {"name": name}))

    return add_author


def _bind_remove_author(catalog: LibraryCatalog):
    async def remove_author(author_id: AuthorId) -> ToolResult:
        return to_tool_result(await remove_author_handler(catalog, {"author_id": author_id}))

    return remove_author


def _bind_add_book(catalog: LibraryCatalog):
    async def add_book(title: BookTitle, author_id: AuthorId) -> ToolResult:
        return to_tool_result(
            await add_book_handler(catalog, {"title": title, "author_id": author_id})
        )

    return add_book


def _bind_remove_book(catalog: LibraryCatalog):
    async def remove_book(book_id: BookId) -> ToolResult:
        return to_tool_result(await remove_book_handler(catalog, {"book_id": book_id}))

    return remove_book


def _bind_add_user(catalog: LibraryCatalog):
    async def add_user(name: PersonName) -> ToolResult:
        return to_tool_result(await add_user_handler(catalog, {"name": name}))

    return add_user


def _bind_remove_user(catalog: LibraryCatalog):
    async def remove_user(user_id: UserId) -> ToolResult:
        return to_tool_result(await remove_user_handler(catalog, {"user_id": user_id}))

    return remove_user


# =============================================================================
# TOOL REGISTRATION
# =============================================================================

add_author = {
    "name": "add_author",
    "description": "Add an author to the catalog. Returns the new author and its id.",
    "handler": add_author_handler,
    "bind": _bind_add_author,
}

remove_author = {
    "name": "remove_author",
    "description": (
        "Remove an author by id. Books by the author stay in the catalog. "
        "Removing an unknown id does nothing."
    ),
    "handler": remove_author_handler,
    "bind": _bind_remove_author,
}

add_book = {
    "name": "add_book",
    "description": (
        "Add a book to the catalog. The book starts out available. "
        "The author id is stored as given and is not checked."
    ),
    "handler": add_book_handler,
    "bind": _bind_add_book,
}

remove_book = {
    "name": "remove_book",
    "description": (
        "Remove a book by id. An open loan for the book is left in place. "
        "Removing an unknown id does nothing."
    ),
    "handler": remove_book_handler,
    "bind": _bind_remove_book,
}

add_user = {
    "name": "add_user",
    "description": "Register a user who can borrow books. Returns the new user and its id.",
    "handler": add_user_handler,
    "bind": _bind_add_user,
}

remove_user = {
    "name": "remove_user",
    "description": (
        "Remove a user by id. Loans held by the user stay open. "
        "Removing an unknown id does nothing."
    ),
    "handler": remove_user_handler,
    "bind": _bind_remove_user,
}

record_tools = [add_author, remove_author, add_book, remove_book, add_user, remove_user]
