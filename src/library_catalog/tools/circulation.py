"""
Circulation tools for the Library Catalog.

This module exposes the borrow/return ledger as MCP tools:
1. borrow_book: Open a loan and mark the book unavailable
2. return_book: Close a loan and mark the book available again

Both tools report the lending outcome in ``data.status``:

    borrowed | unavailable | not_found | returned

A ``not_found`` or ``unavailable`` outcome is a normal answer from the
catalog, so the response is not flagged ``isError``. The status line in the
text content is the same one the console demo prints.
"""

import logging
from typing import Any

from fastmcp.tools import ToolResult
from pydantic import BaseModel, ValidationError

from ..catalog import LibraryCatalog
from ..models import LendingStatus
from .params import BookId, UserId
from .responses import invalid_arguments, text_response, to_tool_result, unexpected_error

logger = logging.getLogger(__name__)


# =============================================================================
# INPUT SCHEMA
# =============================================================================

class LendingInput(BaseModel):
    """
    Input schema for the borrow_book and return_book tools.

    Both operations identify a loan by the pair (book, user). Ids must be
    positive integers; whether they exist in the catalog is decided by the
    catalog itself and reported as a ``not_found`` status.
    """

    book_id: BookId
    user_id: UserId


def _lending_response(status: LendingStatus, params: LendingInput) -> dict[str, Any]:
    return text_response(
        status.message,
        {
            "status": status.value,
            "succeeded": status.succeeded,
            "book_id": params.book_id,
            "user_id": params.user_id,
        },
    )


# =============================================================================
# HANDLERS
# =============================================================================

async def borrow_book_handler(catalog: LibraryCatalog, arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Handler for the borrow_book tool.

    Args:
        catalog: The catalog to lend from
        arguments: Raw arguments from the MCP tools/call request

    Returns:
        Response carrying the lending status, or an error response when the
        arguments are malformed
    """
    try:
        try:
            params = LendingInput.model_validate(arguments)
        except ValidationError as e:
            return invalid_arguments("borrow_book", e)

        status = catalog.borrow_book(params.book_id, params.user_id)
        if not status.succeeded:
            logger.info("Borrow rejected: %s", status.message)
        return _lending_response(status, params)

    except Exception as e:
        return unexpected_error("borrow_book", e)


async def return_book_handler(catalog: LibraryCatalog, arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Handler for the return_book tool.

    The loan must have been opened by the same user; returning a book on
    behalf of someone else is reported as ``not_found``.
    """
    try:
        try:
            params = LendingInput.model_validate(arguments)
        except ValidationError as e:
            return invalid_arguments("return_book", e)

        status = catalog.return_book(params.book_id, params.user_id)
        if not status.succeeded:
            logger.info("Return rejected: %s", status.message)
        return _lending_response(status, params)

    except Exception as e:
        return unexpected_error("return_book", e)


# =============================================================================
# TOOL FUNCTIONS
# =============================================================================

def _bind_borrow_book(catalog: LibraryCatalog):
    async def borrow_book(book_id: BookId, user_id: UserId) -> ToolResult:
        return to_tool_result(
            await borrow_book_handler(catalog, {"book_id": book_id, "user_id": user_id})
        )

    return borrow_book


def _bind_return_book(catalog: LibraryCatalog):
    async def return_book(book_id: BookId, user_id: UserId) -> ToolResult:
        return to_tool_result(
            await return_book_handler(catalog, {"book_id": book_id, "user_id": user_id})
        )

    return return_book


# =============================================================================
# TOOL REGISTRATION
# =============================================================================

borrow_book = {
    "name": "borrow_book",
    "description": (
        "Lend a book to a user. Succeeds only if both ids exist and the book is "
        "available; otherwise reports 'not_found' or 'unavailable' without "
        "changing the catalog."
    ),
    "handler": borrow_book_handler,
    "bind": _bind_borrow_book,
}

return_book = {
    "name": "return_book",
    "description": (
        "Return a borrowed book. The book id and user id must match an open loan; "
        "otherwise reports 'not_found'. Returning the same loan twice reports "
        "'not_found' the second time."
    ),
    "handler": return_book_handler,
    "bind": _bind_return_book,
}

circulation_tools = [borrow_book, return_book]
