"""Library Catalog MCP Tools Package.

Tools are the operations a client can invoke on the catalog:
- records: add/remove authors, books, and users
- circulation: borrow and return books
- search: list books by author

Each tool definition holds a ``handler(catalog, arguments)`` coroutine that
validates raw arguments and builds the response dict, and a ``bind(catalog)``
factory that returns the typed function registered with FastMCP. The catalog
is not global, so ``bind_tools`` builds those functions for the catalog
instance the server was started with.
"""

from typing import Any

from ..catalog import LibraryCatalog
from .circulation import circulation_tools
from .records import record_tools
from .search import search_tools

# Combine all tools
all_tools = record_tools + circulation_tools + search_tools


def bind_tools(catalog: LibraryCatalog) -> list[dict[str, Any]]:
    """Return ``name``/``description``/``handler`` entries bound to ``catalog``.

    Each handler takes the tool's parameters as keyword arguments and returns
    a FastMCP ``ToolResult``, raising ``ToolError`` for invalid input.
    """
    bound = []
    for tool in all_tools:
        handler = tool["bind"](catalog)
        handler.__doc__ = tool["description"]
        bound.append({
            "name": tool["name"],
            "description": tool["description"],
            "handler": handler,
        })
    return bound


__all__ = [
    "all_tools",
    "bind_tools",
    "circulation_tools",
    "record_tools",
    "search_tools",
]
