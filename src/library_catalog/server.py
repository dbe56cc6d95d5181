"""Library Catalog MCP Server

Serves a LibraryCatalog over the Model Context Protocol. Clients connect via
the stdio transport and drive the catalog through tools:

- Records: add/remove authors, books, and users
- Circulation: borrow and return books
- Search: list books by author

The catalog lives in memory for the lifetime of the process. It is created
once in ``main()`` and handed to the server explicitly; nothing is persisted
on shutdown.
"""

import logging
import signal
import sys
from typing import Any

from fastmcp import FastMCP

from library_catalog.catalog import LibraryCatalog
from library_catalog.config import CatalogConfig, get_config
from library_catalog.tools import bind_tools

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: CatalogConfig) -> None:
    """Send logs to stderr; stdout carries the stdio transport."""
    logging.basicConfig(
        level=config.log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    if config.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled - verbose logging active")
    else:
        logging.getLogger("fastmcp").setLevel(logging.WARNING)


def create_server(catalog: LibraryCatalog, config: CatalogConfig) -> FastMCP:
    """Create the FastMCP server and register every catalog tool."""
    mcp = FastMCP(
        name=config.server_name,
        version=config.server_version,
        instructions=(
            "Library Catalog - an in-memory catalog of authors, books, and users "
            "with a borrow/return ledger. Use the record tools to add or remove "
            "entries, borrow_book/return_book to lend books, and "
            "search_books_by_author to list an author's books."
        ),
    )

    tools = bind_tools(catalog)
    for tool in tools:
        logger.debug("Registering tool: %s", tool["name"])
        try:
            mcp.tool(
                name=tool["name"],
                description=tool["description"],
            )(tool["handler"])
        except Exception:
            logger.exception("Failed to register tool %s", tool["name"])
            raise

    logger.info("Registered %d tools", len(tools))
    return mcp


def run_stdio_server(mcp: FastMCP, config: CatalogConfig) -> None:
    """Run the MCP server using stdio transport."""
    logger.info("Starting %s v%s on stdio transport", config.server_name, config.server_version)

    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, initiating shutdown...", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        logger.info("MCP Server ready and waiting for connections...")
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in MCP server")
        sys.exit(1)


def main() -> None:
    """Entry point for the ``library-catalog`` command."""
    config = get_config()
    configure_logging(config)

    try:
        logger.info("=" * 60)
        logger.info("Library Catalog MCP Server")
        logger.info("Version: %s", config.server_version)
        logger.info("Transport: %s", config.transport)
        logger.info("Id strategy: %s", config.id_strategy)
        logger.info("Debug Mode: %s", config.debug)
        logger.info("=" * 60)

        catalog = LibraryCatalog(id_strategy=config.id_strategy)
        mcp = create_server(catalog, config)
        run_stdio_server(mcp, config)

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Failed to start MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
