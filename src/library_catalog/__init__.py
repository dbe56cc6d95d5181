"""
Library Catalog Package.

This package implements a small in-memory library catalog: authors, books,
users, and a borrow/return ledger, with search by author. The catalog is
exposed to clients through an MCP tool server and a console demo.

Key Components:
- models: Pydantic models for catalog records and lending outcomes
- catalog: The LibraryCatalog aggregate owning all records
- config: Configuration management with Pydantic v2
- tools: MCP tools (operations on the catalog)
"""

__version__ = "0.1.0"

from .catalog import LibraryCatalog
from .models import LendingStatus

__all__ = [
    "LendingStatus",
    "LibraryCatalog",
    "__version__",
]
