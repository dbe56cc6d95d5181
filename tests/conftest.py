"""Test configuration and fixtures for the Library Catalog.

1. Isolated catalogs - each test gets a fresh in-memory catalog
2. Configuration isolation - no LIBRARY_CATALOG_* variables leak between tests
3. Async support - tool handlers are coroutines (asyncio_mode = "auto")
"""

import os
from collections.abc import Generator

import pytest

from library_catalog.catalog import LibraryCatalog
from library_catalog.config import reset_config
from library_catalog.demo import seed_catalog

# === Configuration Fixtures ===


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear cached configuration and catalog env vars around every test."""
    for key in list(os.environ):
        if key.upper().startswith("LIBRARY_CATALOG_"):
            monkeypatch.delenv(key)
    reset_config()
    yield
    reset_config()


# === Catalog Fixtures ===


@pytest.fixture
def catalog() -> LibraryCatalog:
    """Provide an empty catalog."""
    return LibraryCatalog()


@pytest.fixture
def legacy_catalog() -> LibraryCatalog:
    """Provide an empty catalog that assigns ids as collection size + 1."""
    return LibraryCatalog(id_strategy="legacy")


@pytest.fixture
def seeded_catalog(catalog: LibraryCatalog) -> LibraryCatalog:
    """Provide a catalog holding the reference scenario's records.

    Authors 1-3, books 1-5 by authors 1, 2, 1, 3, 2, and users 1-2.
    Nothing is on loan yet.
    """
    seed_catalog(catalog)
    return catalog
