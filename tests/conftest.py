"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides product fixtures, a built index, a store and an API client.

==============================================================================
"""

import json
from pathlib import Path
from typing import Generator, List

import pytest
from fastapi.testclient import TestClient

from catalog_search.catalog import (
    CatalogIndex,
    Product,
    ProductStore,
    SearchStrategy,
    build_index,
    init_store,
    reset_store,
)
from catalog_search.config import get_settings


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def products() -> List[Product]:
    """Four-product sample catalog."""
    return [
        Product(name="Laptop", category="Electronics", brand="A"),
        Product(name="Smartphone", category="Electronics", brand="B"),
        Product(name="Chair", category="Furniture", brand="C"),
        Product(name="Table", category="Furniture", brand="C"),
    ]


@pytest.fixture
def index(products: List[Product]) -> CatalogIndex:
    return build_index(products)


@pytest.fixture
def store(products: List[Product]) -> ProductStore:
    return ProductStore(products, strategy=SearchStrategy.INDEXED, verify_equivalence=False)


@pytest.fixture
def products_file(tmp_path: Path) -> Path:
    """JSON catalog file with the sample products."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps([
        {"name": "Laptop", "category": "Electronics", "brand": "A"},
        {"name": "Smartphone", "category": "Electronics", "brand": "B"},
        {"name": "Chair", "category": "Furniture", "brand": "C"},
        {"name": "Table", "category": "Furniture", "brand": "C"},
    ]), encoding="utf-8")
    return path


# ============================================================================
# SETTINGS / SINGLETON FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clean_state() -> Generator[None, None, None]:
    """Reset cached settings and the global store around each test."""
    get_settings.cache_clear()
    reset_store()
    yield
    reset_store()
    get_settings.cache_clear()


# ============================================================================
# API FIXTURES
# ============================================================================

@pytest.fixture
def client(products: List[Product]) -> TestClient:
    """
    Test client with the sample catalog loaded.
    
    Not entered as a context manager, so startup does not read the
    products file from disk.
    """
    from catalog_search.main import app
    
    init_store(products, strategy=SearchStrategy.INDEXED, verify_equivalence=True)
    return TestClient(app)


@pytest.fixture
def empty_client() -> TestClient:
    """Test client with no catalog loaded."""
    from catalog_search.main import app
    
    return TestClient(app)
