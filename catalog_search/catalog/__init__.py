"""
==============================================================================
Catalog Package - Product Indexing and Search
==============================================================================

Immutable product catalog indexed by name, category and brand.

Classes:
--------
- Product: Frozen Pydantic model for catalog records
- SearchQuery: Combined search criteria
- CatalogIndex: Catalog plus exact-value attribute indexes
- ProductStore: Store with search, lookups and JSON loading

Functions:
----------
- build_index: Build a CatalogIndex from products
- scan: Linear-scan search
- search_indexed: Index-intersection search

==============================================================================
"""

from .models import Product, SearchQuery, SearchStrategy
from .index import CatalogIndex, build_index
from .search import StrategyComparison, compare_strategies, scan, search_indexed
from .catalog import ProductStore, get_store, init_store, reset_store

__all__ = [
    "Product",
    "SearchQuery",
    "SearchStrategy",
    "CatalogIndex",
    "build_index",
    "StrategyComparison",
    "compare_strategies",
    "scan",
    "search_indexed",
    "ProductStore",
    "get_store",
    "init_store",
    "reset_store",
]
