"""
==============================================================================
Product Store Module
==============================================================================

In-memory product store built once from a list of products.

Features:
---------
- JSON-based product loading
- Combined name/category/brand search (scan or indexed)
- Optional cross-check of both search strategies
- Exact-name lookup and category/brand listings

JSON Structure:
--------------
[
  {"name": "Laptop", "category": "Electronics", "brand": "BrandA"},
  {"name": "Chair", "category": "Furniture", "brand": "BrandC"},
  ...
]

Results are the stored Product instances themselves. Products are frozen,
and the store is never modified after construction.

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from catalog_search import config
from catalog_search.core import exceptions

from .index import CatalogIndex, build_index
from .models import Product, SearchQuery, SearchStrategy
from .search import StrategyComparison, compare_strategies, make_query, scan, search_indexed


# Module logger
logger = logging.getLogger(__name__)


class ProductStore:
    """
    Product store with attribute indexes and combined search.
    
    Attributes:
        products: All products in catalog order
        index: Catalog index used by the indexed strategy
    
    Example:
        >>> store = ProductStore.from_file(Path("data/products.json"))
        >>> store.search(category="Electronics")
        [Product(name='Laptop', ...), Product(name='Smartphone', ...)]
    """
    
    def __init__(
        self,
        products: Iterable[Product],
        strategy: Optional[SearchStrategy] = None,
        verify_equivalence: Optional[bool] = None,
    ) -> None:
        """
        Build the store.
        
        Args:
            products: Products in catalog order
            strategy: Default strategy (uses settings if None)
            verify_equivalence: Cross-check strategies (uses settings if None)
        """
        settings = config.get_settings()
        self._index: CatalogIndex = build_index(products)
        self._strategy = SearchStrategy(strategy or settings.search_strategy)
        self._verify = settings.verify_equivalence if verify_equivalence is None else verify_equivalence
    
    # =========================================================================
    # PROPERTIES
    # =========================================================================
    
    @property
    def products(self) -> List[Product]:
        """Get all products."""
        return list(self._index.catalog)
    
    @property
    def index(self) -> CatalogIndex:
        return self._index
    
    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy
    
    def __len__(self) -> int:
        return len(self._index)
    
    # =========================================================================
    # LOADING
    # =========================================================================
    
    @classmethod
    def from_file(cls, products_file: Path, **kwargs) -> "ProductStore":
        """
        Load products from a JSON file.
        
        Entries missing a field or holding non-string values are skipped.
        
        Args:
            products_file: Path to products.json
            **kwargs: Passed to the constructor
            
        Raises:
            FileNotFoundError: If the file does not exist
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If the top-level value is not a list
        """
        try:
            with Path(products_file).open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.error(f"Products file not found: {products_file}")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON: {e}")
            raise
        
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of products in {products_file}")
        
        products = []
        for position, item in enumerate(data):
            try:
                products.append(Product.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid product at entry {position}: {e.error_count()} error(s)")
        
        store = cls(products, **kwargs)
        logger.info(f"✅ Loaded {len(store)} products from {products_file}")
        return store
    
    # =========================================================================
    # SEARCH METHODS
    # =========================================================================
    
    def search(
        self,
        query: Optional[SearchQuery] = None,
        *,
        name: str = "",
        category: str = "",
        brand: str = "",
        strategy: Optional[SearchStrategy] = None,
    ) -> List[Product]:
        """
        Search products matching every given criterion.
        
        Args:
            query: Prepared query (overrides the keyword criteria)
            name: Name substring
            category: Exact category
            brand: Exact brand
            strategy: Override the store's default strategy
            
        Returns:
            Matching products in catalog order; empty when no criterion
            is given
            
        Raises:
            AppException: SEARCH_INCONSISTENT when verification is on and
                the strategies disagree
        """
        criteria = query if query is not None else make_query(name, category, brand)
        strategy = SearchStrategy(strategy or self._strategy)
        
        if self._verify:
            return self._verified_search(criteria, strategy)
        
        if strategy is SearchStrategy.SCAN:
            return scan(self._index.catalog, criteria)
        return search_indexed(self._index, criteria)
    
    def _verified_search(self, criteria: SearchQuery, strategy: SearchStrategy) -> List[Product]:
        comparison = compare_strategies(self._index, criteria)
        
        if not comparison.consistent:
            logger.error(
                f"Search mismatch for {criteria.model_dump()}: "
                f"scan={len(comparison.scan_results)} "
                f"indexed={len(comparison.indexed_results)}"
            )
            raise exceptions.search_inconsistent(
                criteria.model_dump(),
                len(comparison.scan_results),
                len(comparison.indexed_results),
            )
        
        if strategy is SearchStrategy.SCAN:
            return comparison.scan_results
        return comparison.indexed_results
    
    def compare(self, query: Optional[SearchQuery] = None, **criteria: str) -> StrategyComparison:
        """Run both strategies for one query."""
        return compare_strategies(self._index, query if query is not None else SearchQuery(**criteria))
    
    def find_by_name(self, name: str) -> Optional[Product]:
        """Find the first product with this exact name."""
        return self._index.lookup_name(name)
    
    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    
    def get_categories(self) -> List[str]:
        """Get distinct categories in catalog order."""
        return self._index.categories()
    
    def get_brands(self) -> List[str]:
        """Get distinct brands in catalog order."""
        return self._index.brands()
    
    def get_stats(self) -> Dict:
        """Get store statistics."""
        index = self._index
        return {
            "total_products": len(index),
            "distinct_names": len(index.by_name),
            "categories": {value: len(positions) for value, positions in index.by_category.items()},
            "brands": {value: len(positions) for value, positions in index.by_brand.items()},
            "strategy": self._strategy.value,
        }


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_store_instance: Optional[ProductStore] = None


def get_store() -> Optional[ProductStore]:
    """Get the global store instance."""
    return _store_instance


def init_store(source: Union[Path, str, Iterable[Product]], **kwargs) -> ProductStore:
    """
    Initialize the global store instance.
    
    Args:
        source: Path to products.json, or the products themselves
        **kwargs: Passed to the ProductStore constructor
        
    Returns:
        ProductStore instance
    """
    global _store_instance
    if isinstance(source, (str, Path)):
        _store_instance = ProductStore.from_file(Path(source), **kwargs)
    else:
        _store_instance = ProductStore(source, **kwargs)
    return _store_instance


def reset_store() -> None:
    """Drop the global store instance."""
    global _store_instance
    _store_instance = None
