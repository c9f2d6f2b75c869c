"""
==============================================================================
Product Schemas Module
==============================================================================

Response schemas for catalog browsing and search endpoints.

==============================================================================
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from catalog_search.catalog.models import Product, SearchQuery, SearchStrategy
from catalog_search.catalog.search import StrategyComparison


class ProductResponse(BaseModel):
    """Single product as returned by the API."""
    
    name: str
    category: str
    brand: str
    
    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        """Create response from Product model."""
        return cls(name=product.name, category=product.category, brand=product.brand)


class ProductListResponse(BaseModel):
    """Catalog listing."""
    success: bool = Field(default=True)
    total: int = Field(ge=0)
    products: List[ProductResponse]


class SearchResponse(BaseModel):
    """
    Search results.
    
    ``total`` counts every match; ``products`` is truncated to the limit.
    """
    success: bool = Field(default=True)
    name: Optional[str] = None
    category: Optional[str] = None
    brand: Optional[str] = None
    strategy: SearchStrategy
    total: int = Field(ge=0)
    products: List[ProductResponse]


class ProductDetailResponse(BaseModel):
    success: bool = Field(default=True)
    product: ProductResponse


class ValuesResponse(BaseModel):
    """Distinct attribute values (categories or brands)."""
    success: bool = Field(default=True)
    values: List[str]


class StatsResponse(BaseModel):
    success: bool = Field(default=True)
    stats: Dict


class StrategyResult(BaseModel):
    """Products returned by one search strategy."""
    total: int = Field(ge=0)
    products: List[ProductResponse]
    
    @classmethod
    def from_products(cls, products: List[Product]) -> "StrategyResult":
        return cls(
            total=len(products),
            products=[ProductResponse.from_product(p) for p in products]
        )


class CompareResponse(BaseModel):
    """Scan and indexed results for the same query."""
    success: bool = Field(default=True)
    query: SearchQuery
    consistent: bool
    scan: StrategyResult
    indexed: StrategyResult
    
    @classmethod
    def from_comparison(cls, comparison: StrategyComparison) -> "CompareResponse":
        """Create response from a StrategyComparison."""
        return cls(
            query=comparison.query,
            consistent=comparison.consistent,
            scan=StrategyResult.from_products(comparison.scan_results),
            indexed=StrategyResult.from_products(comparison.indexed_results)
        )
