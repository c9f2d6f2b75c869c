"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for browsing and searching the product catalog.

Search criteria are combined with AND. An omitted or empty criterion
imposes no constraint, and a search with no criteria returns nothing.

==============================================================================
"""

from typing import Optional

from fastapi import APIRouter, Query

from catalog_search.catalog.catalog import get_store
from catalog_search.catalog.models import SearchQuery, SearchStrategy
from catalog_search.config import get_settings
from catalog_search.core import exceptions
from catalog_search.schemas import (
    CompareResponse,
    ProductDetailResponse,
    ProductListResponse,
    ProductResponse,
    SearchResponse,
    StatsResponse,
    ValuesResponse,
)


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""
    
    def __init__(self):
        self._store = get_store()
        if self._store is None:
            raise exceptions.catalog_not_loaded()
    
    def list_products(self, limit: Optional[int]) -> ProductListResponse:
        """List products in catalog order."""
        products = self._store.products
        limit = limit or get_settings().default_result_limit
        
        return ProductListResponse(
            total=len(products),
            products=[ProductResponse.from_product(p) for p in products[:limit]]
        )
    
    def search(
        self,
        name: Optional[str],
        category: Optional[str],
        brand: Optional[str],
        strategy: Optional[str],
        limit: Optional[int]
    ) -> SearchResponse:
        """Search products by combined criteria."""
        selected = self._parse_strategy(strategy)
        query = SearchQuery(name=name, category=category, brand=brand)
        matched = self._store.search(query, strategy=selected)
        limit = limit or get_settings().default_result_limit
        
        return SearchResponse(
            name=name,
            category=category,
            brand=brand,
            strategy=selected,
            total=len(matched),
            products=[ProductResponse.from_product(p) for p in matched[:limit]]
        )
    
    def compare(
        self,
        name: Optional[str],
        category: Optional[str],
        brand: Optional[str]
    ) -> CompareResponse:
        """Run both search strategies on one query."""
        comparison = self._store.compare(SearchQuery(name=name, category=category, brand=brand))
        return CompareResponse.from_comparison(comparison)
    
    def get_by_name(self, name: str) -> ProductDetailResponse:
        """Get product by exact name."""
        product = self._store.find_by_name(name)
        
        if product is None:
            raise exceptions.product_not_found(name)
        
        return ProductDetailResponse(product=ProductResponse.from_product(product))
    
    def get_categories(self) -> ValuesResponse:
        return ValuesResponse(values=self._store.get_categories())
    
    def get_brands(self) -> ValuesResponse:
        return ValuesResponse(values=self._store.get_brands())
    
    def get_stats(self) -> StatsResponse:
        return StatsResponse(stats=self._store.get_stats())
    
    def _parse_strategy(self, strategy: Optional[str]) -> SearchStrategy:
        if not strategy:
            return self._store.strategy
        try:
            return SearchStrategy(strategy.lower())
        except ValueError:
            raise exceptions.invalid_strategy(strategy)


@router.get("", response_model=ProductListResponse)
async def list_products(limit: Optional[int] = Query(None, ge=1, le=500)):
    """List products in catalog order."""
    controller = ProductController()
    return controller.list_products(limit)


@router.get("/search", response_model=SearchResponse)
async def search_products(
    name: Optional[str] = Query(None, description="Name substring"),
    category: Optional[str] = Query(None, description="Exact category"),
    brand: Optional[str] = Query(None, description="Exact brand"),
    strategy: Optional[str] = Query(None, description="indexed or scan"),
    limit: Optional[int] = Query(None, ge=1, le=500)
):
    """Search products by name substring, category and brand."""
    controller = ProductController()
    return controller.search(name, category, brand, strategy, limit)


@router.get("/compare", response_model=CompareResponse)
async def compare_strategies(
    name: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    brand: Optional[str] = Query(None)
):
    """Compare linear-scan and indexed search results."""
    controller = ProductController()
    return controller.compare(name, category, brand)


@router.get("/categories", response_model=ValuesResponse)
async def get_categories():
    """Get all distinct categories."""
    controller = ProductController()
    return controller.get_categories()


@router.get("/brands", response_model=ValuesResponse)
async def get_brands():
    """Get all distinct brands."""
    controller = ProductController()
    return controller.get_brands()


@router.get("/stats", response_model=StatsResponse)
async def get_catalog_stats():
    """Get catalog statistics."""
    controller = ProductController()
    return controller.get_stats()


@router.get("/by-name/{name}", response_model=ProductDetailResponse)
async def get_product_by_name(name: str):
    """Get product by exact name."""
    controller = ProductController()
    return controller.get_by_name(name)
