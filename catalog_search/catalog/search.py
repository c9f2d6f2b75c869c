"""
==============================================================================
Search Module
==============================================================================

Combined-criteria product search (AND between criteria).

Strategies:
-----------
- scan: Linear pass over the catalog. Reference behavior.
- search_indexed: Intersects category and brand index entries, then
  filters the survivors by name substring.

Both strategies return products in ascending catalog position and must
return identical lists for any catalog and query. An all-empty query
matches nothing.

==============================================================================
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Set, Union

from pydantic import BaseModel, ConfigDict, computed_field

from .index import CatalogIndex
from .models import Product, SearchQuery


QueryArg = Union[SearchQuery, str, None]


def make_query(query: QueryArg = None, category: str = "", brand: str = "") -> SearchQuery:
    """
    Normalize search arguments into a SearchQuery.
    
    Accepts either a ready SearchQuery or the three criteria as strings
    (name substring first).

    Raises:
        TypeError: If a SearchQuery is combined with category or brand
    """
    if isinstance(query, SearchQuery):
        if category or brand:
            raise TypeError("category and brand must be set on the SearchQuery itself")
        return query
    return SearchQuery(name=query, category=category, brand=brand)


def matches(product: Product, query: SearchQuery) -> bool:
    """Check one product against every present criterion."""
    if query.name and query.name not in product.name:
        return False
    if query.category and product.category != query.category:
        return False
    if query.brand and product.brand != query.brand:
        return False
    return True


def scan(
    catalog: Sequence[Product],
    query: QueryArg = None,
    category: str = "",
    brand: str = "",
) -> List[Product]:
    """
    Search by checking every product in catalog order.
    
    Args:
        catalog: Products in position order
        query: SearchQuery, or the name substring
        category: Exact category (when query is a string)
        brand: Exact brand (when query is a string)
        
    Returns:
        Matching products in position order
        
    Example:
        >>> scan(products, "top")
        [Product(name='Laptop', category='Electronics', brand='BrandA')]
    """
    criteria = make_query(query, category, brand)
    if criteria.is_empty:
        return []
    
    return [product for product in catalog if matches(product, criteria)]


def _intersect(candidates: Optional[Set[int]], positions: Sequence[int]) -> Set[int]:
    if candidates is None:
        return set(positions)
    return candidates.intersection(positions)


def search_indexed(
    index: CatalogIndex,
    query: QueryArg = None,
    category: str = "",
    brand: str = "",
) -> List[Product]:
    """
    Search using the category and brand indexes.
    
    Candidates start unconstrained (None). Category and brand lookups
    intersect them; an unknown value ends the search with no results.
    The name criterion is applied last as a substring filter on the
    remaining candidates, or on the whole catalog when nothing else
    constrained it.
    
    Args:
        index: Built catalog index
        query: SearchQuery, or the name substring
        category: Exact category (when query is a string)
        brand: Exact brand (when query is a string)
        
    Returns:
        Matching products in position order
    """
    criteria = make_query(query, category, brand)
    if criteria.is_empty:
        return []
    
    catalog = index.catalog
    candidates: Optional[Set[int]] = None
    
    if criteria.category:
        positions = index.positions("category", criteria.category)
        if not positions:
            return []
        candidates = _intersect(candidates, positions)
    
    if criteria.brand:
        positions = index.positions("brand", criteria.brand)
        if not positions:
            return []
        candidates = _intersect(candidates, positions)
    
    if criteria.name:
        # by_name holds full names only; containment needs the record itself
        pool = range(len(catalog)) if candidates is None else candidates
        candidates = {i for i in pool if criteria.name in catalog[i].name}
    
    if candidates is None:
        return []
    
    return [catalog[i] for i in sorted(candidates)]


class StrategyComparison(BaseModel):
    """Results of running both strategies on the same query."""

    model_config = ConfigDict(frozen=True)

    query: SearchQuery
    scan_results: List[Product]
    indexed_results: List[Product]

    @computed_field
    @property
    def consistent(self) -> bool:
        return self.scan_results == self.indexed_results


def compare_strategies(
    index: CatalogIndex,
    query: QueryArg = None,
    category: str = "",
    brand: str = "",
) -> StrategyComparison:
    """Run the scan and indexed searches and pair their results."""
    criteria = make_query(query, category, brand)
    return StrategyComparison(
        query=criteria,
        scan_results=scan(index.catalog, criteria),
        indexed_results=search_indexed(index, criteria),
    )
