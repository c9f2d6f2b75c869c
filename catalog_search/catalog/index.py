"""
==============================================================================
Catalog Index Module
==============================================================================

Builds the catalog and its three attribute indexes in a single pass.

Each index maps an exact attribute value to the ascending tuple of catalog
positions holding that value:

    by_name:     "Laptop"      -> (0,)
    by_category: "Electronics" -> (0, 1)
    by_brand:    "BrandC"      -> (2, 3)

The name index is keyed by the full name only, so it cannot answer
substring queries. Searches by name filter candidates instead.

==============================================================================
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .models import Product


# Module logger
logger = logging.getLogger(__name__)

ATTRIBUTES = ("name", "category", "brand")

PositionIndex = Mapping[str, Tuple[int, ...]]


class CatalogIndex:
    """
    Read-only catalog plus exact-value attribute indexes.
    
    Built once by ``build_index`` and never mutated afterwards, so it can be
    shared between threads for read-only queries.
    
    Attributes:
        catalog: Products in stable position order
        by_name: Exact name -> positions
        by_category: Exact category -> positions
        by_brand: Exact brand -> positions
    """
    
    __slots__ = ("_catalog", "_indexes")
    
    def __init__(
        self,
        catalog: Tuple[Product, ...],
        by_name: PositionIndex,
        by_category: PositionIndex,
        by_brand: PositionIndex,
    ) -> None:
        self._catalog = catalog
        self._indexes: Dict[str, PositionIndex] = {
            "name": by_name,
            "category": by_category,
            "brand": by_brand,
        }
    
    # =========================================================================
    # PROPERTIES
    # =========================================================================
    
    @property
    def catalog(self) -> Tuple[Product, ...]:
        return self._catalog
    
    @property
    def by_name(self) -> PositionIndex:
        return self._indexes["name"]
    
    @property
    def by_category(self) -> PositionIndex:
        return self._indexes["category"]
    
    @property
    def by_brand(self) -> PositionIndex:
        return self._indexes["brand"]
    
    @property
    def record_count(self) -> int:
        return len(self._catalog)
    
    def __len__(self) -> int:
        return len(self._catalog)
    
    # =========================================================================
    # LOOKUPS
    # =========================================================================
    
    def positions(self, attribute: str, value: str) -> Tuple[int, ...]:
        """
        Get catalog positions holding an exact attribute value.
        
        Args:
            attribute: One of "name", "category", "brand"
            value: Exact attribute value
            
        Returns:
            Ascending positions, empty when the value is not in the catalog
            
        Raises:
            KeyError: If attribute is not an indexed attribute
        """
        return self._indexes[attribute].get(value, ())
    
    def lookup_name(self, name: str) -> Optional[Product]:
        """Get the first product with this exact name."""
        positions = self.by_name.get(name)
        if not positions:
            return None
        return self._catalog[positions[0]]
    
    def categories(self) -> List[str]:
        """Distinct categories in first-seen order."""
        return list(self.by_category.keys())
    
    def brands(self) -> List[str]:
        """Distinct brands in first-seen order."""
        return list(self.by_brand.keys())


def _freeze(index: Dict[str, List[int]]) -> PositionIndex:
    return MappingProxyType({value: tuple(positions) for value, positions in index.items()})


def build_index(records: Iterable[Product]) -> CatalogIndex:
    """
    Build the catalog and attribute indexes from records.
    
    Args:
        records: Products in catalog order (may be empty)
        
    Returns:
        CatalogIndex whose positions follow the input order
    """
    catalog = tuple(records)
    built: Dict[str, Dict[str, List[int]]] = {attr: {} for attr in ATTRIBUTES}
    
    for position, product in enumerate(catalog):
        for attr in ATTRIBUTES:
            built[attr].setdefault(getattr(product, attr), []).append(position)
    
    logger.debug(
        f"Indexed {len(catalog)} products: "
        f"{len(built['name'])} names, "
        f"{len(built['category'])} categories, "
        f"{len(built['brand'])} brands"
    )
    
    return CatalogIndex(
        catalog=catalog,
        by_name=_freeze(built["name"]),
        by_category=_freeze(built["category"]),
        by_brand=_freeze(built["brand"]),
    )
