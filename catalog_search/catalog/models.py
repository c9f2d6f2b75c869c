"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog records and search queries.

Both models are frozen: a Product is identified only by its three
attribute values, and a SearchQuery is a value object passed to either
search strategy.

==============================================================================
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchStrategy(str, Enum):
    """Algorithm used to answer a search."""

    SCAN = "scan"
    INDEXED = "indexed"


class Product(BaseModel):
    """
    Immutable catalog record.
    
    Two products with the same name, category and brand compare equal,
    but each occurrence in a catalog is a separate entry.
    
    Attributes:
        name: Product display name
        category: Product category (e.g., "Electronics")
        brand: Product brand (e.g., "BrandA")
    """
    
    model_config = ConfigDict(frozen=True)
    
    name: str = Field(..., description="Product name")
    category: str = Field(..., description="Product category")
    brand: str = Field(..., description="Product brand")


class SearchQuery(BaseModel):
    """
    Combined search criteria.
    
    An empty string means the criterion is absent and imposes no
    constraint. ``None`` is accepted and treated the same way.
    
    Attributes:
        name: Substring that must be contained in the product name
        category: Exact category value
        brand: Exact brand value
    """
    
    model_config = ConfigDict(frozen=True)
    
    name: str = Field(default="", description="Name substring")
    category: str = Field(default="", description="Exact category")
    brand: str = Field(default="", description="Exact brand")
    
    @field_validator("name", "category", "brand", mode="before")
    @classmethod
    def none_to_empty(cls, value: Any) -> Any:
        """Normalize a missing criterion to the empty string."""
        if value is None:
            return ""
        return value
    
    @property
    def is_empty(self) -> bool:
        """True when no criterion is present."""
        return not (self.name or self.category or self.brand)
