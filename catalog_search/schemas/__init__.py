"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas for the REST API.

==============================================================================
"""

from .common import MessageResponse
from .product import (
    ProductResponse,
    ProductListResponse,
    SearchResponse,
    ProductDetailResponse,
    ValuesResponse,
    StatsResponse,
    StrategyResult,
    CompareResponse,
)

__all__ = [
    # Common
    "MessageResponse",
    # Product
    "ProductResponse",
    "ProductListResponse",
    "SearchResponse",
    "ProductDetailResponse",
    "ValuesResponse",
    "StatsResponse",
    "StrategyResult",
    "CompareResponse",
]
