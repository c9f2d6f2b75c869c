"""
==============================================================================
Core Package
==============================================================================

Error handling shared by the catalog and the API layer.

Usage:
------
    from catalog_search.core import exceptions
    raise exceptions.catalog_not_loaded()

==============================================================================
"""

from . import exceptions
from .exceptions import (
    AppException,
    register_exception_handlers,
)

__all__ = [
    "exceptions",
    "AppException",
    "register_exception_handlers",
]
