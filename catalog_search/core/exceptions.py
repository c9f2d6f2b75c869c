"""
Application Exception Handling

Single AppException class for API-level errors with FastAPI integration.
Searches themselves never raise: an empty result is a normal outcome.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception.
    
    Provides a consistent error response format across the API.
    
    Usage:
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", 404)
    
    Error Codes:
        Catalog:
            - CATALOG_NOT_LOADED (503)
            - PRODUCT_NOT_FOUND (404)
        
        Search:
            - INVALID_STRATEGY (400)
            - SEARCH_INCONSISTENT (500)
    """
    
    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.
        
        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }
        
        if self.details:
            error_dict["error"]["details"] = self.details
        
        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException to a JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException(
        "Product catalog not loaded",
        "CATALOG_NOT_LOADED",
        503
    )


def product_not_found(name: str) -> AppException:
    """Create product not found exception."""
    return AppException(
        f"Product '{name}' not found",
        "PRODUCT_NOT_FOUND",
        404,
        {"name": name}
    )


def invalid_strategy(strategy: str) -> AppException:
    """Create unsupported search strategy exception."""
    return AppException(
        f"Unsupported search strategy: {strategy}",
        "INVALID_STRATEGY",
        400,
        {"strategy": strategy}
    )


def search_inconsistent(query: Dict[str, str], scan_total: int, indexed_total: int) -> AppException:
    """Create exception for disagreeing search strategies."""
    return AppException(
        "Indexed search disagrees with linear scan",
        "SEARCH_INCONSISTENT",
        500,
        {"query": query, "scan_total": scan_total, "indexed_total": indexed_total}
    )
