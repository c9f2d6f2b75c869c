"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter

from catalog_search.catalog.catalog import get_store


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""
    
    def check_catalog(self) -> dict:
        """Check catalog status."""
        store = get_store()
        if store is not None:
            return {"status": "healthy", "products": len(store)}
        return {"status": "not_loaded", "products": 0}
    
    def get_health(self) -> dict:
        """Get full health status."""
        catalog_info = self.check_catalog()
        
        overall = "healthy" if catalog_info["status"] == "healthy" else "degraded"
        
        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"]
            },
            "details": {
                "products_loaded": catalog_info["products"]
            }
        }


@router.get("")
async def health_check():
    """
    Health check endpoint.
    
    Returns API and catalog status.
    """
    controller = HealthController()
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe: ready once the catalog is loaded."""
    return {"ready": get_store() is not None}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
